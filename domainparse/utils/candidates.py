"""Enumerate every dictionary word contained in a token."""

from ..dictionary import DictionaryIndex
from ..models import Span


def enumerate_spans(token: str, dictionary: DictionaryIndex) -> list[Span]:
    """Find all substrings of the token that are dictionary words.

    Nested and overlapping matches are all kept (both "cat" and "cats" at
    position 0). Substrings longer than the longest dictionary word are
    skipped since they cannot match.

    Args:
        token: Lowercased token to scan
        dictionary: Known words

    Returns:
        List of spans, by start ascending and longest first within a start
    """
    n = len(token)
    max_len = dictionary.max_word_length
    spans = []

    for start in range(n):
        for end in range(min(n, start + max_len), start, -1):
            word = token[start:end]
            if word in dictionary:
                spans.append(Span(word, start, end))

    for span in spans:
        assert 0 <= span.start < span.end <= n, \
            f"Invalid indices: {span.start}, {span.end} for token length {n}"
        assert token[span.start:span.end] == span.word, \
            f"Span text mismatch at ({span.start}, {span.end})"

    return spans


def sort_spans(spans: list[Span]) -> list[Span]:
    """Order spans by start position, longest word first on equal starts."""
    return sorted(spans, key=lambda span: (span.start, -span.length))
