"""Domain extraction, counting and SLD selection."""

import re
from collections import Counter
from typing import Iterable, Iterator, Optional, Pattern, Union

# Anything with at least one dot between non-space runs. Kept loose so that
# zone files and free text both work.
DOMAIN_PATTERN = re.compile(r"\S+(\.\S+)+")


def _compile(pattern: Optional[Union[str, Pattern]]) -> Pattern:
    if pattern is None:
        return DOMAIN_PATTERN
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


def extract_domains(
    line: str, pattern: Optional[Union[str, Pattern]] = None
) -> Iterator[str]:
    """Yield every domain-like string in a line, lowercased.

    Args:
        line: Raw input line
        pattern: Override for DOMAIN_PATTERN

    Yields:
        Lowercased matches in line order
    """
    for match in _compile(pattern).finditer(line):
        yield match.group(0).lower()


def count_domains(
    lines: Iterable[str], pattern: Optional[Union[str, Pattern]] = None
) -> Counter:
    """Count occurrences of each domain across lines.

    Args:
        lines: Input lines
        pattern: Override for DOMAIN_PATTERN

    Returns:
        Counter keyed by lowercased domain
    """
    compiled = _compile(pattern)
    counts: Counter = Counter()
    for line in lines:
        counts.update(extract_domains(line, compiled))
    return counts


def second_level_label(domain: str) -> str:
    """Return the label right before the TLD.

    Trailing empty labels are ignored ("example.com." gives "example").
    A domain that is left with a single label returns that label.

    Args:
        domain: Lowercased domain

    Returns:
        The SLD, possibly empty for inputs such as "a..com"
    """
    labels = domain.split(".")
    while len(labels) > 1 and not labels[-1]:
        labels.pop()
    if len(labels) < 2:
        return labels[0]
    return labels[-2]
