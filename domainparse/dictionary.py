"""Read-only dictionary of known words."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

logger = logging.getLogger(__name__)


class DictionaryLoadError(RuntimeError):
    """Raised when the dictionary source cannot be read."""


class DictionaryIndex:
    """Immutable set of lowercase words.

    Built once and shared by reference between segmentation calls (and
    pickled to worker processes). Lookups are case-sensitive against the
    lowercased entries, so callers lowercase tokens before querying.
    """

    __slots__ = ("_words", "_max_word_length")

    def __init__(self, words: Iterable[str] = ()):
        """Build the index.

        Args:
            words: Raw words; each is stripped and lowercased, blanks dropped
        """
        normalized = (word.strip().lower() for word in words)
        self._words = frozenset(word for word in normalized if word)
        self._max_word_length = max((len(w) for w in self._words), default=0)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], encoding: str = "utf-8"
    ) -> "DictionaryIndex":
        """Load a one-word-per-line dictionary file.

        Args:
            path: Dictionary file path
            encoding: File encoding

        Returns:
            Loaded dictionary

        Raises:
            DictionaryLoadError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            with open(path, "r", encoding=encoding) as f:
                index = cls(f)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(
                f"I/O error when trying to open / read the dictionary at {path}: {e}"
            ) from e

        if not index:
            logger.warning(f"Dictionary {path} is empty; no token will be split")
        else:
            logger.info(f"Loaded {len(index)} dictionary words from {path}")
        return index

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __reduce__(self):
        return (self.__class__, (tuple(self._words),))

    @property
    def words(self) -> frozenset[str]:
        return self._words

    @property
    def max_word_length(self) -> int:
        """Length of the longest word (0 for an empty dictionary)."""
        return self._max_word_length

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(words={len(self._words)})"
