"""Base class for segmentation engines."""

from abc import ABC, abstractmethod

from ..dictionary import DictionaryIndex
from ..models import SegmentationResult


class SegmentationEngine(ABC):
    """Base class for segmentation engines."""

    def __init__(self, dictionary: DictionaryIndex, delimiter: str = ","):
        """Initialize segmentation engine.

        Args:
            dictionary: Known words, shared read-only
            delimiter: Separator between parse options
        """
        self.dictionary = dictionary
        self.delimiter = delimiter

    @abstractmethod
    def parse_options(self, token: str) -> list[str]:
        """Return the best parses of a token.

        Args:
            token: Lowercased SLD

        Returns:
            One or more rendered parses
        """
        pass

    def segment(self, token: str, occurrences: int = 0) -> SegmentationResult:
        """Segment a token and wrap the parses in a result.

        Args:
            token: Lowercased SLD
            occurrences: Count carried through unchanged

        Returns:
            SegmentationResult for the token
        """
        return SegmentationResult(
            sld=token,
            parses=self.parse_options(token),
            occurrences=occurrences,
            delimiter=self.delimiter,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dictionary={self.dictionary!r})"
