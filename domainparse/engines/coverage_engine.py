"""Dictionary-coverage segmentation engine."""

import logging
from typing import Optional

from ..dictionary import DictionaryIndex
from ..models import SegmentationResult
from ..utils import (
    enumerate_spans,
    partition_chains,
    render_chain,
    select_best_chains,
    sort_spans,
)
from .base import SegmentationEngine

logger = logging.getLogger(__name__)


def parse_options(token: str, dictionary: DictionaryIndex) -> list[str]:
    """Split a token into the dictionary words that cover it best.

    Candidates are grouped into chains with first-fit, and every chain tied
    for the most covered characters is rendered. A token with no dictionary
    word in it is its own single parse.

    Args:
        token: Lowercased SLD
        dictionary: Known words

    Returns:
        Rendered parses in chain order, duplicates kept
    """
    spans = enumerate_spans(token, dictionary)
    if not spans:
        return [token]

    chains = partition_chains(sort_spans(spans))
    best = select_best_chains(chains)
    return [render_chain(token, chain) for chain in best]


def segment(
    token: str,
    dictionary: DictionaryIndex,
    occurrences: int = 0,
    delimiter: str = ",",
) -> SegmentationResult:
    """Segment one token.

    Args:
        token: Lowercased SLD
        dictionary: Known words
        occurrences: Count carried through unchanged
        delimiter: Separator between parse options

    Returns:
        SegmentationResult with the token, its parses and the count
    """
    return SegmentationResult(
        sld=token,
        parses=parse_options(token, dictionary),
        occurrences=occurrences,
        delimiter=delimiter,
    )


class CoverageSegmenter(SegmentationEngine):
    """Segmenter picking the chains with maximal dictionary coverage."""

    def __init__(
        self,
        dictionary: DictionaryIndex,
        delimiter: str = ",",
        max_token_length: Optional[int] = None,
    ):
        """Initialize coverage segmenter.

        Args:
            dictionary: Known words, shared read-only
            delimiter: Separator between parse options
            max_token_length: Longer tokens are returned unsplit (None = no limit)
        """
        super().__init__(dictionary, delimiter)
        self.max_token_length = max_token_length

    def parse_options(self, token: str) -> list[str]:
        if self.max_token_length is not None and len(token) > self.max_token_length:
            logger.debug(
                f"Token of length {len(token)} exceeds {self.max_token_length}, left unsplit"
            )
            return [token]
        return parse_options(token, self.dictionary)
