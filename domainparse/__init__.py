"""Split the second-level label of domain names into dictionary words."""

from .dictionary import DictionaryIndex, DictionaryLoadError
from .engines import CoverageSegmenter, parse_options, segment
from .models import Chain, DomainRecord, SegmentationResult, Span

__all__ = [
    "DictionaryIndex",
    "DictionaryLoadError",
    "CoverageSegmenter",
    "parse_options",
    "segment",
    "Span",
    "Chain",
    "DomainRecord",
    "SegmentationResult",
]
