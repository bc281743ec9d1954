"""Segmentation engines."""

from .base import SegmentationEngine
from .coverage_engine import CoverageSegmenter, parse_options, segment

__all__ = ["SegmentationEngine", "CoverageSegmenter", "parse_options", "segment"]
