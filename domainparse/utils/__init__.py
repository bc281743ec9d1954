"""Utility functions."""

from .candidates import enumerate_spans, sort_spans
from .chains import partition_chains
from .domains import count_domains, extract_domains, second_level_label
from .rendering import join_parses, render_chain
from .scoring import chain_coverage, select_best_chains

__all__ = [
    "enumerate_spans",
    "sort_spans",
    "partition_chains",
    "chain_coverage",
    "select_best_chains",
    "render_chain",
    "join_parses",
    "extract_domains",
    "count_domains",
    "second_level_label",
]
