"""Data output modules."""

from .output_writer import OutputWriter

__all__ = ["OutputWriter"]
