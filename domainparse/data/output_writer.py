"""Output writer for segmented domains."""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Literal, Tuple, Union

import pandas as pd

from ..models import SegmentationResult

logger = logging.getLogger(__name__)


class OutputWriter:
    """
    Writes segmentation results keyed by domain.

    The "text" format is the line format downstream consumers read:
    `<domain>\\t<sld>|<parses>|<occurrences>`. CSV and JSON carry the same
    fields as columns. Records are written sorted by domain.
    Can be used as a context manager; everything is written on close.
    """

    def __init__(
        self,
        output_path: Union[str, Path],
        format: Literal["text", "csv", "json"] = "text",
    ):
        """
        Initialize the output writer.

        Args:
            output_path: Path to write output file.
            format: Output format (text, csv, or json).
        """
        if format not in ("text", "csv", "json"):
            raise ValueError(f"Unsupported output format: {format}")

        self.output_path = Path(output_path)
        self.format = format
        self._buffer: List[Tuple[str, SegmentationResult]] = []
        self._total_written = 0

        # Ensure output directory exists
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def write_result(self, domain: str, result: SegmentationResult) -> None:
        """
        Add a single result to the buffer.

        Args:
            domain: Full domain the result belongs to.
            result: Segmentation of the domain's SLD.
        """
        self._buffer.append((domain, result))

    def write_results(self, results: Iterable[Tuple[str, SegmentationResult]]) -> None:
        """
        Add multiple (domain, result) pairs to the buffer.

        Args:
            results: Iterable of (domain, SegmentationResult) pairs.
        """
        for domain, result in results:
            self.write_result(domain, result)

    def _write_to_file(self, path: Path, records: List[Tuple[str, SegmentationResult]]) -> None:
        """Write records to a specific file."""
        if self.format == "text":
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for domain, result in records:
                    f.write(result.to_line(domain) + "\n")
        elif self.format == "csv":
            rows = [result.to_dict(domain) for domain, result in records]
            df = pd.DataFrame(rows, columns=["domain", "sld", "parses", "occurrences"])
            df.to_csv(path, index=False)
        elif self.format == "json":
            rows = [result.to_dict(domain) for domain, result in records]
            with open(path, "w", encoding="utf-8") as f:
                json.dump(rows, f, ensure_ascii=False, indent=2)

    def flush(self) -> None:
        """Write all buffered results to the output path."""
        records = sorted(self._buffer, key=lambda record: record[0])
        self._write_to_file(self.output_path, records)
        self._total_written = len(records)
        logger.info(f"Wrote {len(records)} domains to {self.output_path}")

    def __enter__(self) -> "OutputWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - flush on close unless an error occurred."""
        if exc_type is None:
            self.flush()

    @property
    def count(self) -> int:
        """Return the number of results written by the last flush."""
        return self._total_written
