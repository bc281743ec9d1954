"""Main domain parsing pipeline."""

import logging
import re
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional

from tqdm import tqdm

from .config import Config
from .data import OutputWriter
from .dictionary import DictionaryIndex
from .engines import CoverageSegmenter
from .models import DomainRecord, SegmentationResult
from .utils import count_domains, second_level_label

logger = logging.getLogger(__name__)


def is_hidden_file(path: Path) -> bool:
    """Return True for bookkeeping files such as `_SUCCESS` or `.crc`."""
    return path.name.startswith(("_", "."))


def _segment_batch_worker(args: tuple) -> list[tuple[str, SegmentationResult]]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (records, dictionary, delimiter, max_token_length)

    Returns:
        List of (domain, SegmentationResult)
    """
    records, dictionary, delimiter, max_token_length = args
    segmenter = CoverageSegmenter(
        dictionary, delimiter=delimiter, max_token_length=max_token_length
    )
    return [
        (record.domain, segmenter.segment(record.sld, record.occurrences))
        for record in records
    ]


class DomainParsePipeline:
    """Pipeline extracting, counting and segmenting domain names."""

    def __init__(self, config: Config, dictionary: Optional[DictionaryIndex] = None):
        """Initialize domain parsing pipeline.

        Args:
            config: Pipeline configuration
            dictionary: Preloaded dictionary; loaded from config when omitted

        Raises:
            DictionaryLoadError: If the dictionary file cannot be read
        """
        self.config = config
        if dictionary is None:
            dictionary = DictionaryIndex.from_file(
                config.dictionary.path, encoding=config.dictionary.encoding
            )
        self.dictionary = dictionary
        self.pattern = re.compile(config.extraction.pattern)
        self.segmenter = CoverageSegmenter(
            dictionary,
            delimiter=config.segmentation.delimiter,
            max_token_length=config.segmentation.max_token_length,
        )

    def input_files(self, input_path: Path) -> list[Path]:
        """List the files to read.

        Args:
            input_path: A file, or a directory whose visible files are read

        Returns:
            Sorted list of input files
        """
        if input_path.is_dir():
            return sorted(
                p for p in input_path.iterdir()
                if p.is_file() and not is_hidden_file(p)
            )
        return [input_path]

    def iter_lines(self, input_path: Path) -> Iterator[str]:
        """Yield lines from every input file."""
        for path in self.input_files(input_path):
            logger.info(f"Reading from: {path}")
            with open(
                path, "r", encoding=self.config.extraction.encoding, errors="replace"
            ) as f:
                yield from f

    def count_occurrences(self, input_path: Path) -> Counter:
        """Count domain occurrences across the input.

        Args:
            input_path: Input file or directory

        Returns:
            Counter keyed by lowercased domain
        """
        lines = tqdm(self.iter_lines(input_path), desc="Extracting domains", unit=" lines")
        counts = count_domains(lines, self.pattern)
        logger.info(f"Found {len(counts)} unique domains")
        return counts

    def build_records(self, counts: Counter) -> list[DomainRecord]:
        """Select the SLD of each counted domain, sorted by domain."""
        return [
            DomainRecord(domain=domain, sld=second_level_label(domain), occurrences=count)
            for domain, count in sorted(counts.items())
        ]

    def process_record(self, record: DomainRecord) -> SegmentationResult:
        """Segment the SLD of a single record."""
        return self.segmenter.segment(record.sld, record.occurrences)

    def _process_sequential(
        self, records: list[DomainRecord]
    ) -> list[tuple[str, SegmentationResult]]:
        """Segment records in this process."""
        return [
            (record.domain, self.process_record(record))
            for record in tqdm(records, desc="Segmenting")
        ]

    def _process_parallel(
        self, records: list[DomainRecord]
    ) -> list[tuple[str, SegmentationResult]]:
        """Segment records using multiple worker processes."""
        workers = self.config.segmentation.workers
        batch_size = self.config.segmentation.batch_size
        tasks = [
            (
                records[i:i + batch_size],
                self.dictionary,
                self.config.segmentation.delimiter,
                self.config.segmentation.max_token_length,
            )
            for i in range(0, len(records), batch_size)
        ]

        results = []
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_segment_batch_worker, task): index
                for index, task in enumerate(tasks)
            }
            for future in tqdm(
                as_completed(futures), total=len(tasks), desc=f"Segmenting ({workers} workers)"
            ):
                try:
                    results.extend(future.result())
                except Exception:
                    logger.exception(f"Worker failed on batch {futures[future]}")
                    raise

        results.sort(key=lambda item: item[0])
        return results

    def process(self, input_path: Path) -> list[tuple[str, SegmentationResult]]:
        """Extract, count and segment every domain in the input.

        Args:
            input_path: Input file or directory

        Returns:
            (domain, SegmentationResult) pairs sorted by domain
        """
        records = self.build_records(self.count_occurrences(input_path))
        if self.config.segmentation.workers <= 1 or len(records) <= 1:
            return self._process_sequential(records)
        return self._process_parallel(records)

    def run(self) -> int:
        """Run the domain parsing pipeline.

        Returns:
            Number of unique domains written
        """
        input_path = self.config.input_path
        if not input_path:
            raise ValueError("Input path not specified in configuration")

        if not input_path.exists():
            raise FileNotFoundError(f"Input path not found: {input_path}")

        results = self.process(input_path)

        with OutputWriter(
            self.config.output.output_path, format=self.config.output.format
        ) as writer:
            writer.write_results(results)

        logger.info(f"Output saved in: {self.config.output.output_path}")
        return len(results)
