"""Data models for the domain parsing pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    """A dictionary word found in a token at [start, end)."""

    word: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return len(self.word)


@dataclass(frozen=True)
class Chain:
    """Non-overlapping spans ordered left to right."""

    spans: tuple[Span, ...]

    @property
    def coverage(self) -> int:
        """Number of token characters covered by dictionary words."""
        return sum(span.length for span in self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def __iter__(self):
        return iter(self.spans)


@dataclass
class DomainRecord:
    """A unique domain with its occurrence count and selected SLD."""

    domain: str
    sld: str
    occurrences: int


@dataclass
class SegmentationResult:
    """Result of segmenting one SLD."""

    sld: str
    parses: list[str] = field(default_factory=list)
    occurrences: int = 0
    delimiter: str = ","

    @property
    def parse_field(self) -> str:
        """All parse options joined with the delimiter, duplicates kept."""
        from .utils.rendering import join_parses

        return join_parses(self.parses, self.delimiter)

    def to_line(self, domain: str) -> str:
        """Render as `<domain>\\t<sld>|<parses>|<occurrences>`."""
        return f"{domain}\t{self.sld}|{self.parse_field}|{self.occurrences}"

    def to_dict(self, domain: str) -> dict:
        """Convert to a flat row for tabular output."""
        return {
            "domain": domain,
            "sld": self.sld,
            "parses": self.parse_field,
            "occurrences": self.occurrences,
        }
