"""Configuration management for the domain parsing pipeline."""

import re
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .utils.domains import DOMAIN_PATTERN


class DictionaryConfig(BaseModel):
    """Configuration for the word dictionary."""

    path: Path = Path("dictionary.txt")
    encoding: str = "utf-8"


class ExtractionConfig(BaseModel):
    """Configuration for pulling domains out of input text."""

    pattern: str = DOMAIN_PATTERN.pattern
    encoding: str = "utf-8"

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, v):
        """Make sure the pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid extraction pattern {v!r}: {e}")
        return v


class SegmentationConfig(BaseModel):
    """Configuration for the segmentation engine."""

    delimiter: str = Field(default=",", min_length=1, max_length=1)
    max_token_length: Optional[int] = Field(
        default=None, ge=1, description="Tokens longer than this are left unsplit"
    )
    workers: int = Field(default=1, ge=1)
    batch_size: int = Field(default=1000, ge=1)

    @field_validator("delimiter")
    @classmethod
    def check_delimiter(cls, v):
        """Reject characters that would break the output line format."""
        if v in ("|", "\t", "\n", " "):
            raise ValueError(f"Delimiter {v!r} collides with the output format")
        return v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_path: Path = Path("output/domains.txt")
    format: Literal["text", "csv", "json"] = "text"


class Config(BaseModel):
    """Main configuration for the domain parsing pipeline."""

    input_path: Optional[Path] = None
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
