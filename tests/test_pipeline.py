"""End-to-end tests for the domain parsing pipeline."""

import json
from pathlib import Path

import pandas as pd
import pytest

from domainparse import DictionaryIndex
from domainparse.config import Config
from domainparse.pipeline import DomainParsePipeline


INPUT_TEXT = """www.catsapple.com catsapple.com
Visit WWW.CatsApple.com today
mail.xyz.org
no domains on this line
"""

EXPECTED_LINES = [
    "catsapple.com\tcatsapple|cats apple|1",
    "mail.xyz.org\txyz|xyz|1",
    "www.catsapple.com\tcatsapple|cats apple|2",
]


def create_test_data(tmp_path: Path):
    """Create an input file and a dictionary file."""
    input_path = tmp_path / "input.txt"
    input_path.write_text(INPUT_TEXT, encoding="utf-8")

    dictionary_path = tmp_path / "dictionary.txt"
    dictionary_path.write_text("cat\ncats\napp\napple\n", encoding="utf-8")

    return input_path, dictionary_path


def make_config(input_path: Path, dictionary_path: Path, output_path: Path, **segmentation) -> Config:
    config = Config(input_path=input_path)
    config.dictionary.path = dictionary_path
    config.output.output_path = output_path
    for key, value in segmentation.items():
        setattr(config.segmentation, key, value)
    return config


class TestPipeline:
    """Tests for the main pipeline."""

    def test_text_output(self, tmp_path):
        """Each unique domain becomes one line, sorted by domain."""
        input_path, dictionary_path = create_test_data(tmp_path)
        output_path = tmp_path / "out" / "domains.txt"

        pipeline = DomainParsePipeline(make_config(input_path, dictionary_path, output_path))
        count = pipeline.run()

        assert count == 3
        assert output_path.read_text(encoding="utf-8").splitlines() == EXPECTED_LINES

    def test_csv_output(self, tmp_path):
        input_path, dictionary_path = create_test_data(tmp_path)
        output_path = tmp_path / "domains.csv"

        config = make_config(input_path, dictionary_path, output_path)
        config.output.format = "csv"
        DomainParsePipeline(config).run()

        results = pd.read_csv(output_path)
        assert list(results.columns) == ["domain", "sld", "parses", "occurrences"]
        assert list(results["domain"]) == ["catsapple.com", "mail.xyz.org", "www.catsapple.com"]
        assert list(results["occurrences"]) == [1, 1, 2]
        assert results["parses"].iloc[0] == "cats apple"

    def test_json_output(self, tmp_path):
        input_path, dictionary_path = create_test_data(tmp_path)
        output_path = tmp_path / "domains.json"

        config = make_config(input_path, dictionary_path, output_path)
        config.output.format = "json"
        DomainParsePipeline(config).run()

        rows = json.loads(output_path.read_text(encoding="utf-8"))
        assert rows[1] == {"domain": "mail.xyz.org", "sld": "xyz", "parses": "xyz", "occurrences": 1}

    def test_directory_input(self, tmp_path):
        """All visible files in a directory are read; bookkeeping files are not."""
        _, dictionary_path = create_test_data(tmp_path)
        input_dir = tmp_path / "zones"
        input_dir.mkdir()
        (input_dir / "part-0.txt").write_text("catsapple.com\n", encoding="utf-8")
        (input_dir / "part-1.txt").write_text("catsapple.com xyz.net\n", encoding="utf-8")
        (input_dir / "_SUCCESS").write_text("ignored.com\n", encoding="utf-8")
        output_path = tmp_path / "domains.txt"

        DomainParsePipeline(make_config(input_dir, dictionary_path, output_path)).run()

        assert output_path.read_text(encoding="utf-8").splitlines() == [
            "catsapple.com\tcatsapple|cats apple|2",
            "xyz.net\txyz|xyz|1",
        ]

    def test_parallel_matches_sequential(self, tmp_path):
        """Worker count does not change the output."""
        input_path, dictionary_path = create_test_data(tmp_path)
        sequential_path = tmp_path / "sequential.txt"
        parallel_path = tmp_path / "parallel.txt"

        DomainParsePipeline(make_config(input_path, dictionary_path, sequential_path)).run()
        DomainParsePipeline(
            make_config(input_path, dictionary_path, parallel_path, workers=2, batch_size=1)
        ).run()

        assert parallel_path.read_text(encoding="utf-8") == sequential_path.read_text(encoding="utf-8")

    def test_preloaded_dictionary(self, tmp_path):
        input_path, _ = create_test_data(tmp_path)
        output_path = tmp_path / "domains.txt"
        config = make_config(input_path, tmp_path / "unused.txt", output_path)

        pipeline = DomainParsePipeline(config, dictionary=DictionaryIndex(["xy"]))
        pipeline.run()

        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert "mail.xyz.org\txyz|xy z|1" in lines

    def test_missing_input(self, tmp_path):
        _, dictionary_path = create_test_data(tmp_path)
        config = make_config(tmp_path / "missing.txt", dictionary_path, tmp_path / "out.txt")

        with pytest.raises(FileNotFoundError):
            DomainParsePipeline(config).run()


class TestConfig:
    """Tests for configuration."""

    def test_defaults(self):
        config = Config()
        assert config.input_path is None
        assert config.segmentation.delimiter == ","
        assert config.segmentation.workers == 1
        assert config.output.format == "text"
        assert config.extraction.pattern == r"\S+(\.\S+)+"

    def test_config_from_yaml(self, tmp_path):
        """Test loading config from YAML."""
        yaml_content = """
input_path: "data/zones"
dictionary:
  path: "words.txt"
segmentation:
  delimiter: ";"
  max_token_length: 20
output:
  format: "csv"
"""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml_content)

        config = Config.from_yaml(config_path)
        assert config.input_path == Path("data/zones")
        assert config.dictionary.path == Path("words.txt")
        assert config.segmentation.delimiter == ";"
        assert config.segmentation.max_token_length == 20
        assert config.output.format == "csv"

    def test_yaml_round_trip(self, tmp_path):
        config = Config(input_path="zones")
        config.segmentation.workers = 4
        config_path = tmp_path / "config.yaml"

        config.to_yaml(config_path)
        assert Config.from_yaml(config_path) == config

    @pytest.mark.parametrize("delimiter", ["|", "\t", ",,"])
    def test_rejects_bad_delimiter(self, delimiter):
        with pytest.raises(ValueError):
            Config(segmentation={"delimiter": delimiter})

    def test_rejects_bad_extraction_pattern(self):
        with pytest.raises(ValueError, match="Invalid extraction pattern"):
            Config(extraction={"pattern": "([a-z"})

    def test_repository_config(self):
        config_path = Path(__file__).parent.parent / "config.yaml"

        if config_path.exists():
            config = Config.from_yaml(config_path)
            assert isinstance(config, Config)
            assert config.output.format == "text"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
