"""Command-line interface for the domain parsing pipeline."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import Config, SegmentationConfig
from .dictionary import DictionaryIndex, DictionaryLoadError
from .engines import CoverageSegmenter
from .pipeline import DomainParsePipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="domainparse",
        description="Find domain names in text and split their SLDs into dictionary words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  domainparse --config config.yaml

  # Direct arguments
  domainparse run --input zones/ --output out/domains.txt --dictionary dictionary.txt

  # Parallel workers and CSV output
  domainparse run --input zones/ --output out/domains.csv --format csv --workers 8

  # Split a few labels directly
  domainparse segment catsapple examplesite --dictionary dictionary.txt
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    run_parser = subparsers.add_parser("run", help="Process input files")
    setup_run_parser(run_parser)

    segment_parser = subparsers.add_parser("segment", help="Split individual labels")
    setup_segment_parser(segment_parser)

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = build_parser()
    args_list = list(sys.argv[1:] if argv is None else argv)

    # Verbose flags given before the command belong to the subcommand
    leading = []
    while args_list and args_list[0] in ("-v", "--verbose"):
        leading.append(args_list.pop(0))

    # If no command specified, treat as run command
    if not args_list or args_list[0] not in ("run", "segment", "-h", "--help"):
        args_list.insert(0, "run")
    args_list[1:1] = leading

    return parser.parse_args(args_list)


def setup_run_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for run command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )

    # Input/Output
    parser.add_argument(
        "--input",
        type=Path,
        help="Input text file, or directory of files",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file path",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        help="Dictionary file, one word per line (default: dictionary.txt)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "csv", "json"],
        help="Output format (default: text)",
    )

    # Segmentation options
    parser.add_argument(
        "--delimiter",
        help="Separator between parse options (default: ',')",
    )
    parser.add_argument(
        "--max-token-length",
        type=int,
        help="Leave labels longer than this unsplit",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1, use e.g. 8 for multi-core)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        help="Domains per worker task (default: 1000)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument(
        "tokens",
        nargs="+",
        help="Labels to split (lowercased before lookup)",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path("dictionary.txt"),
        help="Dictionary file, one word per line (default: dictionary.txt)",
    )
    parser.add_argument(
        "--delimiter",
        default=",",
        help="Separator between parse options (default: ',')",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if args.input:
        config.input_path = args.input
    if args.output:
        config.output.output_path = args.output
    if args.format:
        config.output.format = args.format
    if args.dictionary:
        config.dictionary.path = args.dictionary

    segmentation = config.segmentation.model_dump()
    if args.delimiter is not None:
        segmentation["delimiter"] = args.delimiter
    if args.max_token_length is not None:
        segmentation["max_token_length"] = args.max_token_length
    if args.workers is not None:
        segmentation["workers"] = args.workers
    if args.batch_size is not None:
        segmentation["batch_size"] = args.batch_size
    # Re-validate so CLI values get the same checks as YAML ones
    config.segmentation = SegmentationConfig(**segmentation)

    return config


def handle_run(args: argparse.Namespace) -> int:
    """Handle run command."""
    try:
        config = build_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found - {e}", file=sys.stderr)
        return 1
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_path:
        print("Error: Input path is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = DomainParsePipeline(config)
    except DictionaryLoadError as e:
        logging.error("Dictionary could not be loaded")
        print(f"Error: {e}", file=sys.stderr)
        print("Check --dictionary or the dictionary.path config value", file=sys.stderr)
        return 1

    try:
        domain_count = pipeline.run()
        print(f"\nProcessed {domain_count} unique domains")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Domain parsing failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    try:
        dictionary = DictionaryIndex.from_file(args.dictionary)
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        segmentation = SegmentationConfig(delimiter=args.delimiter)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    segmenter = CoverageSegmenter(dictionary, delimiter=segmentation.delimiter)
    for token in args.tokens:
        result = segmenter.segment(token.lower())
        print(f"{result.sld}|{result.parse_field}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "segment":
        return handle_segment(args)
    else:
        return handle_run(args)


if __name__ == "__main__":
    sys.exit(main())
