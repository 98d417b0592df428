"""
CLI interface for the car chat response parser.
"""

import argparse
import json
import sys
import logging
from pathlib import Path
from typing import List, Optional, Tuple
from .models import NormalizedResponse
from .utils import responses_to_dict, save_to_file
from .logging_config import setup_logging
from .config import ParserConfig
from .validator import ListingValidator, ValidationReport

DEFAULT_CONFIG_PATH = 'parser_config.json'


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='car-chat-parser',
        description="Extract car listing details and sources from search agent replies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s reply.md
  cat reply.md | %(prog)s
  %(prog)s replies/*.md --output listings.csv --validate
        """
    )

    parser.add_argument(
        'inputs',
        nargs='*',
        help="Agent response files to parse (default: read stdin; '-' also means stdin)"
    )

    parser.add_argument(
        '--output',
        help='Output file path (default: print JSON to stdout). Format auto-detected from extension (.json or .csv)'
    )

    parser.add_argument(
        '--format',
        choices=['json', 'csv', 'auto'],
        default='auto',
        help='Output format: json, csv, or auto (detect from file extension). Default: auto'
    )

    parser.add_argument(
        '--validate',
        action='store_true',
        help='Check extracted details and print a validation report to stderr'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Set logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        help='Optional file path to write logs to'
    )

    parser.add_argument(
        '--config',
        help='Path to configuration file (JSON). CLI arguments override config file settings.'
    )

    parser.add_argument(
        '--create-config',
        help='Create a default configuration file at the specified path and exit'
    )

    return parser


def read_inputs(inputs: List[str]) -> List[Tuple[str, str]]:
    """
    Read each input as text.

    Returns:
        List of (name, text) pairs

    Raises:
        OSError: If a file can't be read
        UnicodeDecodeError: If a file is not UTF-8
    """
    if not inputs:
        inputs = ['-']

    texts = []
    for name in inputs:
        if name == '-':
            texts.append(('<stdin>', sys.stdin.read()))
        else:
            texts.append((name, Path(name).read_text(encoding='utf-8')))
    return texts


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_arg_parser().parse_args(argv)

    # Handle --create-config
    if args.create_config:
        ParserConfig.create_default(args.create_config)
        print(f"Created default configuration file: {args.create_config}")
        print("Edit this file to add listing websites or heading keywords.")
        sys.exit(0)

    # Basic logging until the config says otherwise
    setup_logging(level=logging.INFO, log_file=None)
    logger = logging.getLogger(__name__)

    # Load configuration file if provided, or try default location
    if args.config:
        config_path = args.config
    elif Path(DEFAULT_CONFIG_PATH).exists():
        config_path = DEFAULT_CONFIG_PATH
        logger.info(f"Auto-loading default config from {DEFAULT_CONFIG_PATH}")
    else:
        config_path = None

    if config_path:
        try:
            config = ParserConfig.from_file(config_path)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading config file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = ParserConfig()

    # Override config with CLI arguments (CLI takes precedence)
    if args.output:
        config.output_path = args.output
    if args.format != 'auto':
        config.output_format = args.format
    if args.log_level != 'INFO':
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file
    if args.validate:
        config.validate = True

    # Reconfigure logging with final config settings
    setup_logging(level=getattr(logging, config.log_level, logging.INFO), log_file=config.log_file)
    logger = logging.getLogger(__name__)

    try:
        response_parser = config.build_parser()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error in website configuration: {e}", file=sys.stderr)
        sys.exit(1)
    logger.debug(f"Known websites: {[site.name for site in response_parser.registry]}")

    try:
        inputs = read_inputs(args.inputs)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        logger.error(f"Failed to read input: {e}")
        sys.exit(1)

    names = [name for name, _ in inputs]
    responses: List[NormalizedResponse] = []
    for name, text in inputs:
        response = response_parser.parse(text)
        responses.append(response)
        logger.info(
            f"{name}: {'details found' if response.details else 'no details'}, "
            f"{len(response.sources)} source(s)"
        )

    if config.validate:
        report = ValidationReport()
        for name, response in zip(names, responses):
            if not response.details:
                continue
            is_valid, issues = ListingValidator.validate_details(response.details)
            report.add_result(response.details, is_valid, issues)
            for issue in issues:
                logger.debug(f"{name}: {issue}")
        report.print_report(file=sys.stderr)

    if config.output_path:
        save_to_file(responses, config.output_path, format=config.output_format, names=names)
        logger.info(f"Saved {len(responses)} response(s) to {config.output_path}")
    else:
        json.dump(responses_to_dict(responses, names), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write('\n')


if __name__ == "__main__":
    main()
