"""Command-line entry point for the postal address extractor."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from postal_extract.config.environment import EnvironmentConfig
from postal_extract.config.exceptions import ConfigurationError
from postal_extract.config.loader import load_config, validate_config_file
from postal_extract.config.models import AppConfig
from postal_extract.fetch.exceptions import FetchError
from postal_extract.logging import get_logger
from postal_extract.logging.config import configure_logging
from postal_extract.pipeline import ExtractionPipeline
from postal_extract.reference import ReferenceTableError, load_reference_tables

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Log level priority: CLI > environment > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level or "INFO"

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="postal-extract",
        description="Extract a US postal address from a web page",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Page URL (prompted for on stdin when no input is given)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--html-file",
        type=Path,
        help="Read HTML from a local file instead of fetching a URL",
    )
    source.add_argument(
        "--text-file",
        type=Path,
        help="Read plain text from a local file instead of fetching a URL",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--fail-on-empty",
        action="store_true",
        help=f"Exit with status {EXIT_NOT_FOUND} when no address is found",
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate the configuration file and exit without extracting",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 on success, 1 on failure, 2 for an empty result with --fail-on-empty)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.url and (args.html_file or args.text_file):
        parser.error("give either a URL or a file, not both")

    if args.check_config:
        return EXIT_OK if validate_config_file(args.config) else EXIT_ERROR

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        refs = app_config.reference_tables
        tables = load_reference_tables(refs.states_path, refs.street_suffixes_path)
        pipeline = ExtractionPipeline(app_config, tables)

        try:
            if args.html_file:
                result = pipeline.run_for_html(
                    args.html_file.read_text(encoding="utf-8"), source=str(args.html_file)
                )
            elif args.text_file:
                result = pipeline.run_for_text(
                    args.text_file.read_text(encoding="utf-8"), source=str(args.text_file)
                )
            else:
                url = args.url or input("Enter url: ").strip()
                if not url:
                    print("No URL given", file=sys.stderr)
                    return EXIT_ERROR
                result = pipeline.run_for_url(url)
        finally:
            pipeline.close()

        print(result.address)

        if args.fail_on_empty and not result.found:
            return EXIT_NOT_FOUND
        return EXIT_OK

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ReferenceTableError as e:
        print(f"Reference Table Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except FetchError as e:
        print(f"Failed to retrieve page: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Failed to read input: {e}", file=sys.stderr)
        return EXIT_ERROR
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
