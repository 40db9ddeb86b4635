#!/usr/bin/env python3
"""Sample extraction harness for end-to-end validation.

Runs every HTML page in a directory through the extraction pipeline and
compares each result with the acceptable answers listed in the directory's
expected.yaml. No network access is needed.

Usage:
    # Run against the test fixture pages
    python scripts/run_sample_extraction.py

    # Use a bounded worker pool and repeat each page to surface races
    python scripts/run_sample_extraction.py --max-workers 4 --repeat 20

    # Custom pages directory and configuration
    python scripts/run_sample_extraction.py --pages my_pages --config config.yaml
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import yaml
from dotenv import load_dotenv

from postal_extract.config.loader import load_config
from postal_extract.logging.config import configure_logging
from postal_extract.pipeline import ExtractionPipeline
from postal_extract.reference import load_reference_tables


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print one line per page: status, name and the addresses seen."""
    print_header("Extraction Summary")

    max_name_width = max(len(name) for name, _, _ in rows)

    print("┌──────┬" + "─" * (max_name_width + 2) + "┬" + "─" * 62 + "┐")
    print(f"│ {'OK':<4} │ {'Page':<{max_name_width}} │ {'Address (runs)':<60} │")
    print("├──────┼" + "─" * (max_name_width + 2) + "┼" + "─" * 62 + "┤")

    for name, ok, seen in rows:
        status = "yes" if ok else "NO"
        for i, (address, count) in enumerate(seen.most_common()):
            label = f"{address or '<none>'} ({count})"
            print(
                f"│ {status if i == 0 else '':<4} │ {name if i == 0 else '':<{max_name_width}} │ {label[:60]:<60} │"
            )

    print("└──────┴" + "─" * (max_name_width + 2) + "┴" + "─" * 62 + "┘")


def main():
    """Main entry point for sample extraction harness."""
    parser = argparse.ArgumentParser(
        description="Run sample pages through the extractor for end-to-end validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--pages",
        type=Path,
        default=Path("tests/fixtures/pages"),
        help="Directory of .html pages plus expected.yaml (default: tests/fixtures/pages)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: built-in defaults)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Use a bounded worker pool of this size",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Runs per page (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()

    load_dotenv()

    print_header("Postal Address Extractor - Sample Extraction Harness")

    expected_file = args.pages / "expected.yaml"
    if not expected_file.exists():
        print(f"❌ Error: expected.yaml not found in {args.pages}")
        return 1

    try:
        app_config, env_config = load_config(args.config)
        if args.max_workers is not None:
            app_config.extraction.max_workers = args.max_workers

        configure_logging(
            level=args.log_level,
            format_type=app_config.logging.format,
            environment="validation",
        )

        refs = app_config.reference_tables
        tables = load_reference_tables(refs.states_path, refs.street_suffixes_path)
        print(f"✓ Loaded {len(tables.states)} states and {len(tables.street_suffixes)} street suffixes")
        print(f"✓ Worker mode: {'bounded pool of ' + str(args.max_workers) if args.max_workers else 'thread per candidate'}")

        with open(expected_file) as f:
            expected = yaml.safe_load(f) or {}

        pipeline = ExtractionPipeline(app_config, tables)
        rows = []
        try:
            for name in sorted(expected):
                markup = (args.pages / name).read_text(encoding="utf-8")
                seen = Counter(
                    pipeline.run_for_html(markup, source=name).address
                    for _ in range(args.repeat)
                )
                ok = all(address in expected[name] for address in seen)
                rows.append((name, ok, seen))
        finally:
            pipeline.close()

        if not rows:
            print("No pages listed in expected.yaml")
            return 0

        print_summary_table(rows)

        failed = [name for name, ok, _ in rows if not ok]
        if failed:
            print(f"\n❌ {len(failed)} page(s) produced unexpected addresses: {', '.join(failed)}")
            return 1

        print(f"\n✓ All {len(rows)} pages matched their expected addresses")
        return 0

    except Exception as e:
        print(f"\n❌ Fatal error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
