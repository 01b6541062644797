# main.py

"""Entry point for the tyrecompare application (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from tyrecompare.config.logging_config import setup_logging
from tyrecompare.config.settings import Settings

logger = logging.getLogger("tyrecompare.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    valid_keys = ", ".join(v["id"] for v in Settings.AVAILABLE_VENDORS)

    parser = argparse.ArgumentParser(
        prog="tyrecompare",
        description="Tyre offer price comparison across vendor portals.",
        epilog=f"Available vendors: {valid_keys}",
    )
    parser.add_argument(
        "size",
        nargs="?",
        default=None,
        help="Tyre size, e.g. '205/55 R16 91V'. Omit to launch the TUI.",
    )
    parser.add_argument(
        "-b",
        "--brand",
        default="",
        help="Optional brand filter passed to the search service.",
    )
    parser.add_argument(
        "-v",
        "--vendors",
        default=None,
        help="Comma-separated vendor keys (default: all).",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        default=not Settings.USE_FIXTURE,
        help="Query the Offer Search Service instead of demo data.",
    )
    parser.add_argument(
        "--demo",
        action="store_false",
        dest="remote",
        help="Use the built-in demo offers (overrides TYRECOMPARE_USE_FIXTURE).",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        dest="api_url",
        help=f"Offer Search Service base URL (default: {Settings.API_BASE_URL}).",
    )
    parser.add_argument(
        "--desc",
        action="store_true",
        default=False,
        help="Sort by price, most expensive first.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="Export the sorted offers to a CSV file.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        default=False,
        help="Save the sorted offers to a JSON file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Custom output directory (default: results/).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from tyrecompare.ui.app import TyreCompareApp

    try:
        app = TyreCompareApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("tyrecompare TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search and exit."""
    from tyrecompare.cli.runner import cli_search

    exit_code = asyncio.run(
        cli_search(
            size_text=args.size,
            brand=args.brand,
            vendor_csv=args.vendors,
            use_remote=args.remote,
            descending=args.desc,
            output_format=args.output_format,
            export=args.export,
            save=args.save,
            output_dir=args.output_dir,
            api_url=args.api_url,
        )
    )
    sys.exit(exit_code)


def main() -> None:
    """Route to TUI (no size) or headless CLI (size provided)."""
    log_file = setup_logging()
    logger.info("tyrecompare starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.size is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
