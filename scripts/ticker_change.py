#!/usr/bin/env python3
"""Main CLI entry point for printing ticker price changes."""

import argparse
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings_pydantic import settings
from src.analysis import run
from src.calculations.exceptions import TickerChangeError
from src.output.json_writer import JSONWriter
from src.output.text_writer import TextWriter
from src.utils.logging_config import setup_logging

logger = logging.getLogger("tickerchange")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Print current price and percent changes for stock tickers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current price only
  python scripts/ticker_change.py AAPL MSFT

  # Add weekly and yearly changes
  python scripts/ticker_change.py AAPL --wk --yr

  # All changes as JSON
  python scripts/ticker_change.py AAPL ^GSPC --json
        """,
    )

    parser.add_argument(
        "tickers",
        nargs="+",
        help="Ticker symbols to look up",
    )

    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Json output",
    )

    parser.add_argument(
        "--dy",
        action="store_true",
        help="Calculate daily change",
    )

    parser.add_argument(
        "--wk",
        action="store_true",
        help="Calculate weekly change",
    )

    parser.add_argument(
        "--mo",
        action="store_true",
        help="Calculate monthly change",
    )

    parser.add_argument(
        "--yr",
        action="store_true",
        help="Calculate yearly change",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    log_level = "DEBUG" if args.verbose else settings.log_level
    setup_logging(log_level, settings.log_file)

    symbols = args.tickers
    if not all(symbol.strip() for symbol in symbols):
        print("Error: ticker symbols must not be blank", file=sys.stderr)
        sys.exit(1)

    logger.debug(f"Fetching {len(symbols)} tickers: {', '.join(symbols)}")
    try:
        tickers = run(symbols)
    except TickerChangeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        writer: JSONWriter | TextWriter = JSONWriter()
    else:
        writer = TextWriter(flags=(args.dy, args.wk, args.mo, args.yr))
    writer.write(tickers)


if __name__ == "__main__":
    main()
