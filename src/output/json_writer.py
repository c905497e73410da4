"""JSON output writer."""

import logging
import sys
from typing import TextIO

from pydantic import TypeAdapter

from src.data.models.ticker import Ticker

logger = logging.getLogger("tickerchange")

_TICKER_LIST = TypeAdapter(list[Ticker])


def dump_tickers(tickers: list[Ticker]) -> str:
    """Serialize tickers as pretty-printed JSON.

    Non-finite floats are written as null.

    Args:
        tickers: Tickers to serialize.

    Returns:
        JSON array with 2-space indentation.
    """
    return _TICKER_LIST.dump_json(tickers, indent=2).decode("utf-8")


def load_tickers(text: str | bytes) -> list[Ticker]:
    """Parse tickers from JSON written by dump_tickers.

    Args:
        text: JSON array of ticker objects.

    Returns:
        List of Ticker objects (null changes read back as NaN).
    """
    return _TICKER_LIST.validate_json(text)


class JSONWriter:
    """JSON writer for ticker price changes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize JSON writer.

        Args:
            stream: Output stream. If None, uses stdout.
        """
        self.stream = stream or sys.stdout

    def write(self, tickers: list[Ticker]) -> None:
        """Write tickers as a JSON array.

        Args:
            tickers: Tickers to write.
        """
        self.stream.write(dump_tickers(tickers))
        self.stream.write("\n")
        logger.debug(f"Wrote {len(tickers)} tickers as JSON")
