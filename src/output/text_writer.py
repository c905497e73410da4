"""Plain text output writer."""

import logging
import math
import sys
from typing import TextIO

import numpy as np

from src.data.models.ticker import CHANGE_FIELDS, Ticker
from src.data.types import ChangeFlags

logger = logging.getLogger("tickerchange")


def format_value(value: float) -> str:
    """Format a price in its shortest positional form (122.87, 3933, NaN)."""
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def format_change(change: float) -> str:
    """Format a percent change with 3 decimals (22.870%)."""
    if math.isnan(change):
        return "NaN%"
    return f"{change:.3f}%"


def format_ticker_line(ticker: Ticker, flags: ChangeFlags) -> str:
    """Format one ticker as ``<symbol> <value>`` plus the enabled changes.

    Args:
        ticker: Ticker to format.
        flags: Daily, weekly, monthly, yearly switches.

    Returns:
        Single output line without newline.
    """
    parts = [ticker.symbol, format_value(ticker.value)]
    for field, enabled in zip(CHANGE_FIELDS, flags, strict=True):
        if enabled:
            parts.append(format_change(getattr(ticker, field)))
    return " ".join(parts)


class TextWriter:
    """Plain text writer for ticker price changes."""

    def __init__(
        self,
        flags: ChangeFlags = (False, False, False, False),
        stream: TextIO | None = None,
    ) -> None:
        """Initialize text writer.

        Args:
            flags: Daily, weekly, monthly, yearly switches.
            stream: Output stream. If None, uses stdout.
        """
        self.flags = flags
        self.stream = stream or sys.stdout

    def write(self, tickers: list[Ticker]) -> None:
        """Write one line per ticker.

        Args:
            tickers: Tickers to write.
        """
        for ticker in tickers:
            self.stream.write(format_ticker_line(ticker, self.flags) + "\n")
        logger.debug(f"Wrote {len(tickers)} tickers as text")
