"""Custom exceptions for fetch and extraction errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.data.models.chart_response import ChartError

RESPONSE_ERROR_MSG = "Failed to read response from server"


class TickerChangeError(Exception):
    """Base exception for ticker change errors."""


class TransportError(TickerChangeError):
    """Raised when the quotes endpoint cannot be reached."""


class DecodeError(TickerChangeError):
    """Raised when a response body does not match the chart payload shape."""


class MissingResultError(TickerChangeError):
    """Raised when a response carries no usable result entry or quote block."""

    def __init__(
        self,
        message: str = RESPONSE_ERROR_MSG,
        chart_error: ChartError | None = None,
    ) -> None:
        super().__init__(message)
        self.chart_error = chart_error


class InsufficientHistoryError(TickerChangeError):
    """Raised when a price series is too short for a horizon."""

    def __init__(self, symbol: str, horizon: str, required: int, available: int) -> None:
        super().__init__(
            f"{symbol}: {horizon} change needs {required} samples, got {available}",
        )
        self.symbol = symbol
        self.horizon = horizon
        self.required = required
        self.available = available


class MisalignedSeriesError(TickerChangeError):
    """Raised when open, close and timestamp series differ in length."""

    def __init__(self, symbol: str, opens: int, closes: int, timestamps: int) -> None:
        super().__init__(
            f"{symbol}: series lengths differ "
            f"(open={opens}, close={closes}, timestamp={timestamps})",
        )
        self.symbol = symbol
        self.opens = opens
        self.closes = closes
        self.timestamps = timestamps
