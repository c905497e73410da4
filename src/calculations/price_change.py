"""Percent change calculations over fixed horizons.

The chart is requested at weekly granularity over a one-year window, so the
horizons map onto sample positions:

- daily: latest open (``open[-1]``)
- weekly: previous weekly close (``close[-2]``)
- monthly: close four weeks back (``close[-5]``)
- yearly: oldest close in the window (``close[0]``)
"""

import logging
import math

from config.settings_pydantic import settings
from src.calculations.exceptions import (
    InsufficientHistoryError,
    MisalignedSeriesError,
    MissingResultError,
)
from src.data.models.chart_response import ChartResponse, ChartResult
from src.data.models.ticker import Ticker

logger = logging.getLogger("tickerchange")

WEEKLY_OFFSET = 2
MONTHLY_OFFSET = 5


def calc_change(current: float, reference: float) -> float:
    """Calculate percent change from a reference price.

    A zero reference follows IEEE-754: ``inf``, ``-inf`` or ``nan``.

    Args:
        current: Current price.
        reference: Historical reference price.

    Returns:
        Percent change (10.0 means +10%).
    """
    diff = current - reference
    if reference == 0:
        # Python raises on float division by zero
        if diff == 0 or math.isnan(diff):
            return math.nan
        return math.copysign(math.inf, diff) * math.copysign(1.0, reference)
    return diff / reference * 100.0


def _require(symbol: str, horizon: str, series: list[float], required: int) -> None:
    if len(series) < required:
        raise InsufficientHistoryError(symbol, horizon, required, len(series))


def _check_granularity(result: ChartResult) -> None:
    granularity = result.meta.data_granularity
    if granularity != settings.expected_granularity:
        logger.warning(
            f"{result.meta.symbol}: data granularity is {granularity}, "
            f"expected {settings.expected_granularity}; "
            "weekly/monthly changes may be misattributed",
        )


def extract_ticker(response: ChartResponse) -> Ticker:
    """Derive current price and percent changes from a chart response.

    Only the first result entry and its first quote block are used.

    Args:
        response: Decoded chart response.

    Returns:
        Ticker with daily, weekly, monthly and yearly changes.

    Raises:
        MissingResultError: If the response has no result entry or quote block.
        InsufficientHistoryError: If the series is too short for a horizon.
        MisalignedSeriesError: If open, close and timestamp lengths differ.
    """
    result = response.chart.outcome()[0]
    if not result.indicators.quote:
        raise MissingResultError()
    quote = result.indicators.quote[0]

    symbol = result.meta.symbol
    value = result.meta.regular_market_price
    opens = quote.open
    closes = quote.close

    _check_granularity(result)
    _require(symbol, "daily", opens, 1)
    _require(symbol, "weekly", closes, WEEKLY_OFFSET)
    _require(symbol, "monthly", closes, MONTHLY_OFFSET)
    if not len(opens) == len(closes) == len(result.timestamp):
        raise MisalignedSeriesError(symbol, len(opens), len(closes), len(result.timestamp))

    ticker = Ticker(
        symbol=symbol,
        value=value,
        daily_change=calc_change(value, opens[-1]),
        wk_change=calc_change(value, closes[-WEEKLY_OFFSET]),
        mo_change=calc_change(value, closes[-MONTHLY_OFFSET]),
        yr_change=calc_change(value, closes[0]),
    )
    logger.debug(f"{symbol}: extracted {ticker}")
    return ticker
