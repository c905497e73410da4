"""Fetch charts for a batch of symbols and derive their price changes."""

import asyncio
import logging

from src.calculations.price_change import extract_ticker
from src.data.fetchers.base_fetcher import BaseFetcher
from src.data.fetchers.chart_fetcher import YahooChartFetcher
from src.data.models.ticker import Ticker

logger = logging.getLogger("tickerchange")


async def fetch_tickers(
    symbols: list[str],
    fetcher: BaseFetcher | None = None,
) -> list[Ticker]:
    """Fetch all symbols concurrently and extract their price changes.

    Results are collected in input order. The first failure met while
    collecting (fetch or extraction) is raised and no partial list is
    returned.

    Args:
        symbols: List of ticker symbols.
        fetcher: Chart fetcher. If None, uses YahooChartFetcher.

    Returns:
        List of Ticker objects in input order.

    Raises:
        TickerChangeError: If any symbol cannot be fetched or extracted.
    """
    if fetcher is None:
        fetcher = YahooChartFetcher()

    responses = await fetcher.fetch_multiple_charts(symbols)

    tickers: list[Ticker] = []
    for symbol, response in zip(symbols, responses, strict=True):
        if isinstance(response, BaseException):
            logger.debug(f"Fetch failed for {symbol}: {response!r}")
            raise response
        tickers.append(extract_ticker(response))

    logger.info(f"Extracted price changes for {len(tickers)} tickers")
    return tickers


def run(symbols: list[str], fetcher: BaseFetcher | None = None) -> list[Ticker]:
    """Fetch and extract price changes (sync wrapper for async).

    Args:
        symbols: List of ticker symbols.
        fetcher: Chart fetcher. If None, uses YahooChartFetcher.

    Returns:
        List of Ticker objects in input order.
    """
    return asyncio.run(fetch_tickers(symbols, fetcher))
