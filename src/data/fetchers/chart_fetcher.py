"""Async Yahoo Finance chart fetcher.

Requests one year of weekly history per symbol with a single GET (no retry,
no rate limiting). The HTTP status is not checked: unknown symbols come back
as a 404 whose JSON body carries the upstream error object, and that body is
decoded like any other so the extractor can report it.
"""

import asyncio
import logging
from datetime import datetime
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from config.settings_pydantic import settings
from src.calculations.exceptions import DecodeError, TransportError
from src.data.fetchers.base_fetcher import BaseFetcher
from src.data.models.chart_response import ChartResponse
from src.utils.date_utils import get_lookback_window

logger = logging.getLogger("tickerchange")

CHART_QUERY = (
    "formatted=true&lang=en-US&region=US&includeAdjustedClose=true"
    "&interval={interval}&period1={period1}&period2={period2}"
    "&events=div%7Csplit&useYfid=true"
)


def build_chart_url(
    symbol: str,
    now: datetime | None = None,
    base_url: str | None = None,
    lookback_days: int | None = None,
) -> str:
    """Build the chart request URL for a symbol.

    Args:
        symbol: Stock ticker symbol (path segment).
        now: End of the history window. If None, uses the current UTC time.
        base_url: Chart endpoint. If None, uses settings.
        lookback_days: Window length in days. If None, uses settings.

    Returns:
        Fully encoded request URL.
    """
    if base_url is None:
        base_url = settings.chart_url
    if lookback_days is None:
        lookback_days = settings.lookback_days

    period1, period2 = get_lookback_window(lookback_days, now)
    query = CHART_QUERY.format(
        interval=settings.interval,
        period1=period1,
        period2=period2,
    )
    return f"{base_url.rstrip('/')}/{quote(symbol, safe='')}?{query}"


def decode_chart(body: str | bytes, symbol: str = "") -> ChartResponse:
    """Decode a chart response body.

    Args:
        body: Raw JSON body.
        symbol: Symbol the body was requested for (used in error messages).

    Returns:
        Decoded chart response.

    Raises:
        DecodeError: If the body is not JSON or misses required fields.
    """
    try:
        return ChartResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"{symbol}: unexpected chart response: {e}") from e


class YahooChartFetcher(BaseFetcher):
    """Fetch weekly price history from the Yahoo Finance chart API."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        base_url: str | None = None,
        lookback_days: int | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize chart fetcher.

        Args:
            session: Optional aiohttp session for connection pooling. Not closed by the fetcher.
            base_url: Chart endpoint. If None, uses settings.
            lookback_days: History window in days. If None, uses settings.
            timeout_seconds: Total request timeout. If None, uses settings
                (unset means the aiohttp default).
        """
        self.session = session
        self.base_url = base_url or settings.chart_url
        self.lookback_days = lookback_days or settings.lookback_days
        if timeout_seconds is None:
            timeout_seconds = settings.request_timeout_seconds
        self.timeout_seconds = timeout_seconds

    def _request_kwargs(self) -> dict[str, aiohttp.ClientTimeout]:
        if self.timeout_seconds is None:
            return {}
        return {"timeout": aiohttp.ClientTimeout(total=self.timeout_seconds)}

    async def fetch_chart(
        self,
        symbol: str,
        session: aiohttp.ClientSession | None = None,
    ) -> ChartResponse:
        """Fetch and decode the chart for a single ticker.

        Args:
            symbol: Stock ticker symbol.
            session: Session to use. If None, uses the fetcher session or a temporary one.

        Returns:
            Decoded chart response.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the body does not match the chart payload.
        """
        session = session or self.session
        url = build_chart_url(symbol, base_url=self.base_url, lookback_days=self.lookback_days)
        logger.info(f"Requesting ticker {symbol}")
        logger.debug(f"GET {url}")

        try:
            if session is not None:
                body = await self._get_body(session, url)
            else:
                async with aiohttp.ClientSession() as temp_session:
                    body = await self._get_body(temp_session, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{symbol}: request failed: {e}") from e

        return decode_chart(body, symbol)

    async def _get_body(self, session: aiohttp.ClientSession, url: str) -> bytes:
        async with session.get(url, **self._request_kwargs()) as response:
            logger.debug(f"Chart response status {response.status} for {url}")
            return await response.read()

    async def fetch_multiple_charts(
        self,
        symbols: list[str],
    ) -> list[ChartResponse | BaseException]:
        """Fetch charts for multiple tickers concurrently.

        One task per symbol; a failing task does not cancel the others.

        Args:
            symbols: List of ticker symbols.

        Returns:
            One entry per symbol in input order; failed fetches hold their exception.
        """
        if self.session is not None:
            return await self._gather(symbols, self.session)

        async with aiohttp.ClientSession() as session:
            return await self._gather(symbols, session)

    async def _gather(
        self,
        symbols: list[str],
        session: aiohttp.ClientSession,
    ) -> list[ChartResponse | BaseException]:
        tasks = [self.fetch_chart(symbol, session) for symbol in symbols]
        return await asyncio.gather(*tasks, return_exceptions=True)
