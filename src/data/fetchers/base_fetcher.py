"""Abstract base class for chart fetchers."""

from abc import ABC, abstractmethod

from src.data.models.chart_response import ChartResponse


class BaseFetcher(ABC):
    """Abstract base class for fetching price history."""

    @abstractmethod
    async def fetch_chart(self, symbol: str) -> ChartResponse:
        """Fetch the price history chart for a single ticker.

        Args:
            symbol: Stock ticker symbol.

        Returns:
            Decoded chart response.

        Raises:
            TransportError: If the endpoint cannot be reached.
            DecodeError: If the body does not match the chart payload.
        """

    @abstractmethod
    async def fetch_multiple_charts(
        self,
        symbols: list[str],
    ) -> list[ChartResponse | BaseException]:
        """Fetch charts for multiple tickers concurrently.

        Args:
            symbols: List of stock ticker symbols.

        Returns:
            One entry per symbol in input order; failed fetches hold their exception.
        """
