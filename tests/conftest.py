"""Pytest configuration and fixtures."""

import asyncio
import copy
import json
from collections.abc import Callable
from pathlib import Path
from urllib.parse import unquote

import pytest

from src.data.models.chart_response import ChartResponse
from src.data.models.ticker import Ticker

FIXTURES_DIR = Path(__file__).parent / "fixtures"

WEEK_START = 1611532800
WEEK = 7 * 86400


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, body: str | bytes, status: int = 200, delay: float = 0.0) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status = status
        self.delay = delay

    async def __aenter__(self) -> "FakeResponse":
        await asyncio.sleep(self.delay)
        return self

    async def __aexit__(self, *exc_info: object) -> bool:
        return False

    async def read(self) -> bytes:
        return self.body


class FakeSession:
    """Stand-in for aiohttp.ClientSession routing requests by symbol."""

    def __init__(self, routes: dict[str, FakeResponse | Exception]) -> None:
        self.routes = routes
        self.requested: list[str] = []
        self.request_kwargs: list[dict[str, object]] = []

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        self.requested.append(url)
        self.request_kwargs.append(kwargs)
        symbol = unquote(url.split("/chart/")[1].split("?")[0])
        route = self.routes[symbol]
        if isinstance(route, Exception):
            raise route
        return route


def read_fixture(name: str) -> str:
    """Read a JSON fixture file as text."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def wk_body() -> str:
    """Weekly AAPL chart response body."""
    return read_fixture("wk.json")


@pytest.fixture
def mo_body() -> str:
    """Monthly ^GSPC chart response body."""
    return read_fixture("mo.json")


@pytest.fixture
def error_body() -> str:
    """Chart response body carrying an upstream error."""
    return read_fixture("error.json")


@pytest.fixture
def wk_response(wk_body: str) -> ChartResponse:
    """Decoded weekly AAPL chart response."""
    return ChartResponse.model_validate_json(wk_body)


@pytest.fixture
def make_chart_payload(wk_body: str) -> Callable[..., dict]:
    """Build chart payloads from the weekly fixture with custom series."""
    base = json.loads(wk_body)

    def _make(
        symbol: str = "AAPL",
        price: float = 122.87,
        opens: list[float] | None = None,
        closes: list[float] | None = None,
    ) -> dict:
        payload = copy.deepcopy(base)
        result = payload["chart"]["result"][0]
        result["meta"]["symbol"] = symbol
        result["meta"]["regularMarketPrice"] = price
        quote = result["indicators"]["quote"][0]
        if opens is not None:
            quote["open"] = opens
        if closes is not None:
            quote["close"] = closes
            result["timestamp"] = [WEEK_START + WEEK * i for i in range(len(closes))]
        return payload

    return _make


@pytest.fixture
def fake_session() -> type[FakeSession]:
    """FakeSession class for building routed sessions."""
    return FakeSession


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    """FakeResponse class for building routes."""
    return FakeResponse


@pytest.fixture
def sample_ticker() -> Ticker:
    """Create sample ticker for testing."""
    return Ticker(
        symbol="AAPL",
        value=122.87,
        daily_change=1.5622,
        wk_change=-1.704,
        mo_change=22.87,
        yr_change=145.74,
    )
