"""Pydantic models for the chart API response payload."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.calculations.exceptions import MissingResultError


class ChartModel(BaseModel):
    """Base for payload models with verbatim wire field names."""

    model_config = ConfigDict(frozen=True)


class CamelChartModel(BaseModel):
    """Base for payload models with lowerCamelCase wire field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Meta(CamelChartModel):
    """Scalar metadata for one instrument."""

    currency: str = Field(..., description="Quote currency")
    symbol: str = Field(..., description="Ticker symbol")
    exchange_name: str = Field(..., description="Exchange short name")
    instrument_type: str = Field(..., description="Instrument type (EQUITY, INDEX, ...)")
    first_trade_date: int = Field(..., description="First trade unix timestamp")
    exchange_timezone_name: str = Field(..., description="Exchange timezone")
    regular_market_time: int = Field(..., description="Last regular market unix timestamp")
    regular_market_price: float = Field(..., description="Current price")
    data_granularity: str = Field(..., description="Sampling interval of the series")
    valid_ranges: list[str] = Field(..., description="Ranges the API accepts")


class Dividend(ChartModel):
    """Dividend event."""

    date: int
    amount: float


class Split(CamelChartModel):
    """Stock split event."""

    date: int
    numerator: int
    denominator: int
    split_ratio: str


class Events(ChartModel):
    """Corporate events keyed by timestamp string."""

    dividends: dict[str, Dividend] = Field(default_factory=dict)
    splits: dict[str, Split] = Field(default_factory=dict)


class Quote(ChartModel):
    """OHLCV series, index aligned with the result timestamps."""

    open: list[float]
    high: list[float]
    low: list[float]
    close: list[float]
    volume: list[int]


class AdjClose(ChartModel):
    """Adjusted close series."""

    adjclose: list[float]


class Indicators(ChartModel):
    """Indicator blocks of a result entry."""

    quote: list[Quote]
    adjclose: list[AdjClose]


class ChartResult(ChartModel):
    """Time series for one ticker."""

    meta: Meta
    timestamp: list[int]
    events: Events | None = None
    indicators: Indicators


class ChartError(ChartModel):
    """Upstream error object."""

    code: str
    description: str


class Chart(ChartModel):
    """Chart envelope holding either results or an error."""

    result: list[ChartResult] | None = None
    error: ChartError | None = None

    def outcome(self) -> list[ChartResult]:
        """Resolve the result/error pair.

        Returns:
            Non-empty list of result entries.

        Raises:
            MissingResultError: If the error object is set or no result is present.
        """
        if self.error is not None:
            raise MissingResultError(chart_error=self.error)
        if not self.result:
            raise MissingResultError()
        return self.result


class ChartResponse(ChartModel):
    """Decoded chart API response body."""

    chart: Chart
