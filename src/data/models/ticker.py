"""Pydantic model for derived ticker price changes."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

CHANGE_FIELDS = ("daily_change", "wk_change", "mo_change", "yr_change")


class Ticker(BaseModel):
    """Current price and percent changes for a single ticker."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Stock ticker symbol")
    value: float = Field(..., description="Current market price")
    daily_change: float = Field(..., description="Percent change vs latest open")
    wk_change: float = Field(..., description="Percent change vs close one week ago")
    mo_change: float = Field(..., description="Percent change vs close four weeks ago")
    yr_change: float = Field(..., description="Percent change vs oldest close in window")

    @field_validator("value", *CHANGE_FIELDS, mode="before")
    @classmethod
    def parse_null_as_nan(cls, v: float | None) -> float:
        """Read null back as NaN (non-finite floats serialize as null)."""
        if v is None:
            return math.nan
        return v
