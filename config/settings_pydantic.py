"""Pydantic Settings for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings using Pydantic."""

    # Quotes API
    chart_base_url: str = "https://query1.finance.yahoo.com"
    chart_path: str = "/v8/finance/chart"

    # History window (the horizon index mapping depends on weekly samples)
    lookback_days: int = 365
    interval: str = "1wk"
    expected_granularity: str = "1wk"

    # Unset keeps the aiohttp transport default
    request_timeout_seconds: float | None = None

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="TICKERCHANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def chart_url(self) -> str:
        """Get the chart endpoint without the symbol segment."""
        return f"{self.chart_base_url.rstrip('/')}{self.chart_path}"


# Global settings instance
settings = Settings()
