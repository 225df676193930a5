"""Application settings loaded from environment variables.

Usage::

    from weather_unusualness.config import get_settings

    settings = get_settings()
    print(settings.window_days)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_unusualness.analysis.window import MAX_WINDOW_DAYS


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "weather-unusualness"
    app_env: str = "development"
    debug: bool = False

    # Default location (Portland, OR) used when no coordinates are given
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)
    temperature_unit: Literal["fahrenheit", "celsius"] = "fahrenheit"

    window_days: int = Field(
        default=5,
        ge=0,
        le=MAX_WINDOW_DAYS,
        description="Half-width of the month-day window",
    )
    history_years: int = Field(default=30, ge=1, description="Complete years of history to use")
    min_sample_size: int = Field(
        default=30,
        ge=1,
        description="Sample size below which a quality warning is raised",
    )

    data_dir: str = "data"
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
