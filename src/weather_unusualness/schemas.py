"""
Domain models shared across layers.

Pydantic models for validated inputs and CLI-facing results.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from weather_unusualness.analysis.window import MAX_WINDOW_DAYS


class TemperatureUnit(StrEnum):
    """Temperature units accepted by Open-Meteo."""

    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"

    @property
    def symbol(self) -> str:
        """Display suffix, e.g. ``°F``."""
        return "°F" if self is TemperatureUnit.FAHRENHEIT else "°C"


class Location(BaseModel):
    """Geographic point to analyze."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    @property
    def label(self) -> str:
        """Short coordinate label, e.g. ``(45.50, -122.60)``."""
        return f"({self.lat:.2f}, {self.lon:.2f})"


class AnalysisOptions(BaseModel):
    """Window and history sizes for one run."""

    window_days: int = Field(default=5, ge=0, le=MAX_WINDOW_DAYS)
    history_years: int = Field(default=30, ge=1)


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None
