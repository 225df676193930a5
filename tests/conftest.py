"""Shared fixtures and helpers for the test suite."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta

import pytest

from weather_unusualness.datasources.weather.models import DailyObservation


def build_series(
    start_year: int,
    end_year: int,
    high_for: Callable[[date], float | None] | None = None,
) -> list[DailyObservation]:
    """Build a daily series for full calendar years.

    ``high_for`` maps a date to its high; defaults to a value that varies
    with year and day so every window has some spread.
    """
    observations: list[DailyObservation] = []
    day = date(start_year, 1, 1)
    last = date(end_year, 12, 31)
    while day <= last:
        if high_for is not None:
            high = high_for(day)
        else:
            high = 50.0 + (day.year % 7) + (day.day % 5)
        observations.append(DailyObservation(date=day, temperature=high))
        day += timedelta(days=1)
    return observations


@pytest.fixture
def archive_payload() -> dict[str, object]:
    """Archive API response covering a New Year boundary."""
    return {
        "latitude": 45.5,
        "longitude": -122.6,
        "daily_units": {"time": "iso8601", "temperature_2m_max": "°F"},
        "daily": {
            "time": ["2019-12-30", "2019-12-31", "2020-01-01", "2020-01-02"],
            "temperature_2m_max": [44.1, None, 47.3, 45.0],
        },
    }


@pytest.fixture
def make_series() -> Callable[..., list[DailyObservation]]:
    """Factory fixture for multi-year daily series."""
    return build_series
