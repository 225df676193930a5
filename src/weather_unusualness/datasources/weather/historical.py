"""Historical daily highs from the Open-Meteo Archive API.

Full calendar years are requested and the month-day window is applied
client-side, so a window that straddles New Year needs no special fetch.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import requests

from weather_unusualness.datasources.weather.client import (
    DAILY_VARS,
    OPEN_METEO_HISTORICAL,
    TIMEZONE,
)
from weather_unusualness.datasources.weather.models import DailyObservation
from weather_unusualness.errors import DataUnavailable
from weather_unusualness.schemas import TemperatureUnit
from weather_unusualness.services.http import session


def fetch_historical_daily(
    start_date: str,
    end_date: str,
    lat: float = 45.5,
    lon: float = -122.6,
    *,
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> dict[str, Any]:
    """
    Fetch historical daily highs from Open-Meteo Archive API.

    Args:
        start_date: ISO date string (YYYY-MM-DD).
        end_date: ISO date string (YYYY-MM-DD).
        lat: Latitude (default: Portland, OR).
        lon: Longitude.
        temperature_unit: Unit for ``temperature_2m_max``.

    Returns:
        Raw API response dict with ``daily`` key containing arrays.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "start_date": start_date,
        "end_date": end_date,
        "daily": DAILY_VARS,
        "timezone": TIMEZONE,
        "temperature_unit": str(temperature_unit),
    }
    resp = session.get(OPEN_METEO_HISTORICAL, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def historical_year_range(today: date, history_years: int = 30) -> tuple[int, int]:
    """Return ``(start_year, end_year)`` ending with the last complete year."""
    return today.year - history_years, today.year - 1


def parse_historical_series(data: dict[str, Any]) -> list[DailyObservation]:
    """Convert an archive response into ordered daily observations.

    Raises:
        DataUnavailable: If ``daily.time`` or ``daily.temperature_2m_max``
            is missing or not a list, or the two arrays differ in length.
    """
    daily = data.get("daily") if isinstance(data, dict) else None
    if not isinstance(daily, dict):
        msg = "Historical data format invalid or missing."
        raise DataUnavailable(msg)

    times = daily.get("time")
    highs = daily.get("temperature_2m_max")
    if not isinstance(times, list) or not isinstance(highs, list):
        msg = "Historical data format invalid or missing."
        raise DataUnavailable(msg)
    if len(times) != len(highs):
        msg = "Historical data format invalid or missing."
        raise DataUnavailable(msg, {"time": len(times), "temperature_2m_max": len(highs)})

    try:
        return [
            DailyObservation(
                date=date.fromisoformat(day),
                temperature=float(high) if high is not None else None,
            )
            for day, high in zip(times, highs, strict=True)
        ]
    except (TypeError, ValueError) as exc:
        msg = f"Historical data format invalid: {exc}"
        raise DataUnavailable(msg) from exc


def fetch_historical_years(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    *,
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> dict[str, Any]:
    """
    Fetch the raw archive response from Jan 1 of ``start_year`` to Dec 31 of ``end_year``.

    Raises:
        DataUnavailable: If the request fails.
    """
    try:
        return fetch_historical_daily(
            f"{start_year}-01-01",
            f"{end_year}-12-31",
            lat,
            lon,
            temperature_unit=temperature_unit,
        )
    except requests.RequestException as exc:
        msg = f"Historical API error: {exc}"
        raise DataUnavailable(msg, {"start_year": start_year, "end_year": end_year}) from exc


def fetch_historical_series(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    *,
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> list[DailyObservation]:
    """
    Fetch and parse daily highs for the full years ``start_year``..``end_year``.

    Raises:
        DataUnavailable: If the request fails or the response is malformed.
    """
    data = fetch_historical_years(
        lat, lon, start_year, end_year, temperature_unit=temperature_unit
    )
    return parse_historical_series(data)
