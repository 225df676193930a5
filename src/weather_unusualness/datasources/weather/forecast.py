"""Today's forecast high from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

import requests

from weather_unusualness.datasources.weather.client import DAILY_VARS, OPEN_METEO_API, TIMEZONE
from weather_unusualness.errors import DataUnavailable
from weather_unusualness.schemas import TemperatureUnit
from weather_unusualness.services.http import session


def fetch_forecast(
    lat: float = 45.5,
    lon: float = -122.6,
    *,
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    forecast_days: int = 1,
) -> dict[str, Any]:
    """
    Fetch the daily forecast from Open-Meteo.

    Args:
        lat: Latitude (default: Portland, OR).
        lon: Longitude.
        temperature_unit: Unit for ``temperature_2m_max``.
        forecast_days: Number of days to forecast (1 = today only).

    Returns:
        Raw API response dict with ``daily`` key containing arrays.
    """
    params: dict[str, str | int | float | list[str]] = {
        "latitude": lat,
        "longitude": lon,
        "daily": DAILY_VARS,
        "timezone": TIMEZONE,
        "forecast_days": forecast_days,
        "temperature_unit": str(temperature_unit),
    }

    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def fetch_today_high(
    lat: float,
    lon: float,
    *,
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> float:
    """
    Fetch today's forecast high temperature.

    Raises:
        DataUnavailable: If the request fails or the response has no high.
    """
    try:
        data = fetch_forecast(lat, lon, temperature_unit=temperature_unit)
    except requests.RequestException as exc:
        msg = f"Forecast API error: {exc}"
        raise DataUnavailable(msg, {"lat": lat, "lon": lon}) from exc

    try:
        highs = (data.get("daily") or {}).get("temperature_2m_max") or []
        high = highs[0] if isinstance(highs, list) and highs else None
        if high is not None:
            return float(high)
    except (AttributeError, TypeError, ValueError) as exc:
        msg = f"Forecast data format invalid: {exc}"
        raise DataUnavailable(msg, {"lat": lat, "lon": lon}) from exc

    msg = "Could not retrieve today's forecast high temperature."
    raise DataUnavailable(msg, {"lat": lat, "lon": lon})
