"""Open-Meteo weather data source.

Fetches today's forecast high and multi-year daily highs from Open-Meteo
(free, no API key).

Public API:
  - forecast: fetch_forecast, fetch_today_high
  - historical: fetch_historical_daily, fetch_historical_years, fetch_historical_series,
    parse_historical_series, historical_year_range
  - models: DailyObservation
  - client: API URLs, shared constants
"""

from weather_unusualness.datasources.weather.client import (
    OPEN_METEO_API,
    OPEN_METEO_HISTORICAL,
)
from weather_unusualness.datasources.weather.forecast import fetch_forecast, fetch_today_high
from weather_unusualness.datasources.weather.historical import (
    fetch_historical_daily,
    fetch_historical_series,
    fetch_historical_years,
    historical_year_range,
    parse_historical_series,
)
from weather_unusualness.datasources.weather.models import DailyObservation

__all__ = [
    "OPEN_METEO_API",
    "OPEN_METEO_HISTORICAL",
    "DailyObservation",
    "fetch_forecast",
    "fetch_historical_daily",
    "fetch_historical_series",
    "fetch_historical_years",
    "fetch_today_high",
    "historical_year_range",
    "parse_historical_series",
]
