"""
Prefect flow for one analysis run.

Fetches today's forecast high and the historical daily highs for the
configured location, rates today against the same time of year, and
writes a static HTML page.

The archive response for complete past years is cached in the store, so
repeat runs on the same location only hit the forecast API.

Run locally:
    python -m weather_unusualness.flows.analyze
"""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NONE

from weather_unusualness.analysis import AnalysisResult, analyze
from weather_unusualness.config import get_settings
from weather_unusualness.datasources.weather import forecast as weather_forecast
from weather_unusualness.datasources.weather import historical as weather_historical
from weather_unusualness.datasources.weather.models import DailyObservation
from weather_unusualness.errors import DataUnavailable
from weather_unusualness.renderers.unusualness import build_page_html
from weather_unusualness.schemas import Location, TemperatureUnit
from weather_unusualness.store import DataStore


def build_store() -> DataStore:
    """Store rooted at the configured ``data_dir``."""
    return DataStore(Path(get_settings().data_dir))


# Archive cache and generated site both live under data_dir
store = build_store()
SITE_DIR = store.derived / "site"

ARCHIVE_DIR = Path("historical/archive")
ARCHIVE_TTL = timedelta(days=30)


def archive_path(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    unit: TemperatureUnit,
) -> Path:
    """Store path for an archive response, keyed by location, years and unit."""
    return ARCHIVE_DIR / f"{lat:.2f}_{lon:.2f}_{start_year}-{end_year}_{unit}.json"


@task(name="fetch-forecast-high")
def fetch_forecast_high(
    lat: float = 45.5,
    lon: float = -122.6,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> float:
    """Fetch today's forecast high from Open-Meteo."""
    return weather_forecast.fetch_today_high(lat, lon, temperature_unit=unit)


@task(name="fetch-historical", cache_policy=NONE)
def fetch_historical(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> list[DailyObservation]:
    """Load daily highs for full years, from the store when still fresh.

    Raises:
        DataUnavailable: If the archive request fails or is malformed.
    """
    path = archive_path(lat, lon, start_year, end_year, unit)
    if store.is_fresh(path):
        try:
            series = weather_historical.parse_historical_series(store.load(path) or {})
        except DataUnavailable:
            print("Cached historical data is unreadable, refetching.")
            store.evict(path)
        else:
            print("Historical data is fresh, skipping fetch.")
            return series

    print(f"Fetching historical data ({start_year}-{end_year})... This may take a moment.")
    raw = weather_historical.fetch_historical_years(
        lat, lon, start_year, end_year, temperature_unit=unit
    )

    series = weather_historical.parse_historical_series(raw)
    store.save(
        path,
        raw,
        source="open-meteo.com (archive)",
        ttl=ARCHIVE_TTL,
        location={"lat": lat, "lon": lon},
        years=f"{start_year}-{end_year}",
        temperature_unit=str(unit),
    )
    return series


@task(name="analyze-series", cache_policy=NONE)
def analyze_series(
    today_high: float,
    series: list[DailyObservation],
    today: date,
    window_days: int = 5,
    min_sample_size: int = 30,
    year_range: tuple[int, int] | None = None,
) -> AnalysisResult:
    """Rate today's high against the historical window."""
    return analyze(
        today_high,
        series,
        today,
        window_days=window_days,
        min_sample_size=min_sample_size,
        year_range=year_range,
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="analyze-today", log_prints=True)
def analyze_today(
    lat: float = 45.5,
    lon: float = -122.6,
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    window_days: int = 5,
    history_years: int = 30,
    min_sample_size: int = 30,
    today: date | None = None,
    write_html: bool = True,
) -> dict[str, Any]:
    """
    Rate how unusual today's forecast high is for this time of year.

    Raises:
        AnalysisError: If data is unavailable, the window is empty, or the
            historical highs have no spread. The run is not retried.
    """
    location = Location(lat=lat, lon=lon)
    unit = TemperatureUnit(unit)
    today = today or date.today()
    start_year, end_year = weather_historical.historical_year_range(today, history_years)

    print(f"Fetching weather data for {location.label}...")
    today_high = fetch_forecast_high(location.lat, location.lon, unit)
    series = fetch_historical(location.lat, location.lon, start_year, end_year, unit)

    result = analyze_series(
        today_high,
        series,
        today,
        window_days=window_days,
        min_sample_size=min_sample_size,
        year_range=(start_year, end_year),
    )
    for warning in result.warnings:
        print(f"Warning: {warning}")
    print(f"{result.rating}: {result.explanation}")

    summary: dict[str, Any] = {
        "rating": str(result.rating),
        "explanation": result.explanation,
        "today_high": result.today_high,
        "mean": result.mean,
        "std_dev": result.std_dev,
        "z_score": result.z_score,
        "sample_size": result.sample_size,
        "window": str(result.window),
        "years": f"{start_year}-{end_year}",
        "warnings": list(result.warnings),
        "result": result,
        "output": None,
    }

    if write_html:
        html = build_page_html(result, unit, location, history_years=history_years)
        output_path = write_site(html)
        print(f"Site built: {output_path}")
        summary["output"] = str(output_path)

    return summary


if __name__ == "__main__":
    summary = analyze_today()
    print(f"Flow complete: {summary['rating']}")
