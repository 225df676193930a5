"""Tests for the Open-Meteo weather datasource."""

from __future__ import annotations

from datetime import date
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from weather_unusualness.datasources.weather import (
    OPEN_METEO_API,
    OPEN_METEO_HISTORICAL,
    DailyObservation,
    fetch_historical_series,
    fetch_today_high,
    historical_year_range,
    parse_historical_series,
)
from weather_unusualness.errors import DataUnavailable
from weather_unusualness.schemas import TemperatureUnit


def mock_response(payload: dict[str, Any]) -> Mock:
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status = Mock()
    return response


class TestDailyObservation:
    """Tests for the observation model."""

    def test_month_day(self) -> None:
        assert DailyObservation(date=date(2020, 1, 5), temperature=40.0).month_day == "01-05"

    def test_frozen(self) -> None:
        observation = DailyObservation(date=date(2020, 1, 5), temperature=40.0)
        with pytest.raises(AttributeError):
            observation.temperature = 41.0  # type: ignore[misc]


class TestFetchTodayHigh:
    """Tests for fetching today's forecast high."""

    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_returns_first_high(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response(
            {"daily": {"time": ["2024-04-22"], "temperature_2m_max": [72.5]}}
        )

        assert fetch_today_high(45.5, -122.6) == 72.5

        mock_get.assert_called_once()
        assert mock_get.call_args.args[0] == OPEN_METEO_API
        params = mock_get.call_args.kwargs["params"]
        assert params["latitude"] == 45.5
        assert params["longitude"] == -122.6
        assert params["daily"] == ["temperature_2m_max"]
        assert params["forecast_days"] == 1
        assert params["timezone"] == "auto"
        assert params["temperature_unit"] == "fahrenheit"

    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_celsius(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"daily": {"temperature_2m_max": [21.0]}})

        assert fetch_today_high(51.5, -0.1, temperature_unit=TemperatureUnit.CELSIUS) == 21.0
        assert mock_get.call_args.kwargs["params"]["temperature_unit"] == "celsius"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"daily": None},
            {"daily": {}},
            {"daily": {"temperature_2m_max": []}},
            {"daily": {"temperature_2m_max": [None]}},
            {"daily": {"temperature_2m_max": "72.5"}},
        ],
    )
    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_missing_high_raises(self, mock_get: Mock, payload: dict[str, Any]) -> None:
        mock_get.return_value = mock_response(payload)

        with pytest.raises(DataUnavailable, match="forecast high"):
            fetch_today_high(45.5, -122.6)

    @pytest.mark.parametrize(
        "payload",
        [
            {"daily": {"temperature_2m_max": ["n/a"]}},
            {"daily": {"temperature_2m_max": [{"value": 70}]}},
            {"daily": "2024-04-22"},
            [72.5],
        ],
    )
    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_malformed_high_raises(self, mock_get: Mock, payload: Any) -> None:
        mock_get.return_value = mock_response(payload)

        with pytest.raises(DataUnavailable, match="Forecast data format invalid"):
            fetch_today_high(45.5, -122.6)

    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_http_error_raises(self, mock_get: Mock) -> None:
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("503 Service Unavailable")
        mock_get.return_value = response

        with pytest.raises(DataUnavailable, match="Forecast API error") as exc_info:
            fetch_today_high(45.5, -122.6)
        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    @patch("weather_unusualness.datasources.weather.forecast.session.get")
    def test_connection_error_raises(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(DataUnavailable):
            fetch_today_high(45.5, -122.6)


class TestHistoricalYearRange:
    """Tests for the lookback year range."""

    def test_thirty_years_ending_last_year(self) -> None:
        assert historical_year_range(date(2024, 4, 22), 30) == (1994, 2023)

    def test_custom_years(self) -> None:
        assert historical_year_range(date(2026, 1, 1), 5) == (2021, 2025)


class TestParseHistoricalSeries:
    """Tests for converting an archive response into observations."""

    def test_parses_dates_and_nulls(self, archive_payload: dict[str, Any]) -> None:
        series = parse_historical_series(archive_payload)

        assert len(series) == 4
        assert series[0] == DailyObservation(date=date(2019, 12, 30), temperature=44.1)
        assert series[1].temperature is None
        assert series[2].month_day == "01-01"

    def test_empty_arrays(self) -> None:
        assert parse_historical_series({"daily": {"time": [], "temperature_2m_max": []}}) == []

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"daily": {}},
            {"daily": {"time": ["2020-01-01"]}},
            {"daily": {"temperature_2m_max": [40.0]}},
        ],
    )
    def test_missing_fields_raise(self, payload: dict[str, Any]) -> None:
        with pytest.raises(DataUnavailable, match="Historical data format invalid"):
            parse_historical_series(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"daily": []},
            {"daily": "2020-01-01"},
            {"daily": {"time": "2020-01-01", "temperature_2m_max": [40.0]}},
            {"daily": {"time": ["2020-01-01"], "temperature_2m_max": 40.0}},
        ],
    )
    def test_wrong_shapes_raise(self, payload: Any) -> None:
        with pytest.raises(DataUnavailable, match="Historical data format invalid"):
            parse_historical_series(payload)

    def test_length_mismatch_raises(self) -> None:
        payload = {"daily": {"time": ["2020-01-01", "2020-01-02"], "temperature_2m_max": [40.0]}}
        with pytest.raises(DataUnavailable) as exc_info:
            parse_historical_series(payload)
        assert exc_info.value.details == {"time": 2, "temperature_2m_max": 1}

    def test_bad_date_raises(self) -> None:
        payload = {"daily": {"time": ["not-a-date"], "temperature_2m_max": [40.0]}}
        with pytest.raises(DataUnavailable):
            parse_historical_series(payload)


class TestFetchHistoricalSeries:
    """Tests for fetching full years from the archive API."""

    @patch("weather_unusualness.datasources.weather.historical.session.get")
    def test_requests_full_years(
        self, mock_get: Mock, archive_payload: dict[str, Any]
    ) -> None:
        mock_get.return_value = mock_response(archive_payload)

        series = fetch_historical_series(45.5, -122.6, 1994, 2023)

        assert len(series) == 4
        assert mock_get.call_args.args[0] == OPEN_METEO_HISTORICAL
        params = mock_get.call_args.kwargs["params"]
        assert params["start_date"] == "1994-01-01"
        assert params["end_date"] == "2023-12-31"
        assert params["daily"] == ["temperature_2m_max"]
        assert params["temperature_unit"] == "fahrenheit"

    @patch("weather_unusualness.datasources.weather.historical.session.get")
    def test_http_error_raises(self, mock_get: Mock) -> None:
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("429 Too Many Requests")
        mock_get.return_value = response

        with pytest.raises(DataUnavailable, match="Historical API error") as exc_info:
            fetch_historical_series(45.5, -122.6, 1994, 2023)
        assert exc_info.value.details == {"start_year": 1994, "end_year": 2023}

    @patch("weather_unusualness.datasources.weather.historical.session.get")
    def test_malformed_response_raises(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"error": True, "reason": "bad request"})

        with pytest.raises(DataUnavailable):
            fetch_historical_series(45.5, -122.6, 1994, 2023)
