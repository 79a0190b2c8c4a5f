"""Pytest configuration and fixtures."""

import os

# Keep test runs from writing logs/app.log; must be set before cityweather is imported
os.environ.setdefault("LOG_TO_FILE", "false")

from datetime import datetime
from unittest.mock import AsyncMock

import httpx
import pytest

from cityweather.models.weather_model import ForecastPayload, Location
from cityweather.services.Geocoding_service import GeocodingService
from cityweather.services.Forecast_service import ForecastService
from cityweather.services.Report_service import WeatherReportService

GEO_URL = "https://geo.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"


def json_transport(payload, status_code: int = 200, seen: list | None = None) -> httpx.MockTransport:
    """MockTransport that answers every request with `payload` and records requests in `seen`."""
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)
    return httpx.MockTransport(handler)


def make_forecast_json(days: int = 7, hours: int = 24, with_hourly: bool = True) -> dict:
    """Open-Meteo style forecast body with `days` daily entries and `hours` hourly entries."""
    body = {
        "latitude": 48.86,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "current_weather": {
            "time": "2025-06-01T12:00",
            "temperature": 18.4,
            "windspeed": 12.0,
            "weathercode": 2,
        },
        "daily": {
            "time": [f"2025-06-{d + 1:02d}" for d in range(days)],
            "weathercode": [0, 3, 61, 95, 71, 45, 999][:days] + [0] * max(0, days - 7),
            "temperature_2m_max": [20.0 + d for d in range(days)],
            "temperature_2m_min": [10.0 + d for d in range(days)],
            "precipitation_sum": [0.0, 0.2, 5.1, 12.3, 1.0, 0.0, 0.4][:days] + [0.0] * max(0, days - 7),
        },
    }
    if with_hourly:
        body["hourly"] = {
            "time": [f"2025-06-01T{h:02d}:00" for h in range(hours)],
            "relativehumidity_2m": [50 + h for h in range(hours)],
            "precipitation": [round(h * 0.1, 1) for h in range(hours)],
        }
    return body


@pytest.fixture
def paris_geocoding_json() -> dict:
    return {
        "results": [
            {"id": 2988507, "name": "Paris", "country": "France", "latitude": 48.85341, "longitude": 2.3488},
            {"id": 4717560, "name": "Paris", "country": "United States", "latitude": 33.66094, "longitude": -95.55551},
        ],
        "generationtime_ms": 0.6,
    }


@pytest.fixture
def paris() -> Location:
    return Location(name="Paris", country="France", latitude=48.85341, longitude=2.3488)


@pytest.fixture
def forecast_payload() -> ForecastPayload:
    return ForecastPayload.model_validate(make_forecast_json())


@pytest.fixture
def fake_geocoder(paris) -> AsyncMock:
    geocoder = AsyncMock(spec=GeocodingService)
    geocoder.resolve.return_value = paris
    return geocoder


@pytest.fixture
def fake_forecaster(forecast_payload) -> AsyncMock:
    forecaster = AsyncMock(spec=ForecastService)
    forecaster.fetch.return_value = forecast_payload
    return forecaster


@pytest.fixture
def noon():
    return lambda: datetime(2025, 6, 1, 12, 30)


@pytest.fixture
def report_service(fake_geocoder, fake_forecaster, noon) -> WeatherReportService:
    return WeatherReportService(fake_geocoder, fake_forecaster, clock=noon)
