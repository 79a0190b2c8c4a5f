from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from cityweather.models.weather_model import WeatherReport, ErrorResponse
from cityweather.services.Geocoding_service import GeocodingService
from cityweather.services.Forecast_service import ForecastService
from cityweather.services.Report_service import WeatherReportService
from cityweather.core.errors import ValidationError
from cityweather.utils.formatting import render_summary

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}

# --- Dependency Injection ---
def get_geocoding_service() -> GeocodingService:
    return GeocodingService()

def get_forecast_service() -> ForecastService:
    return ForecastService()

def get_report_service(
    geocoder: GeocodingService = Depends(get_geocoding_service),
    forecaster: ForecastService = Depends(get_forecast_service),
) -> WeatherReportService:
    return WeatherReportService(geocoder, forecaster)

def normalize_city(city: str) -> str:
    """Trim and lower-case the raw field; blank input is a ValidationError."""
    cleaned = city.strip()
    if not cleaned:
        raise ValidationError("Please enter a city name.")
    return cleaned.lower()

@router.get("/weather", response_model=WeatherReport, responses=ERROR_RESPONSES)
async def get_weather_endpoint(
    city: str = Query("", description="City name as typed by the user"),
    fahrenheit: bool = Query(False, description="Report temperatures in °F"),
    service: WeatherReportService = Depends(get_report_service)
):
    return await service.build_report(normalize_city(city), fahrenheit)

@router.get("/weather/summary", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
async def get_weather_summary_endpoint(
    city: str = Query("", description="City name as typed by the user"),
    fahrenheit: bool = Query(False, description="Report temperatures in °F"),
    service: WeatherReportService = Depends(get_report_service)
):
    report = await service.build_report(normalize_city(city), fahrenheit)
    return render_summary(report)
