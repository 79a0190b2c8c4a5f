import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from cityweather.models.weather_model import (
    CurrentConditions,
    DailyForecastEntry,
    ForecastPayload,
    Location,
    WeatherReport,
)
from cityweather.services.Geocoding_service import GeocodingService
from cityweather.services.Forecast_service import ForecastService
from cityweather.utils.weather_codes import classify
from cityweather.utils.units import to_display_unit, unit_for
from cityweather.core.config import settings
from cityweather.core.logger import logs

# Upper bound on forecast days regardless of configuration
MAX_FORECAST_DAYS = 7


def _value_at(series: Optional[Sequence[Optional[float]]], index: int) -> Optional[float]:
    """Element `index` of an optional series, or None when missing."""
    if not series or index < 0 or index >= len(series):
        return None
    return series[index]


class WeatherReportService:
    """
    Builds a WeatherReport for a city: geocode first, then forecast, then
    classify codes and convert temperatures for display.
    """
    def __init__(
        self,
        geocoder: GeocodingService,
        forecaster: ForecastService,
        clock: Callable[[], datetime] = datetime.now,
        max_days: Optional[int] = None,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.clock = clock
        self.max_days = settings.FORECAST_DAYS if max_days is None else max_days

    async def build_report(self, city_name: str, use_fahrenheit: bool) -> WeatherReport:
        # Errors from either call propagate as raised; the forecast is never requested without a location
        location = await self.geocoder.resolve(city_name)
        payload = await self.forecaster.fetch(location.latitude, location.longitude)

        report = self._assemble(location, payload, use_fahrenheit)
        logs.log(logging.INFO, f"Report ready for {location.name}, {location.country}", extra={
            "unit": report.unit.value,
            "days": len(report.forecast),
        })
        return report

    def _assemble(self, location: Location, payload: ForecastPayload, use_fahrenheit: bool) -> WeatherReport:
        return WeatherReport(
            location=location,
            current=self._current(payload, use_fahrenheit),
            forecast=self._forecast(payload, use_fahrenheit),
            unit=unit_for(use_fahrenheit),
        )

    def _current(self, payload: ForecastPayload, use_fahrenheit: bool) -> CurrentConditions:
        current = payload.current_weather
        hourly = payload.hourly

        # Local wall-clock hour, not the forecast timezone's "now"
        hour_index = self.clock().hour
        humidity = _value_at(hourly.relativehumidity_2m if hourly else None, hour_index)
        precipitation = _value_at(hourly.precipitation if hourly else None, hour_index)

        code = current.weathercode
        return CurrentConditions(
            temperature_celsius=current.temperature,
            wind_speed_kmh=current.windspeed,
            weather_code=code,
            humidity_percent=humidity,
            precipitation_mm=precipitation,
            temperature=to_display_unit(current.temperature, use_fahrenheit),
            weather=classify(code) if code is not None else None,
        )

    def _forecast(self, payload: ForecastPayload, use_fahrenheit: bool) -> tuple[DailyForecastEntry, ...]:
        daily = payload.daily
        days = min(
            MAX_FORECAST_DAYS,
            self.max_days,
            len(daily.time),
            len(daily.weathercode),
            len(daily.temperature_2m_max),
            len(daily.temperature_2m_min),
        )

        entries = []
        for i in range(days):
            code = daily.weathercode[i]
            max_c = daily.temperature_2m_max[i]
            min_c = daily.temperature_2m_min[i]
            entries.append(DailyForecastEntry(
                date=daily.time[i],
                weather_code=code,
                max_temp_celsius=max_c,
                min_temp_celsius=min_c,
                precipitation_sum_mm=_value_at(daily.precipitation_sum, i),
                max_temp=to_display_unit(max_c, use_fahrenheit),
                min_temp=to_display_unit(min_c, use_fahrenheit),
                weather=classify(code),
            ))
        return tuple(entries)
