import httpx
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from cityweather.models.weather_model import ForecastPayload
from cityweather.core.config import settings
from cityweather.core.errors import NetworkError
from cityweather.core.logger import logs

DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode,precipitation_sum"
HOURLY_FIELDS = "relativehumidity_2m,precipitation"

class ForecastService:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.FORECAST_URL
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
        self.transport = transport

    def build_params(self, latitude: float, longitude: float) -> dict:
        # Coordinates come from a resolved Location and are not re-checked here
        return {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "daily": DAILY_FIELDS,
            "hourly": HOURLY_FIELDS,
            "timezone": "auto",
        }

    async def fetch(self, latitude: float, longitude: float) -> ForecastPayload:
        """Current weather, daily aggregates and hourly humidity/precipitation for a point."""
        logs.log(logging.INFO, f"Calling Open-Meteo forecast for {latitude}, {longitude}")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(self.base_url, params=self.build_params(latitude, longitude))
                resp.raise_for_status()
                raw_data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Weather API failed: {str(e)}")
                raise NetworkError("Weather API request failed.") from e

        try:
            payload = ForecastPayload.model_validate(raw_data)
        except PydanticValidationError as e:
            logs.log(logging.ERROR, f"Unexpected forecast payload: {e.error_count()} validation errors")
            raise NetworkError("Weather API request failed.") from e

        logs.log(logging.INFO, f"✓ Forecast received ({len(payload.daily.time)} days, timezone {payload.timezone})")
        return payload
