import httpx
import logging
from typing import Optional
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from cityweather.models.weather_model import Location
from cityweather.core.config import settings
from cityweather.core.errors import NetworkError, NotFoundError
from cityweather.core.logger import logs

# Characters encodeURIComponent leaves alone, besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

class GeocodingService:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.GEOCODING_URL
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
        self.transport = transport

    def build_query_url(self, city_name: str) -> str:
        """
        The search URL for `city_name`, percent-encoded as UTF-8 with spaces as %20.
        The name is sent as given: no trimming, no case folding.
        """
        return f"{self.base_url}?name={quote(city_name, safe=_URI_COMPONENT_SAFE)}"

    async def resolve(self, city_name: str) -> Location:
        """Return the first geocoding match for `city_name`."""
        url = self.build_query_url(city_name)
        logs.log(logging.INFO, f"Geocoding '{city_name}'")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Geocoding API error: {str(e)}")
                raise NetworkError("Geocoding API request failed.") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            logs.log(logging.WARNING, f"No geocoding results for '{city_name}'")
            raise NotFoundError("City not found. Please try another one.")
        if not isinstance(results, list):
            logs.log(logging.ERROR, f"Malformed geocoding results: {results!r}")
            raise NetworkError("Geocoding API request failed.")

        # First result as ranked upstream; no distance/population re-ranking
        item = results[0]
        try:
            location = Location(
                name=item["name"],
                country=item.get("country") or "",
                latitude=item["latitude"],
                longitude=item["longitude"],
            )
        except (KeyError, TypeError, AttributeError, PydanticValidationError) as e:
            logs.log(logging.ERROR, f"Malformed geocoding record: {item!r}")
            raise NetworkError("Geocoding API request failed.") from e

        logs.log(logging.INFO, f"✓ Resolved '{city_name}' to {location.name}, {location.country} ({location.latitude}, {location.longitude})")
        return location
