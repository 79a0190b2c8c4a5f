"""
Maps WMO weather codes (as returned by Open-Meteo) to a description and an icon.

The table is evaluated top to bottom and the first row containing the code wins.
Codes not listed fall through to "Unknown weather" with no icon; callers render
text only in that case.
"""
from typing import Optional

from cityweather.core.config import settings
from cityweather.models.weather_model import WeatherCodeClass

UNKNOWN_DESCRIPTION = "Unknown weather"

# (codes, description, icon name) in priority order
WEATHER_CODE_TABLE = (
    (frozenset({0}), "Clear sky", "sun-emoji"),
    (frozenset({1, 2, 3}), "Partly cloudy / Overcast", "sun-behind-cloud"),
    (frozenset({45, 48}), "Fog / Depositing rime fog", "fog"),
    (frozenset({51, 53, 55}), "Drizzle (light to dense)", "light-rain"),
    (frozenset({56, 57}), "Freezing drizzle", "sleet"),
    (frozenset({61, 63, 65}), "Rain (slight to heavy)", "cloud-with-rain"),
    (frozenset({66, 67}), "Freezing rain", "freezing-rain"),
    (frozenset({71, 73, 75}), "Snowfall (slight to heavy)", "cloud-with-snow"),
    (frozenset({77}), "Snow grains", "snowflake-emoji"),
    (frozenset({80, 81, 82}), "Rain showers", "heavy-rain"),
    (frozenset({85, 86}), "Snow showers", "snowflake-emoji"),
    (frozenset({95, 96, 99}), "Thunderstorm", "cloud-with-lightning-and-rain"),
)


def icon_url(icon_name: str, base_url: Optional[str] = None) -> str:
    base = (base_url or settings.ICON_BASE_URL).rstrip("/")
    return f"{base}/{icon_name}.png"


def classify(code: int, base_url: Optional[str] = None) -> WeatherCodeClass:
    """Return the description/icon pair for `code`. Never raises."""
    for codes, description, icon_name in WEATHER_CODE_TABLE:
        if code in codes:
            return WeatherCodeClass(description=description, icon_ref=icon_url(icon_name, base_url))
    return WeatherCodeClass(description=UNKNOWN_DESCRIPTION, icon_ref=None)
