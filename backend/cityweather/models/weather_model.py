from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Tuple
from enum import Enum

from cityweather.core.errors import ErrorKind

# --- Enums ---
class TemperatureUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

# --- Domain Models ---
class WeatherCodeClass(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    icon_ref: Optional[str] = None

class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature_celsius: float
    wind_speed_kmh: float
    weather_code: Optional[int] = None
    humidity_percent: Optional[float] = None  # None means "not available"
    precipitation_mm: Optional[float] = None
    # Report-time view
    temperature: float
    weather: Optional[WeatherCodeClass] = None

class DailyForecastEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    weather_code: int
    max_temp_celsius: float
    min_temp_celsius: float
    precipitation_sum_mm: Optional[float] = None
    max_temp: float
    min_temp: float
    weather: WeatherCodeClass

class WeatherReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    current: CurrentConditions
    forecast: Tuple[DailyForecastEntry, ...] = ()
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

# --- Upstream payload (Open-Meteo /v1/forecast) ---
class CurrentWeatherBlock(BaseModel):
    temperature: float
    windspeed: float
    weathercode: Optional[int] = None
    time: Optional[str] = None

class DailyBlock(BaseModel):
    time: List[str]
    weathercode: List[int]
    temperature_2m_max: List[float]
    temperature_2m_min: List[float]
    precipitation_sum: Optional[List[Optional[float]]] = None

class HourlyBlock(BaseModel):
    time: List[str] = []
    relativehumidity_2m: Optional[List[Optional[float]]] = None
    precipitation: Optional[List[Optional[float]]] = None

class ForecastPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current_weather: CurrentWeatherBlock
    daily: DailyBlock
    hourly: Optional[HourlyBlock] = None
    timezone: Optional[str] = None

# --- API Response Models ---
class ErrorResponse(BaseModel):
    error: ErrorKind
    message: str
