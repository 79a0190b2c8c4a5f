from typing import Optional

from cityweather.models.weather_model import WeatherReport, TemperatureUnit

NOT_AVAILABLE = "N/A"


def format_temperature(value: float, unit: TemperatureUnit) -> str:
    return f"{value:.1f} °{unit.value}"


def format_optional(value: Optional[float], suffix: str) -> str:
    """'12.5 mm' style text, or N/A when the value is missing."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:g}{suffix}"


def render_summary(report: WeatherReport) -> str:
    """Plain-text version of the report: current conditions, then one block per forecast day."""
    unit = report.unit
    current = report.current
    location = report.location

    heading = f"Current Weather for {location.name}, {location.country}" if location.country else f"Current Weather for {location.name}"
    lines = [heading]
    if current.weather is not None:
        lines.append(current.weather.description)
    lines += [
        f"Temperature: {format_temperature(current.temperature, unit)}",
        f"Wind Speed: {current.wind_speed_kmh:g} km/h",
        f"Humidity: {format_optional(current.humidity_percent, '%')}",
        f"Precipitation: {format_optional(current.precipitation_mm, ' mm')}",
        "",
        f"{len(report.forecast)}-Day Forecast:",
    ]

    for day in report.forecast:
        lines += [
            day.date,
            day.weather.description,
            f"Max: {format_temperature(day.max_temp, unit)}, "
            f"Min: {format_temperature(day.min_temp, unit)}, "
            f"Precip: {format_optional(day.precipitation_sum_mm, ' mm')}",
            "",
        ]

    return "\n".join(lines).rstrip() + "\n"
