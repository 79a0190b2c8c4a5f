from cityweather.models.weather_model import TemperatureUnit


def to_display_unit(celsius: float, use_fahrenheit: bool) -> float:
    """Convert a Celsius reading for display. Rounding is left to the renderer."""
    if use_fahrenheit:
        return celsius * 9 / 5 + 32
    return celsius


def unit_for(use_fahrenheit: bool) -> TemperatureUnit:
    return TemperatureUnit.FAHRENHEIT if use_fahrenheit else TemperatureUnit.CELSIUS
