"""Display formatting for weather values - pure functions, no I/O."""

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

TEMPERATURE_SYMBOLS = {
    "metric": "°C",
    "imperial": "°F",
    "standard": "K",
}

# OpenWeather icon codes: https://openweathermap.org/weather-conditions
WEATHER_GLYPHS = {
    "01d": "☀️",  # clear sky day
    "01n": "\U0001F319",  # clear sky night
    "02d": "⛅",  # few clouds day
    "02n": "☁️",  # few clouds night
    "03d": "☁️",  # scattered clouds
    "03n": "☁️",
    "04d": "☁️",  # broken clouds
    "04n": "☁️",
    "09d": "\U0001F327️",  # shower rain
    "09n": "\U0001F327️",
    "10d": "\U0001F326️",  # rain day
    "10n": "\U0001F327️",  # rain night
    "11d": "⛈️",  # thunderstorm
    "11n": "⛈️",
    "13d": "❄️",  # snow
    "13n": "❄️",
    "50d": "\U0001F32B️",  # mist
    "50n": "\U0001F32B️",
}
DEFAULT_GLYPH = "\U0001F324️"  # sun behind small cloud


def format_temperature(temp: float, units: str = "metric") -> str:
    """
    Format a temperature rounded to the nearest whole degree.

    Args:
        temp: Temperature in the provider's configured units
        units: "metric", "imperial" or "standard"

    Returns:
        e.g. "21°C", "70°F" or "294K"
    """
    return f"{round(temp)}{TEMPERATURE_SYMBOLS.get(units, TEMPERATURE_SYMBOLS['metric'])}"


def format_wind_speed(speed: float) -> str:
    """Format a wind speed given in m/s as km/h."""
    return f"{round(speed * 3.6)} km/h"


def format_humidity(humidity: float) -> str:
    return f"{humidity}%"


def format_pressure(pressure: float) -> str:
    return f"{pressure} hPa"


def wind_direction(degrees: float) -> str:
    """
    Bucket a wind bearing into one of eight compass points.

    Each point covers 45 degrees centred on its bearing; 360 wraps to N.
    Ties at the bucket edges follow Python's round().
    """
    return COMPASS_POINTS[round(degrees / 45) % 8]


def weather_glyph(icon_code: str) -> str:
    """Look up the display glyph for a provider icon code."""
    return WEATHER_GLYPHS.get(icon_code, DEFAULT_GLYPH)
