"""Configuration loaded from the environment (and a .env file, if present)."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from weather_data import Coordinate

UNITS = ("metric", "imperial", "standard")


@dataclass
class Config:
    api_key: str
    units: str = "metric"
    lang: str = "en"
    timeout: int = 10
    default_city: str = "Karachi"
    favorites_file: str = "favorites.json"
    device_coordinate: Optional[Coordinate] = None


def load_config() -> Config:
    """
    Build the configuration from WEATHER_* environment variables.

    Raises:
        SystemExit: If the API key is missing or a value is malformed
    """
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    if not api_key:
        raise SystemExit("Missing WEATHER_API_KEY in environment")

    units = os.getenv("WEATHER_UNITS", "metric")
    if units not in UNITS:
        raise SystemExit(f"Invalid WEATHER_UNITS {units!r}; expected one of {', '.join(UNITS)}")

    try:
        timeout = int(os.getenv("WEATHER_TIMEOUT", "10"))
    except ValueError as exc:
        raise SystemExit(f"Invalid WEATHER_TIMEOUT: {exc}") from exc

    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")
    device_coordinate = None
    if lat and lon:
        try:
            device_coordinate = Coordinate(float(lat), float(lon))
        except ValueError as exc:
            raise SystemExit(f"Invalid coordinates: {exc}") from exc

    config = Config(
        api_key=api_key,
        units=units,
        lang=os.getenv("WEATHER_LANG", "en"),
        timeout=timeout,
        default_city=os.getenv("WEATHER_DEFAULT_CITY", "Karachi"),
        favorites_file=os.getenv("WEATHER_FAVORITES_FILE", "favorites.json"),
        device_coordinate=device_coordinate,
    )
    logging.info("Configuration loaded: units=%s lang=%s device=%s", config.units, config.lang, device_coordinate)
    return config
