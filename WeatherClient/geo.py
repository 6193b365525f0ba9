"""Geographic helpers: great-circle distance and place naming."""
import math
from typing import Iterable, Mapping, Optional

from weather_data import Coordinate, Location

EARTH_RADIUS_KM = 6371.0
FALLBACK_PLACE_NAME = "Current Location"
FALLBACK_COUNTRY = "Unknown"


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points
    on the earth (specified in decimal degrees).

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees

    Returns:
        Distance in kilometers
    """
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def format_location_name(location: Location) -> str:
    return f"{location.name}, {location.country}"


def _place_name(candidate: Mapping[str, Optional[str]]) -> Optional[str]:
    for field in ("city", "region", "district"):
        value = candidate.get(field)
        if value and value.strip():
            return value.strip()
    return None


def resolve_place(candidates: Iterable[Mapping[str, Optional[str]]], coordinate: Coordinate) -> Location:
    """
    Name a coordinate from reverse-geocode candidates.

    The first candidate with a usable city (or, failing that, region or
    district) wins. Without one the location is labelled "Current Location".
    """
    for candidate in candidates:
        name = _place_name(candidate)
        if name:
            country = candidate.get("country") or FALLBACK_COUNTRY
            return Location(name=name, country=country, coordinate=coordinate)
    return Location(name=FALLBACK_PLACE_NAME, country=FALLBACK_COUNTRY, coordinate=coordinate)
