"""Device location abstraction - the platform supplies permission, position and reverse geocoding."""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from geo import resolve_place
from weather_data import Coordinate, Location


class LocationProviderBase(ABC):
    """Abstract source of the device's position."""

    @abstractmethod
    def request_permission(self) -> bool:
        """Ask for location access. Returns True if granted."""

    @abstractmethod
    def get_position(self) -> Coordinate:
        """Current position of the device."""

    @abstractmethod
    def reverse_geocode(self, coordinate: Coordinate) -> List[Dict[str, Optional[str]]]:
        """
        Address candidates for a coordinate.

        Each candidate may carry "city", "region", "district" and "country"
        keys; any of them can be missing or None.
        """


class StaticLocationProvider(LocationProviderBase):
    """
    Location provider backed by a fixed coordinate.

    Used on hosts without a positioning service, e.g. the CLI reading
    WEATHER_LAT/WEATHER_LON. With no coordinate configured, permission is
    reported as denied.
    """

    def __init__(
        self,
        coordinate: Optional[Coordinate] = None,
        places: Sequence[Dict[str, Optional[str]]] = (),
    ):
        self.coordinate = coordinate
        self.places = list(places)

    def request_permission(self) -> bool:
        return self.coordinate is not None

    def get_position(self) -> Coordinate:
        if self.coordinate is None:
            raise RuntimeError("No coordinate configured")
        return self.coordinate

    def reverse_geocode(self, coordinate: Coordinate) -> List[Dict[str, Optional[str]]]:
        return list(self.places)


def resolve_current_location(provider: LocationProviderBase) -> Optional[Location]:
    """
    Resolve the device location to a named Location.

    Returns:
        The resolved Location, or None if location permission was denied
    """
    if not provider.request_permission():
        logging.info("Location permission denied")
        return None

    coordinate = provider.get_position()
    logging.debug(f"Got coords: {coordinate.latitude}, {coordinate.longitude}")
    location = resolve_place(provider.reverse_geocode(coordinate), coordinate)
    logging.info(f"Resolved current location: {location.name}, {location.country}")
    return location
