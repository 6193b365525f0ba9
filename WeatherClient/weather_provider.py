"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import List, Optional

from weather_data import Location, WeatherSnapshot


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_weather(self, lat: float, lon: float, location: Optional[Location] = None) -> WeatherSnapshot:
        """
        Fetch current conditions and the daily forecast for a coordinate.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            location: Caller-resolved location to attach; the provider's own
                location fields are used when omitted

        Returns:
            WeatherSnapshot: A freshly assembled snapshot

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """

    @abstractmethod
    def get_weather_by_city(self, name: str) -> WeatherSnapshot:
        """Fetch a snapshot for a city looked up by name."""

    @abstractmethod
    def search_locations(self, query: str, limit: int = 5) -> List[Location]:
        """
        Look up candidate locations for a free-text query.

        Returns an empty list when nothing matches.
        """


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
