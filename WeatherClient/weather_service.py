"""Weather service holding the latest snapshot, favorites and error state."""
import logging
from typing import List, Optional, Tuple

from favorites import FavoritesStore, new_favorite
from location_provider import LocationProviderBase, resolve_current_location
from weather_data import FavoriteCity, Location, WeatherSnapshot
from weather_provider import WeatherProviderBase, WeatherProviderError


class WeatherService:
    """
    State container between a weather provider and the display.

    Each successful fetch replaces the snapshot wholesale. Failures are kept
    as ``error`` text and re-raised; there is no caching or retrying here.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        favorites: FavoritesStore,
        default_city: str = "Karachi",
    ):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            favorites: Store for the user's favorite cities (already loaded)
            default_city: City shown when the device location is unavailable
        """
        self.provider = provider
        self.favorites_store = favorites
        self.default_city = default_city

        self.snapshot: Optional[WeatherSnapshot] = None
        self.current_location: Optional[Location] = None
        self.error: Optional[str] = None

    @property
    def favorites(self) -> Tuple[FavoriteCity, ...]:
        return self.favorites_store.favorites

    def fetch_by_location(self, lat: float, lon: float, location: Optional[Location] = None) -> WeatherSnapshot:
        self.error = None
        try:
            snapshot = self.provider.get_weather(lat, lon, location=location)
        except WeatherProviderError as e:
            logging.error(f"Weather fetch failed: {e}")
            self.error = str(e)
            raise
        self.snapshot = snapshot
        return snapshot

    def fetch_by_city(self, name: str) -> WeatherSnapshot:
        self.error = None
        try:
            snapshot = self.provider.get_weather_by_city(name)
        except WeatherProviderError as e:
            logging.error(f"Weather fetch for '{name}' failed: {e}")
            self.error = str(e)
            raise
        self.snapshot = snapshot
        self.current_location = snapshot.location
        return snapshot

    def search(self, query: str) -> List[Location]:
        return self.provider.search_locations(query)

    def initialize(self, location_provider: LocationProviderBase) -> WeatherSnapshot:
        """
        Show weather for the device location, falling back to the default city.

        The fallback is used when permission is denied or the device location
        cannot be determined.
        """
        try:
            location = resolve_current_location(location_provider)
        except Exception as e:
            logging.warning(f"Could not determine device location: {e}")
            location = None

        if location is None:
            logging.info(f"Using default city {self.default_city}")
            return self.fetch_by_city(self.default_city)

        self.current_location = location
        coord = location.coordinate
        return self.fetch_by_location(coord.latitude, coord.longitude, location=location)

    def add_favorite(self, location: Location) -> Optional[FavoriteCity]:
        """
        Add a location to favorites.

        Returns:
            The new FavoriteCity, or None if a favorite already exists at that coordinate
        """
        if self.favorites_store.contains(location.coordinate):
            logging.info(f"{location.name} is already a favorite")
            return None
        favorite = new_favorite(location)
        self.favorites_store.add(favorite)
        logging.info(f"Added {location.name} to favorites")
        return favorite

    def toggle_favorite(self, location: Location) -> Tuple[bool, FavoriteCity]:
        """
        Add the location to favorites, or remove the favorite already at its coordinate.

        Returns:
            (added, favorite): added is False when an existing favorite was removed
        """
        existing = self.favorites_store.find(location.coordinate)
        if existing is not None:
            self.remove_favorite(existing.id)
            return False, existing
        favorite = new_favorite(location)
        self.favorites_store.add(favorite)
        logging.info(f"Added {location.name} to favorites")
        return True, favorite

    def remove_favorite(self, favorite_id: str) -> bool:
        removed = self.favorites_store.remove(favorite_id)
        if removed:
            logging.info(f"Removed favorite {favorite_id}")
        return removed

    def clear_error(self) -> None:
        self.error = None
