"""Favorite cities, persisted as a JSON list that is rewritten on every change."""
import json
import logging
import os
import time
from typing import List, Optional, Tuple

from weather_data import Coordinate, FavoriteCity, Location


def new_favorite(location: Location, now_ms: Optional[int] = None) -> FavoriteCity:
    """
    Create a favorite for a location.

    The id combines the coordinate with the creation time, so adding the
    same city again later produces a distinct id.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    coord = location.coordinate
    return FavoriteCity(
        id=f"{coord.latitude}-{coord.longitude}-{now_ms}",
        name=location.name,
        country=location.country,
        coordinate=coord,
        added_at=now_ms,
    )


class FavoritesStore:
    """Ordered favorites list backed by a JSON file."""

    def __init__(self, path: str):
        self.path = path
        self._favorites: Tuple[FavoriteCity, ...] = ()

    @property
    def favorites(self) -> Tuple[FavoriteCity, ...]:
        return self._favorites

    def load(self) -> Tuple[FavoriteCity, ...]:
        """
        Read the stored list.

        A missing file means no favorites. An unreadable or malformed file is
        logged and treated the same way.
        """
        if not os.path.exists(self.path):
            logging.debug(f"No favorites file at {self.path}")
            self._favorites = ()
            return self._favorites

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._favorites = tuple(FavoriteCity.from_dict(item) for item in data)
        except (ValueError, TypeError, KeyError) as e:
            logging.error(f"Error loading favorites from {self.path}: {e}")
            self._favorites = ()
            return self._favorites

        logging.info(f"Loaded {len(self._favorites)} favorite(s) from {self.path}")
        return self._favorites

    def save(self, favorites: Tuple[FavoriteCity, ...]) -> None:
        """Write the full list, then make it the current one."""
        data: List[dict] = [fav.to_dict() for fav in favorites]
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        self._favorites = favorites
        logging.debug(f"Saved {len(data)} favorite(s) to {self.path}")

    def add(self, favorite: FavoriteCity) -> bool:
        """Append a favorite. Returns False (and changes nothing) if its id is already stored."""
        if any(fav.id == favorite.id for fav in self._favorites):
            return False
        self.save(self._favorites + (favorite,))
        return True

    def remove(self, favorite_id: str) -> bool:
        """Remove a favorite by id. Returns False if no favorite had that id."""
        remaining = tuple(fav for fav in self._favorites if fav.id != favorite_id)
        if len(remaining) == len(self._favorites):
            return False
        self.save(remaining)
        return True

    def find(self, coordinate: Coordinate) -> Optional[FavoriteCity]:
        """The favorite at exactly this coordinate, if any."""
        for fav in self._favorites:
            if fav.coordinate == coordinate:
                return fav
        return None

    def contains(self, coordinate: Coordinate) -> bool:
        """True if a favorite sits at exactly this coordinate."""
        return self.find(coordinate) is not None
