"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees."""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherCondition:
    """One provider condition entry, e.g. 803 / Clouds / broken clouds / 04d."""
    id: int
    main: str  # e.g., "Clouds", "Rain", "Clear"
    description: str  # e.g., "broken clouds", "light rain"
    icon: str  # provider icon code, e.g., "04d"


@dataclass(frozen=True)
class Wind:
    speed: float  # m/s
    deg: float


@dataclass(frozen=True)
class ForecastSample:
    """A single 3-hour forecast data point."""
    timestamp: int  # UNIX timestamp (UTC)
    temp: float
    temp_min: float
    temp_max: float
    humidity: float
    conditions: Tuple[WeatherCondition, ...]
    wind: Wind
    pop: float  # probability of precipitation, 0..1

    @property
    def condition(self) -> Optional[WeatherCondition]:
        """The condition used for display (the first one, if any)."""
        return self.conditions[0] if self.conditions else None


@dataclass(frozen=True)
class DailySummary(ForecastSample):
    """
    One day of forecast collapsed from several samples.

    ``temp`` and ``conditions`` come from the first sample of the day and are
    not clamped to ``temp_min``/``temp_max``.
    """


@dataclass(frozen=True)
class CurrentConditions:
    """Conditions at a single instant, as reported by the current weather endpoint."""
    timestamp: int
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float  # hPa
    humidity: float
    wind_speed: float
    wind_deg: float
    conditions: Tuple[WeatherCondition, ...]
    sunrise: int
    sunset: int
    visibility: Optional[int] = None  # meters; omitted by the API in some regions

    @property
    def condition(self) -> Optional[WeatherCondition]:
        return self.conditions[0] if self.conditions else None

    def is_stale(self, max_age_seconds: int = 900) -> bool:
        """Check if this data is stale (older than max_age_seconds)."""
        current_time = int(datetime.now(timezone.utc).timestamp())
        age = current_time - self.timestamp
        return age > max_age_seconds


@dataclass(frozen=True)
class Location:
    name: str
    country: str
    coordinate: Coordinate


@dataclass(frozen=True)
class WeatherSnapshot:
    """Everything the display needs for one location at one point in time."""
    current: CurrentConditions
    forecast: Tuple[DailySummary, ...]
    location: Location


@dataclass(frozen=True)
class FavoriteCity:
    id: str
    name: str
    country: str
    coordinate: Coordinate
    added_at: int  # epoch milliseconds

    def to_dict(self) -> dict:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "lat": self.coordinate.latitude,
            "lon": self.coordinate.longitude,
            "addedAt": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FavoriteCity":
        return cls(
            id=data["id"],
            name=data["name"],
            country=data["country"],
            coordinate=Coordinate(float(data["lat"]), float(data["lon"])),
            added_at=int(data["addedAt"]),
        )
