"""Map OpenWeather payloads onto the domain model and assemble snapshots."""
from datetime import tzinfo
from typing import Any, Dict, List, Optional, Tuple, Union

from forecast import aggregate_daily
from weather_data import (
    Coordinate,
    CurrentConditions,
    DailySummary,
    ForecastSample,
    Location,
    WeatherCondition,
    WeatherSnapshot,
    Wind,
)

ForecastPayload = Union[Dict[str, Any], List[Dict[str, Any]], None]


def parse_conditions(raw: List[Dict[str, Any]]) -> Tuple[WeatherCondition, ...]:
    return tuple(
        WeatherCondition(
            id=item["id"],
            main=item["main"],
            description=item["description"],
            icon=item["icon"],
        )
        for item in raw
    )


def parse_current(raw: Dict[str, Any]) -> CurrentConditions:
    """
    Map a /weather response onto CurrentConditions.

    Raises:
        KeyError: If a required field (main, wind, sys, weather, dt) is missing
    """
    main = raw["main"]
    wind = raw["wind"]
    sys_block = raw["sys"]
    return CurrentConditions(
        timestamp=raw["dt"],
        temp=main["temp"],
        feels_like=main["feels_like"],
        temp_min=main["temp_min"],
        temp_max=main["temp_max"],
        pressure=main["pressure"],
        humidity=main["humidity"],
        wind_speed=wind["speed"],
        wind_deg=wind["deg"],
        conditions=parse_conditions(raw["weather"]),
        sunrise=sys_block["sunrise"],
        sunset=sys_block["sunset"],
        visibility=raw.get("visibility"),
    )


def parse_forecast_sample(raw: Dict[str, Any]) -> ForecastSample:
    main = raw["main"]
    return ForecastSample(
        timestamp=raw["dt"],
        temp=main["temp"],
        temp_min=main["temp_min"],
        temp_max=main["temp_max"],
        humidity=main["humidity"],
        conditions=parse_conditions(raw["weather"]),
        wind=Wind(speed=raw["wind"]["speed"], deg=raw["wind"]["deg"]),
        pop=raw.get("pop", 0.0),
    )


def parse_forecast(raw: ForecastPayload) -> Tuple[ForecastSample, ...]:
    """
    Map a /forecast response (or just its "list") onto samples.

    An absent or malformed list yields no samples rather than an error, so a
    broken forecast never hides the current conditions.
    """
    if raw is None:
        return ()
    items = raw.get("list") if isinstance(raw, dict) else raw
    if not items:
        return ()
    try:
        return tuple(parse_forecast_sample(item) for item in items)
    except (KeyError, TypeError):
        return ()


def location_from_current(raw: Dict[str, Any]) -> Location:
    """Build a Location from the fields the provider echoes in a /weather response."""
    coord = raw["coord"]
    return Location(
        name=raw.get("name", ""),
        country=raw.get("sys", {}).get("country", ""),
        coordinate=Coordinate(coord["lat"], coord["lon"]),
    )


def assemble(
    current_raw: Dict[str, Any],
    forecast_raw: ForecastPayload,
    location: Optional[Location] = None,
    tz: Optional[tzinfo] = None,
) -> WeatherSnapshot:
    """
    Combine current and forecast payloads into a new WeatherSnapshot.

    Args:
        current_raw: /weather response body
        forecast_raw: /forecast response body, its "list", or None
        location: Location supplied by the caller; defaults to the one echoed
            in current_raw
        tz: Timezone for grouping forecast days (host local time when None)

    Raises:
        KeyError: If current_raw is missing required fields
    """
    current = parse_current(current_raw)
    forecast: Tuple[DailySummary, ...] = aggregate_daily(parse_forecast(forecast_raw), tz=tz)
    if location is None:
        location = location_from_current(current_raw)
    return WeatherSnapshot(current=current, forecast=forecast, location=location)
