"""Layout logic for the weather display - pure functions for testability."""
from datetime import date, datetime, timedelta, tzinfo
from typing import List, Optional

from formatters import (
    format_humidity,
    format_pressure,
    format_temperature,
    format_wind_speed,
    weather_glyph,
    wind_direction,
)
from geo import format_location_name
from weather_data import WeatherCondition, WeatherSnapshot


def day_label(timestamp: int, today: date, tz: Optional[tzinfo] = None) -> str:
    """
    Label a forecast day relative to today.

    Returns:
        "Today", "Tomorrow", or a short weekday name such as "Wed"
    """
    day = datetime.fromtimestamp(timestamp, tz).date()
    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    return day.strftime("%a")


def hour_label(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Hour of a timestamp on a 12-hour clock, e.g. "3 PM"."""
    moment = datetime.fromtimestamp(timestamp, tz)
    hour = moment.hour % 12 or 12
    return f"{hour} {'AM' if moment.hour < 12 else 'PM'}"


def condition_text(condition: Optional[WeatherCondition]) -> str:
    """Description for display, e.g. "Broken clouds"."""
    if condition is None:
        return "Unknown"
    return (condition.description or condition.main).capitalize()


def current_lines(snapshot: WeatherSnapshot, units: str = "metric") -> List[str]:
    """Lines describing the current conditions, header first."""
    current = snapshot.current
    condition = current.condition
    glyph = weather_glyph(condition.icon) if condition else weather_glyph("")

    lines = [
        format_location_name(snapshot.location),
        f"{glyph} {format_temperature(current.temp, units)}  {condition_text(condition)}",
        f"Feels like {format_temperature(current.feels_like, units)}",
        f"Humidity {format_humidity(current.humidity)}",
        f"Wind {format_wind_speed(current.wind_speed)} {wind_direction(current.wind_deg)}",
        f"Pressure {format_pressure(current.pressure)}",
    ]
    if current.visibility is not None:
        lines.append(f"Visibility {current.visibility / 1000:.1f} km")
    return lines


def forecast_rows(
    snapshot: WeatherSnapshot,
    today: date,
    units: str = "metric",
    tz: Optional[tzinfo] = None,
) -> List[str]:
    """One line per forecast day: label, glyph, temperatures, precipitation and wind."""
    rows = []
    for day in snapshot.forecast:
        glyph = weather_glyph(day.condition.icon) if day.condition else weather_glyph("")
        rows.append(
            f"{day_label(day.timestamp, today, tz):<9}"
            f"{glyph} {format_temperature(day.temp, units):>6}  "
            f"H {format_temperature(day.temp_max, units)} "
            f"L {format_temperature(day.temp_min, units)}  "
            f"rain {round(day.pop * 100)}%  "
            f"{format_humidity(day.humidity)}  "
            f"{format_wind_speed(day.wind.speed)} {wind_direction(day.wind.deg)}"
        )
    return rows
