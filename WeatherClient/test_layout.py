"""Tests for layout and rendering logic."""
from datetime import date, timezone

import pytest

from layout import condition_text, current_lines, day_label, forecast_rows, hour_label
from weather_data import (
    Coordinate,
    CurrentConditions,
    DailySummary,
    Location,
    WeatherCondition,
    WeatherSnapshot,
    Wind,
)

DAY1 = 1704067200  # Monday 2024-01-01 00:00 UTC
HOUR = 3600
CLOUDS = WeatherCondition(id=803, main="Clouds", description="broken clouds", icon="04d")


@pytest.fixture
def sample_snapshot():
    """Sample snapshot with two forecast days."""
    current = CurrentConditions(
        timestamp=DAY1 + 12 * HOUR,
        temp=21.5,
        feels_like=20.4,
        temp_min=19.0,
        temp_max=23.0,
        pressure=1014,
        humidity=65,
        wind_speed=3.13,
        wind_deg=93,
        conditions=(CLOUDS,),
        sunrise=DAY1 + 7 * HOUR,
        sunset=DAY1 + 17 * HOUR,
        visibility=10000,
    )
    forecast = (
        DailySummary(DAY1 + 15 * HOUR, 21.0, 18.2, 23.6, 60, (CLOUDS,), Wind(10.0, 180), 0.25),
        DailySummary(DAY1 + 86400 + 3 * HOUR, 15.0, 12.0, 17.0, 80, (), Wind(2.0, 0), 1.0),
    )
    location = Location("Testville", "US", Coordinate(33.44, -94.04))
    return WeatherSnapshot(current=current, forecast=forecast, location=location)


def test_day_label_today_and_tomorrow():
    today = date(2024, 1, 1)
    assert day_label(DAY1 + 15 * HOUR, today, timezone.utc) == "Today"
    assert day_label(DAY1 + 86400, today, timezone.utc) == "Tomorrow"


def test_day_label_weekday():
    assert day_label(DAY1 + 2 * 86400, date(2024, 1, 1), timezone.utc) == "Wed"


@pytest.mark.parametrize(
    "offset_hours, expected",
    [(0, "12 AM"), (3, "3 AM"), (12, "12 PM"), (15, "3 PM"), (23, "11 PM")],
)
def test_hour_label(offset_hours, expected):
    assert hour_label(DAY1 + offset_hours * HOUR, timezone.utc) == expected


def test_condition_text():
    assert condition_text(CLOUDS) == "Broken clouds"
    assert condition_text(WeatherCondition(800, "Clear", "", "01d")) == "Clear"
    assert condition_text(None) == "Unknown"


def test_current_lines(sample_snapshot):
    lines = current_lines(sample_snapshot)

    assert lines[0] == "Testville, US"
    assert "22°C" in lines[1]
    assert "Broken clouds" in lines[1]
    assert lines[2] == "Feels like 20°C"
    assert lines[3] == "Humidity 65%"
    assert lines[4] == "Wind 11 km/h E"
    assert lines[5] == "Pressure 1014 hPa"
    assert lines[6] == "Visibility 10.0 km"


def test_current_lines_imperial(sample_snapshot):
    assert "22°F" in current_lines(sample_snapshot, "imperial")[1]


def test_forecast_rows(sample_snapshot):
    rows = forecast_rows(sample_snapshot, date(2024, 1, 1), tz=timezone.utc)

    assert len(rows) == 2
    assert rows[0].startswith("Today")
    assert "H 24°C L 18°C" in rows[0]
    assert "rain 25%" in rows[0]
    assert "36 km/h S" in rows[0]
    assert rows[1].startswith("Tomorrow")
    assert "rain 100%" in rows[1]
    assert "7 km/h N" in rows[1]


def test_forecast_rows_empty(sample_snapshot):
    empty = WeatherSnapshot(sample_snapshot.current, (), sample_snapshot.location)
    assert forecast_rows(empty, date(2024, 1, 1)) == []
