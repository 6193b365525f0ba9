"""Tests for the command-line front end."""
import time
from unittest.mock import Mock

import pytest

from config import Config
from favorites import FavoritesStore
from main import build_weather_service, parse_args, run
from weather_data import Coordinate, CurrentConditions, Location, WeatherCondition, WeatherSnapshot
from weather_provider import WeatherProviderBase
from weather_service import WeatherService

KARACHI = Location("Karachi", "PK", Coordinate(24.86, 67.01))


def make_snapshot(location):
    now = int(time.time())
    current = CurrentConditions(
        timestamp=now,
        temp=30.2,
        feels_like=33.0,
        temp_min=29.0,
        temp_max=31.0,
        pressure=1006,
        humidity=70,
        wind_speed=5.0,
        wind_deg=240,
        conditions=(WeatherCondition(803, "Clouds", "broken clouds", "04d"),),
        sunrise=now - 3600,
        sunset=now + 3600,
    )
    return WeatherSnapshot(current=current, forecast=(), location=location)


@pytest.fixture
def provider():
    provider = Mock(spec=WeatherProviderBase)
    provider.get_weather.side_effect = lambda lat, lon, location=None: make_snapshot(
        location or Location("Echoed", "US", Coordinate(lat, lon)))
    provider.get_weather_by_city.side_effect = lambda name: make_snapshot(
        Location(name, "PK", KARACHI.coordinate))
    provider.search_locations.return_value = [KARACHI]
    return provider


@pytest.fixture
def config(tmp_path):
    return Config(api_key="test_key", favorites_file=str(tmp_path / "favorites.json"))


@pytest.fixture
def service(config, provider):
    store = FavoritesStore(config.favorites_file)
    store.load()
    return WeatherService(provider, store, default_city=config.default_city)


def test_city_prints_snapshot(config, service, capsys):
    assert run(parse_args(["--city", "Karachi"]), config, service) == 0

    out = capsys.readouterr().out
    assert "Karachi, PK" in out
    assert "30°C" in out
    assert "Wind 18 km/h SW" in out


def test_default_without_device_location_uses_default_city(config, service, capsys):
    run(parse_args([]), config, service)

    service.provider.get_weather_by_city.assert_called_once_with("Karachi")


def test_lat_lon_used_as_device_position(config, service):
    run(parse_args(["--lat", "33.44", "--lon", "-94.04"]), config, service)

    service.provider.get_weather.assert_called_once()
    assert service.provider.get_weather.call_args.args == (33.44, -94.04)


def test_search(config, service, capsys):
    assert run(parse_args(["--search", "Kara"]), config, service) == 0
    assert "Karachi, PK" in capsys.readouterr().out


def test_search_blank_query(config, service, capsys):
    assert run(parse_args(["--search", "  "]), config, service) == 2
    assert "Please enter a city name" in capsys.readouterr().err


def test_add_list_and_remove_favorite(config, service, capsys):
    run(parse_args(["--city", "Karachi", "--add-favorite"]), config, service)
    assert "Karachi added to favorites!" in capsys.readouterr().out

    run(parse_args(["--city", "Karachi", "--add-favorite"]), config, service)
    assert "already in your favorites" in capsys.readouterr().out

    run(parse_args(["--favorites"]), config, service)
    listing = capsys.readouterr().out
    favorite_id = service.favorites[0].id
    assert favorite_id in listing

    assert run(parse_args(["--remove-favorite", favorite_id]), config, service) == 0
    assert service.favorites == ()
    assert run(parse_args(["--remove-favorite", favorite_id]), config, service) == 1


def test_no_favorites(config, service, capsys):
    run(parse_args(["--favorites"]), config, service)
    assert "No favorite cities yet." in capsys.readouterr().out


def test_city_and_search_are_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--city", "Karachi", "--search", "Lahore"])


def test_add_favorite_twice_reports_existing_id(config, service, capsys):
    run(parse_args(["--city", "Karachi", "--add-favorite"]), config, service)
    capsys.readouterr()

    run(parse_args(["--city", "Karachi", "--add-favorite"]), config, service)

    assert service.favorites[0].id in capsys.readouterr().out


def test_toggle_favorite(config, service, capsys):
    run(parse_args(["--city", "Karachi", "--toggle-favorite"]), config, service)
    assert "Karachi added to favorites!" in capsys.readouterr().out
    assert len(service.favorites) == 1

    run(parse_args(["--city", "Karachi", "--toggle-favorite"]), config, service)
    assert "Karachi removed from favorites." in capsys.readouterr().out
    assert service.favorites == ()


def test_add_and_toggle_are_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--add-favorite", "--toggle-favorite"])


def test_corrupt_favorites_file_does_not_block_commands(config, capsys):
    with open(config.favorites_file, "w", encoding="utf-8") as f:
        f.write("{not json")

    service = build_weather_service(config)

    assert service.favorites == ()
    assert run(parse_args(["--favorites"]), config, service) == 0
    assert "No favorite cities yet." in capsys.readouterr().out
