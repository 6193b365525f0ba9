"""Command-line weather client: current conditions, 7-day forecast and favorite cities."""
import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from config import UNITS, Config, load_config
from favorites import FavoritesStore
from geo import format_location_name
from layout import current_lines, forecast_rows
from location_provider import StaticLocationProvider
from openweather_provider import OpenWeatherProvider
from weather_data import Coordinate, WeatherSnapshot
from weather_provider import WeatherProviderError
from weather_service import WeatherService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Weather client")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--city", help="Show weather for a city by name")
    target.add_argument("--search", metavar="QUERY", help="List cities matching a query")
    target.add_argument("--favorites", action="store_true", help="List favorite cities")
    target.add_argument("--remove-favorite", metavar="ID", help="Remove a favorite by id")
    parser.add_argument("--lat", type=float, help="Latitude of the device position")
    parser.add_argument("--lon", type=float, help="Longitude of the device position")
    favorite_action = parser.add_mutually_exclusive_group()
    favorite_action.add_argument("--add-favorite", action="store_true", help="Save the displayed city as a favorite")
    favorite_action.add_argument(
        "--toggle-favorite",
        action="store_true",
        help="Save the displayed city, or remove it if it is already a favorite",
    )
    parser.add_argument("--units", choices=UNITS, help="Override WEATHER_UNITS")
    parser.add_argument("--timeout", type=int, help="HTTP timeout in seconds")
    parser.add_argument("--log-file")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_weather_service(config: Config) -> WeatherService:
    provider = OpenWeatherProvider(
        api_key=config.api_key,
        units=config.units,
        lang=config.lang,
        timeout=config.timeout,
    )
    store = FavoritesStore(config.favorites_file)
    store.load()
    service = WeatherService(provider, store, default_city=config.default_city)
    logging.info("Weather service ready (favorites=%s)", config.favorites_file)
    return service


def print_snapshot(snapshot: WeatherSnapshot, units: str) -> None:
    for line in current_lines(snapshot, units):
        print(line)
    if snapshot.forecast:
        print()
        print(f"{len(snapshot.forecast)}-Day Forecast")
        for row in forecast_rows(snapshot, date.today(), units):
            print(row)


def run(args: argparse.Namespace, config: Config, service: WeatherService) -> int:
    if args.favorites:
        if not service.favorites:
            print("No favorite cities yet.")
        for fav in service.favorites:
            print(f"{fav.id}  {fav.name}, {fav.country}")
        return 0

    if args.remove_favorite:
        if not service.remove_favorite(args.remove_favorite):
            print(f"No favorite with id {args.remove_favorite}", file=sys.stderr)
            return 1
        return 0

    if args.search is not None:
        if not args.search.strip():
            print("Please enter a city name", file=sys.stderr)
            return 2
        results = service.search(args.search)
        if not results:
            print(f"No cities found for '{args.search}'")
        for location in results:
            coord = location.coordinate
            print(f"{format_location_name(location)}  ({coord.latitude:.4f}, {coord.longitude:.4f})")
        return 0

    if args.city:
        snapshot = service.fetch_by_city(args.city)
    else:
        coordinate = config.device_coordinate
        if args.lat is not None and args.lon is not None:
            coordinate = Coordinate(args.lat, args.lon)
        snapshot = service.initialize(StaticLocationProvider(coordinate))

    print_snapshot(snapshot, config.units)

    if args.add_favorite:
        favorite = service.add_favorite(snapshot.location)
        if favorite is None:
            existing = service.favorites_store.find(snapshot.location.coordinate)
            print(f"{snapshot.location.name} is already in your favorites ({existing.id}).")
        else:
            print(f"{favorite.name} added to favorites!")
    elif args.toggle_favorite:
        added, favorite = service.toggle_favorite(snapshot.location)
        if added:
            print(f"{favorite.name} added to favorites!")
        else:
            print(f"{favorite.name} removed from favorites.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    config = load_config()
    if args.units:
        config.units = args.units
    if args.timeout:
        config.timeout = args.timeout

    service = build_weather_service(config)
    try:
        return run(args, config, service)
    except WeatherProviderError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
