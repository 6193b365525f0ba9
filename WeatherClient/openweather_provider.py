"""OpenWeather API provider implementation."""
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import tzinfo
from typing import Any, Dict, List, Optional

import requests

from snapshot import assemble
from weather_data import Coordinate, Location, WeatherSnapshot
from weather_provider import WeatherProviderBase, WeatherProviderError


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using the free OpenWeather endpoints.

    Current conditions come from https://openweathermap.org/current, the
    5 day / 3 hour forecast from https://openweathermap.org/forecast5 and
    city search from the direct geocoding API.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5"
    GEO_URL = "https://api.openweathermap.org/geo/1.0"

    def __init__(
        self,
        api_key: str,
        units: str = "metric",
        lang: str = "en",
        timeout: int = 10,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            units: Temperature units ("metric", "imperial", or "standard")
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds
            tz: Timezone used to split the forecast into days (host local time when None)
        """
        self.api_key = api_key
        self.units = units
        self.lang = lang
        self.timeout = timeout
        self.tz = tz

    def get_current_raw(self, lat: float, lon: float) -> Dict[str, Any]:
        return self._request(f"{self.BASE_URL}/weather", {"lat": lat, "lon": lon})

    def get_current_raw_by_city(self, name: str) -> Dict[str, Any]:
        return self._request(f"{self.BASE_URL}/weather", {"q": name})

    def get_forecast_raw(self, lat: float, lon: float) -> Dict[str, Any]:
        return self._request(f"{self.BASE_URL}/forecast", {"lat": lat, "lon": lon})

    def get_weather(self, lat: float, lon: float, location: Optional[Location] = None) -> WeatherSnapshot:
        """
        Fetch current conditions and forecast concurrently and assemble them.

        Raises:
            WeatherProviderError: If either request fails or the current
                conditions payload is incomplete
        """
        logging.info(f"Fetching weather for lat={lat}, lon={lon}")
        with ThreadPoolExecutor(max_workers=2) as executor:
            current_future = executor.submit(self.get_current_raw, lat, lon)
            forecast_future = executor.submit(self.get_forecast_raw, lat, lon)
            current_raw = current_future.result()
            forecast_raw = forecast_future.result()

        try:
            snapshot = assemble(current_raw, forecast_raw, location=location, tz=self.tz)
        except (KeyError, TypeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: missing {e}")

        logging.info(
            "Weather assembled for %s: %s, %d forecast days",
            snapshot.location.name,
            snapshot.current.temp,
            len(snapshot.forecast),
        )
        return snapshot

    def get_weather_by_city(self, name: str) -> WeatherSnapshot:
        """Resolve a city by name through the current weather endpoint, then fetch its weather."""
        data = self.get_current_raw_by_city(name)
        try:
            coord = data["coord"]
            lat, lon = coord["lat"], coord["lon"]
        except (KeyError, TypeError) as e:
            raise WeatherProviderError(f"Failed to parse response: missing {e}")
        return self.get_weather(lat, lon)

    def search_locations(self, query: str, limit: int = 5) -> List[Location]:
        query = query.strip()
        if not query:
            return []

        results = self._request(
            f"{self.GEO_URL}/direct",
            {"q": query, "limit": limit},
            with_units=False,
        )
        logging.info(f"Location search '{query}' returned {len(results)} result(s)")
        try:
            return [
                Location(
                    name=result["name"],
                    country=result.get("country", ""),
                    coordinate=Coordinate(result["lat"], result["lon"]),
                )
                for result in results
            ]
        except (KeyError, TypeError) as e:
            raise WeatherProviderError(f"Failed to parse response: missing {e}")

    def _request(self, url: str, extra_params: Dict[str, Any], with_units: bool = True) -> Any:
        params: Dict[str, Any] = {"appid": self.api_key}
        if with_units:
            params["units"] = self.units
            params["lang"] = self.lang
        params.update(extra_params)

        try:
            logging.info(f"Making OpenWeather API request: {url}")
            logging.debug(f"Request parameters: {extra_params}, units={self.units}, lang={self.lang}")

            response = requests.get(url, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherProviderError(f"Network error: {str(e)}")

        if not response.ok:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Invalid JSON in API response: {e}")
            raise WeatherProviderError(f"Failed to parse response: {str(e)}", response.status_code)

        logging.debug(f"API response (truncated): {str(data)[:500]}...")
        return data

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise the error text from an OpenWeather error body, or a generic HTTP message."""
        generic = f"HTTP error! status: {response.status_code}"
        try:
            error_data = response.json()
        except ValueError:
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            raise WeatherProviderError(generic, response.status_code)

        logging.error(f"OpenWeather API error response: {error_data}")
        message = error_data.get("message") if isinstance(error_data, dict) else None
        raise WeatherProviderError(message or generic, response.status_code)
