"""OpenWeather Current Weather API provider implementation."""
import logging
import time
import requests
from typing import Any, Dict, Optional
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import WeatherCondition, WeatherData


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API, queried by city name.

    Uses the free Current Weather API: https://openweathermap.org/current
    No "units" parameter is sent, so temperatures come back in Kelvin.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            base_url: Endpoint to query (overridable for tests)
            timeout: HTTP request timeout in seconds, None blocks until the
                upstream answers
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def query(self, city: str) -> WeatherData:
        """
        Fetch current weather for a city from OpenWeather.

        A non-2xx status is logged but not treated as a failure; the body is
        decoded regardless, so an error payload decodes to zero values.

        Returns:
            WeatherData: Current weather information

        Raises:
            WeatherProviderError: On network errors or an undecodable body
        """
        # requests percent-encodes params, so "New York" or "a&b" stay one value
        params = {
            "APPID": self.api_key,
            "q": city,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.base_url} q={city!r}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherProviderError(f"Network error: {str(e)}") from e

        logging.info(f"API response status: {response.status_code}")
        if not response.ok:
            logging.warning(
                "OpenWeather returned HTTP %s for %r: %s",
                response.status_code,
                city,
                response.text[:200],
            )

        try:
            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")
            weather_data = parse_weather(data)
        except (KeyError, ValueError, TypeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {str(e)}") from e

        logging.info(f"Successfully parsed weather data for {weather_data.name or city}")
        return weather_data


def parse_weather(data: Any) -> WeatherData:
    """
    Map a decoded Current Weather API payload onto WeatherData.

    Missing or null fields (and a null body) become zero values. A field of
    the wrong type or a timestamp outside the platform range raises
    ValueError.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    main_data = _block(data, "main")
    wind_data = _block(data, "wind")
    clouds_data = _block(data, "clouds")
    sys_data = _block(data, "sys")

    weather_array = data.get("weather")
    if weather_array is None:
        weather_array = []
    if not isinstance(weather_array, list):
        raise ValueError("'weather' must be an array")

    conditions = []
    for index, item in enumerate(weather_array):
        if item is None:
            item = {}
        if not isinstance(item, dict):
            raise ValueError(f"'weather[{index}]' must be an object")
        conditions.append(WeatherCondition(
            id=_integer(item, "id", "weather"),
            main=_string(item, "main", "weather"),
            description=_string(item, "description", "weather"),
            icon=_string(item, "icon", "weather"),
        ))

    return WeatherData(
        name=_string(data, "name"),
        country=_string(sys_data, "country", "sys"),
        temp=_number(main_data, "temp", "main"),
        feels_like=_number(main_data, "feels_like", "main"),
        temp_min=_number(main_data, "temp_min", "main"),
        temp_max=_number(main_data, "temp_max", "main"),
        pressure=_integer(main_data, "pressure", "main"),
        humidity=_integer(main_data, "humidity", "main"),
        wind_speed=_number(wind_data, "speed", "wind"),
        wind_deg=_integer(wind_data, "deg", "wind"),
        cloudiness=_integer(clouds_data, "all", "clouds"),
        sunrise=_timestamp(sys_data, "sunrise", "sys"),
        sunset=_timestamp(sys_data, "sunset", "sys"),
        conditions=tuple(conditions),
    )


def _block(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object")
    return value


def _field_name(key: str, parent: Optional[str]) -> str:
    return f"{parent}.{key}" if parent else key


def _number(block: Dict[str, Any], key: str, parent: Optional[str] = None) -> float:
    value = block.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{_field_name(key, parent)}' must be a number, got {value!r}")
    return float(value)


def _integer(block: Dict[str, Any], key: str, parent: Optional[str] = None) -> int:
    value = block.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{_field_name(key, parent)}' must be an integer, got {value!r}")
    return value


def _string(block: Dict[str, Any], key: str, parent: Optional[str] = None) -> str:
    value = block.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{_field_name(key, parent)}' must be a string, got {value!r}")
    return value


def _timestamp(block: Dict[str, Any], key: str, parent: Optional[str] = None) -> int:
    value = _integer(block, key, parent)
    try:
        time.localtime(value)
    except (OverflowError, OSError) as e:
        raise ValueError(f"'{_field_name(key, parent)}' is not a valid timestamp: {e}") from e
    return value
