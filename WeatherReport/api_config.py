"""Loader for the local JSON file holding the OpenWeather API key."""
import json
import logging
from dataclasses import dataclass

DEFAULT_CONFIG_PATH = ".apiConfig"
API_KEY_FIELD = "OpenWeatherApiKey"


class ConfigError(Exception):
    """Raised when the API config file is missing or malformed."""
    pass


@dataclass(frozen=True)
class ApiConfig:
    open_weather_api_key: str


def load_api_config(path: str = DEFAULT_CONFIG_PATH) -> ApiConfig:
    """
    Read the API key from a JSON document like {"OpenWeatherApiKey": "..."}.

    Unknown fields are ignored and a missing key field yields an empty key.

    Raises:
        ConfigError: If the file can't be read or isn't a JSON object with a
            string key. The message carries the underlying error text.
    """
    logging.debug("Loading API config from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(str(e)) from e
    except ValueError as e:
        raise ConfigError(f"invalid API config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"invalid API config {path}: expected a JSON object")

    api_key = data.get(API_KEY_FIELD, "")
    if not isinstance(api_key, str):
        raise ConfigError(f"invalid API config {path}: {API_KEY_FIELD} must be a string")

    if not api_key:
        logging.warning("API config %s has no %s", path, API_KEY_FIELD)
    return ApiConfig(open_weather_api_key=api_key)
