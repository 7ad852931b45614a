"""Weather service - the per-request lookup pipeline."""
import logging
from typing import Callable, Optional
from api_config import DEFAULT_CONFIG_PATH, load_api_config
from openweather_provider import OpenWeatherProvider
from report import format_report
from weather_provider import WeatherProviderBase
from weather_data import WeatherData

ProviderFactory = Callable[..., WeatherProviderBase]


class WeatherService:
    """
    Looks up weather for a city: reads the API key, builds a provider and
    queries it.

    Nothing is cached between calls. The config file is re-read on every
    lookup, so a key change takes effect on the next request.
    """

    def __init__(
        self,
        config_path: str = DEFAULT_CONFIG_PATH,
        provider_factory: ProviderFactory = OpenWeatherProvider,
        timeout: Optional[float] = None
    ):
        """
        Initialize weather service.

        Args:
            config_path: Path of the JSON file holding the API key
            provider_factory: Called as factory(api_key, timeout=...) per lookup
            timeout: Upstream HTTP timeout in seconds, passed to the provider
        """
        self.config_path = config_path
        self.provider_factory = provider_factory
        self.timeout = timeout

    def get_weather(self, city: str) -> WeatherData:
        """
        Fetch the current weather for a city.

        Raises:
            ConfigError: If the API config can't be loaded
            WeatherProviderError: If the upstream lookup fails
        """
        config = load_api_config(self.config_path)
        provider = self.provider_factory(config.open_weather_api_key, timeout=self.timeout)
        logging.debug("Querying %s for %r", type(provider).__name__, city)
        return provider.query(city)

    def get_report(self, city: str) -> str:
        """Fetch the weather for a city and format it as a text report."""
        return format_report(self.get_weather(city))
