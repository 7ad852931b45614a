"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import WeatherData


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def query(self, city: str) -> WeatherData:
        """
        Fetch current weather for a city.

        Args:
            city: City name as given by the caller (e.g., "London")

        Returns:
            WeatherData: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch or decode data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass
