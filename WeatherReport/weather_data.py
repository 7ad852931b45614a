"""Weather domain model - immutable snapshot of one city's current weather."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class WeatherCondition:
    """One entry of the upstream 'weather' array."""
    id: int
    main: str  # e.g., "Clouds", "Rain", "Clear"
    description: str  # e.g., "broken clouds", "light rain"
    icon: str  # e.g., "04d"


@dataclass(frozen=True)
class WeatherData:
    """
    Current weather for a single location, in the units the upstream API
    sends them (temperatures in Kelvin).
    """
    name: str
    country: str
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int  # hPa
    humidity: int  # percentage
    wind_speed: float  # m/s
    wind_deg: int
    cloudiness: int  # percentage
    sunrise: int  # UNIX timestamp (UTC)
    sunset: int  # UNIX timestamp (UTC)
    conditions: Tuple[WeatherCondition, ...] = ()

    @property
    def primary_condition(self) -> Optional[WeatherCondition]:
        """First reported condition, or None when the list is empty."""
        return self.conditions[0] if self.conditions else None
