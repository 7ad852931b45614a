"""Plain-text weather report formatting - pure functions for testability."""
import time
from typing import List
from weather_data import WeatherData

KELVIN_OFFSET = 273.15
DEFAULT_EMOJI = "🌈"

# Keyed by the lowercased upstream "main" condition
CONDITION_EMOJI = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "🌧️",
    "drizzle": "🌦️",
    "thunderstorm": "⛈️",
    "snow": "❄️",
    "mist": "🌫️",
    "fog": "🌫️",
}


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def get_weather_emoji(condition: str) -> str:
    """
    Get the emoji for a weather condition.

    Args:
        condition: Upstream condition keyword (e.g., "Rain"), any case

    Returns:
        Matching emoji, or the rainbow for anything unrecognized
    """
    return CONDITION_EMOJI.get(condition.lower(), DEFAULT_EMOJI)


def format_clock(timestamp: int) -> str:
    """Format a UNIX timestamp as HH:MM in the server's local time zone."""
    return time.strftime("%H:%M", time.localtime(timestamp))


def format_report(weather: WeatherData) -> str:
    """
    Build the multi-line report for a weather snapshot.

    The condition line is only present when the snapshot carries at least
    one condition; only the first one is shown.
    """
    temp_c = kelvin_to_celsius(weather.temp)
    feels_c = kelvin_to_celsius(weather.feels_like)

    lines: List[str] = [
        f"Weather Report for {weather.name}, {weather.country} 🌍",
        "==================================",
        f"Temperature: {temp_c:.2f}°C ({celsius_to_fahrenheit(temp_c):.2f}°F) 🌡️",
        f"Feels like: {feels_c:.2f}°C ({celsius_to_fahrenheit(feels_c):.2f}°F) 🤔",
        f"Min/Max: {kelvin_to_celsius(weather.temp_min):.2f}°C / "
        f"{kelvin_to_celsius(weather.temp_max):.2f}°C 📊",
        f"Humidity: {weather.humidity}% 💧",
        f"Pressure: {weather.pressure} hPa 🔬",
    ]

    condition = weather.primary_condition
    if condition is not None:
        emoji = get_weather_emoji(condition.main)
        lines.append(f"Condition: {emoji} {condition.main} ({condition.description})")

    lines.append(f"Wind: {weather.wind_speed:.1f} m/s, Direction: {weather.wind_deg}° 🌬️")
    lines.append(f"Cloudiness: {weather.cloudiness}% ☁️")
    lines.append(
        f"Sunrise: {format_clock(weather.sunrise)} 🌅, Sunset: {format_clock(weather.sunset)} 🌇"
    )

    return "".join(line + "\n" for line in lines)
