from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    LOCATION_FETCH_FAILED = "location_fetch_failed"
    CITY_NOT_FOUND = "city_not_found"
    WEATHER_FETCH_FAILED = "weather_fetch_failed"
    NO_CURRENT_WEATHER = "no_current_weather"


class WeatherLookupError(Exception):
    """Base for every failure a lookup reports to the user instead of raising."""

    kind: ErrorKind
    message: str

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyInput(WeatherLookupError):
    kind = ErrorKind.EMPTY_INPUT
    message = "Please enter a city name."


class LocationFetchFailed(WeatherLookupError):
    kind = ErrorKind.LOCATION_FETCH_FAILED
    message = "Failed to fetch location data."


class CityNotFound(WeatherLookupError):
    kind = ErrorKind.CITY_NOT_FOUND
    message = "City not found. Please check the spelling or try a nearby city."


class WeatherFetchFailed(WeatherLookupError):
    kind = ErrorKind.WEATHER_FETCH_FAILED
    message = "Failed to fetch weather data."


class NoCurrentWeather(WeatherLookupError):
    kind = ErrorKind.NO_CURRENT_WEATHER
    message = "No current weather available for this location."
