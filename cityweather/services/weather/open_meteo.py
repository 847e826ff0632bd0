from __future__ import annotations

from types import MappingProxyType

import httpx
from pydantic import ValidationError

from cityweather.core.config import Settings
from cityweather.core.errors import NoCurrentWeather, WeatherFetchFailed
from cityweather.core.logging_config import logger
from cityweather.schemas.weather import CurrentWeather


UNKNOWN_WEATHER_TEXT = "Unknown"


WEATHER_CODE_TEXT = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Light freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Light freezing rain",
        67: "Heavy freezing rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)


def weather_code_to_text(code: int) -> str:
    return WEATHER_CODE_TEXT.get(code, UNKNOWN_WEATHER_TEXT)


async def get_current_weather(
    client: httpx.AsyncClient,
    *,
    lat: float,
    lon: float,
    settings: Settings,
) -> CurrentWeather:
    params = {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
        "temperature_unit": "celsius",
        "timezone": "auto",
    }

    try:
        resp = await client.get(settings.forecast_url, params=params)
    except httpx.HTTPError as exc:
        logger.warning(f"Weather request failed @ ({lat}, {lon}): {type(exc).__name__}")
        raise WeatherFetchFailed() from exc

    if not resp.is_success:
        logger.warning(f"Weather upstream status {resp.status_code} @ ({lat}, {lon})")
        raise WeatherFetchFailed()

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning(f"Weather upstream returned a non-JSON body @ ({lat}, {lon})")
        raise WeatherFetchFailed() from exc

    cw = data.get("current_weather") if isinstance(data, dict) else None
    if not isinstance(cw, dict) or not cw:
        logger.info(f"No current weather @ ({lat}, {lon})")
        raise NoCurrentWeather()

    try:
        current = CurrentWeather.model_validate(
            {**cw, "timezone_abbreviation": data.get("timezone_abbreviation")}
        )
    except ValidationError as exc:
        logger.warning(f"Error parsing current weather @ ({lat}, {lon}): {exc.error_count()} errors")
        raise WeatherFetchFailed() from exc

    logger.info(
        f"Weather @ ({lat}, {lon}) -> {current.temperature}°C, "
        f"code={current.weathercode}, wind={current.windspeed} km/h"
    )
    return current
