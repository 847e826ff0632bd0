from __future__ import annotations

from cityweather.core.config import get_settings
from cityweather.core.http import get_http_client
from cityweather.services.weather.lookup import WeatherLookupHandler


def get_lookup_handler() -> WeatherLookupHandler:
    return WeatherLookupHandler(get_http_client(), get_settings())
