from __future__ import annotations

from cityweather.schemas.weather import (
    CurrentWeather,
    DisplayError,
    LookupResponse,
    LookupResult,
    Place,
    RenderedSummary,
)

__all__ = [
    "CurrentWeather",
    "DisplayError",
    "LookupResponse",
    "LookupResult",
    "Place",
    "RenderedSummary",
]
