from __future__ import annotations

import asyncio
from enum import Enum
from typing import Optional, Protocol

import httpx

from cityweather.core.config import Settings, get_settings
from cityweather.core.errors import EmptyInput, WeatherLookupError
from cityweather.core.logging_config import logger
from cityweather.schemas.weather import LookupResult, RenderedSummary
from cityweather.services.geocoding.open_meteo import geocode_city
from cityweather.services.weather.open_meteo import get_current_weather
from cityweather.services.weather.render import (
    LOADING_TEXT,
    render_error,
    render_hint,
    render_summary,
)


class WeatherLookupHandler:
    """
    City name in, rendered current-weather summary (or display error) out.

    Two sequential calls: geocoding, then the forecast for the first match.
    Failures listed in cityweather.core.errors come back as LookupResult.error;
    lookup() does not raise them.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings | None = None) -> None:
        self.client = client
        self.settings = settings or get_settings()

    async def lookup(self, city_name: str) -> LookupResult:
        try:
            summary = await self._lookup(city_name)
        except WeatherLookupError as exc:
            logger.warning(f"Lookup for {city_name!r} failed: {exc.kind.value}")
            return LookupResult(error=render_error(exc))
        return LookupResult(summary=summary)

    async def _lookup(self, city_name: str) -> RenderedSummary:
        city = city_name.strip()
        if not city:
            raise EmptyInput()

        place = await geocode_city(self.client, name=city, settings=self.settings)
        weather = await get_current_weather(
            self.client,
            lat=place.latitude,
            lon=place.longitude,
            settings=self.settings,
        )
        return render_summary(place, weather)


class LookupState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class OutputSink(Protocol):
    def show(self, state: LookupState, markup: str) -> None:
        ...


class LookupSession:
    """
    Drives one output region from repeated submissions.

    A new submission cancels the one still in flight, so the region only
    ever shows the latest submission's result.
    """

    def __init__(self, handler: WeatherLookupHandler, sink: OutputSink) -> None:
        self._handler = handler
        self._sink = sink
        self._inflight: Optional[asyncio.Task] = None
        self._state = LookupState.IDLE

    @property
    def state(self) -> LookupState:
        return self._state

    def _show(self, state: LookupState, markup: str) -> None:
        self._state = state
        self._sink.show(state, markup)

    def cancel(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

    async def submit(self, city_name: str) -> LookupResult | None:
        self.cancel()

        if not city_name.strip():
            result = LookupResult(error=render_error(EmptyInput()))
            self._show(LookupState.ERROR, result.html)
            return result

        self._show(LookupState.LOADING, render_hint(LOADING_TEXT))
        task = asyncio.create_task(self._handler.lookup(city_name))
        self._inflight = task
        try:
            result = await task
        except asyncio.CancelledError:
            if self._inflight is task:
                # We were cancelled from outside, not superseded.
                self._inflight = None
                raise
            logger.info(f"Lookup for {city_name!r} superseded by a newer submission")
            return None

        if self._inflight is not task:
            return None
        self._inflight = None
        self._show(LookupState.SUCCESS if result.ok else LookupState.ERROR, result.html)
        return result
