from __future__ import annotations

import httpx
from pydantic import ValidationError

from cityweather.core.config import Settings
from cityweather.core.errors import CityNotFound, LocationFetchFailed
from cityweather.core.logging_config import logger
from cityweather.schemas.weather import Place


async def _fetch_results(
    client: httpx.AsyncClient,
    *,
    name: str,
    settings: Settings,
) -> list:
    """
    Raw Open-Meteo geocoding candidates for a free-text place name.

    Raises LocationFetchFailed on transport errors, non-success statuses or
    an unreadable body, and CityNotFound when the API has no match.
    """
    params = {
        "name": name,
        "count": settings.geocoding_count,
        "language": settings.geocoding_language,
        "format": "json",
    }

    try:
        resp = await client.get(settings.geocoding_url, params=params)
    except httpx.HTTPError as exc:
        logger.warning(f"Geocoding request failed for {name!r}: {type(exc).__name__}")
        raise LocationFetchFailed() from exc

    if not resp.is_success:
        logger.warning(f"Geocoding upstream status {resp.status_code} for {name!r}")
        raise LocationFetchFailed()

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning(f"Geocoding returned a non-JSON body for {name!r}")
        raise LocationFetchFailed() from exc

    results = data.get("results") if isinstance(data, dict) else None
    if results is not None and not isinstance(results, list):
        logger.warning(f"Geocoding returned a malformed results field for {name!r}")
        raise LocationFetchFailed()
    if not results:
        logger.info(f"Geocoding found no results for {name!r}")
        raise CityNotFound()

    return results


def _parse_place(raw: object, *, name: str) -> Place:
    if not isinstance(raw, dict):
        raise LocationFetchFailed()
    try:
        return Place.model_validate({**raw, "name": raw.get("name") or name})
    except ValidationError as exc:
        logger.warning(f"Error parsing geocoding result for {name!r}: {exc.error_count()} errors")
        raise LocationFetchFailed() from exc


async def search_places(
    client: httpx.AsyncClient,
    *,
    name: str,
    settings: Settings,
) -> list[Place]:
    """
    All usable candidates, in API order. Malformed entries are dropped;
    CityNotFound when none is usable.
    """
    places = []
    for raw in await _fetch_results(client, name=name, settings=settings):
        try:
            places.append(_parse_place(raw, name=name))
        except LocationFetchFailed:
            continue
    if not places:
        raise CityNotFound()
    return places


async def geocode_city(
    client: httpx.AsyncClient,
    *,
    name: str,
    settings: Settings,
) -> Place:
    # First match wins; no ranking or disambiguation. Later candidates are not inspected.
    results = await _fetch_results(client, name=name, settings=settings)
    place = _parse_place(results[0], name=name)
    logger.info(
        f"Geocoded {name!r} -> {place.name} ({place.latitude}, {place.longitude})"
    )
    return place
