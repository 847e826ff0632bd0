from __future__ import annotations

from typing import Optional

import httpx

from cityweather.core.config import Settings, get_settings


_client: Optional[httpx.AsyncClient] = None


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(max_keepalive_connections=10, max_connections=20)
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        timeout=timeout,
        limits=limits,
        headers={"User-Agent": "cityweather/0.1"},
        follow_redirects=True,
    )


def set_http_client(client: Optional[httpx.AsyncClient]) -> None:
    global _client
    _client = client


def get_http_client() -> httpx.AsyncClient:
    # Created lazily when the app runs without its lifespan (e.g. ASGITransport in tests).
    global _client
    if _client is None or _client.is_closed:
        _client = create_http_client(get_settings())
    return _client
