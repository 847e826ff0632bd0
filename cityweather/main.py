from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from cityweather.api.pages import router as pages_router
from cityweather.api.v1.router import api_v1_router
from cityweather.core.config import get_settings
from cityweather.core.http import create_http_client, set_http_client
from cityweather.core.logging_config import logger
from cityweather.core.rate_limit import limiter


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    client = create_http_client(settings)
    set_http_client(client)
    app.state.settings = settings
    logger.info(f"HTTP client ready (timeout={settings.http_timeout_seconds}s)")

    try:
        yield
    finally:
        await client.aclose()
        set_http_client(None)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="city weather",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_v1_router, prefix="/api/v1")
    app.include_router(pages_router)
    return app


app = create_app()
