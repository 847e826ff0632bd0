from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CITYWEATHER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    geocoding_url: str = Field(default=DEFAULT_GEOCODING_URL)
    forecast_url: str = Field(default=DEFAULT_FORECAST_URL)
    geocoding_count: int = Field(default=5, ge=1, le=20)
    geocoding_language: str = Field(default="en", min_length=2, max_length=8)

    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)

    cors_origins: list[str] | str = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    lookup_rate_limit: str = Field(default="30/minute")
    rate_limit_enabled: bool = Field(default=True)

    log_level: str = Field(default="INFO")

    def model_post_init(self, __context: Any) -> None:
        # Allow CITYWEATHER_CORS_ORIGINS as JSON array or comma-separated string.
        raw = getattr(self, "cors_origins", None)
        if isinstance(raw, str):
            parsed = raw.strip()
            if parsed.startswith("["):
                try:
                    self.cors_origins = [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
                except ValueError:
                    self.cors_origins = [s.strip() for s in parsed.split(",") if s.strip()]
            else:
                self.cors_origins = [s.strip() for s in parsed.split(",") if s.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
