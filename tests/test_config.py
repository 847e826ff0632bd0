from cityweather.core.config import DEFAULT_CORS_ORIGINS, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CITYWEATHER_CORS_ORIGINS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.geocoding_url == "https://geocoding-api.open-meteo.com/v1/search"
    assert settings.forecast_url == "https://api.open-meteo.com/v1/forecast"
    assert settings.geocoding_count == 5
    assert settings.geocoding_language == "en"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CITYWEATHER_CORS_ORIGINS", "http://a.test, http://b.test,")
    settings = Settings(_env_file=None)

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_cors_origins_json(monkeypatch):
    monkeypatch.setenv("CITYWEATHER_CORS_ORIGINS", '["http://a.test"]')
    settings = Settings(_env_file=None)

    assert settings.cors_origins == ["http://a.test"]


def test_timeout_from_env(monkeypatch):
    monkeypatch.setenv("CITYWEATHER_HTTP_TIMEOUT_SECONDS", "2.5")
    settings = Settings(_env_file=None)

    assert settings.http_timeout_seconds == 2.5
