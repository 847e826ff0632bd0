from __future__ import annotations

import math
from datetime import datetime

from cityweather.core.errors import WeatherLookupError
from cityweather.schemas.weather import CurrentWeather, DisplayError, Place, RenderedSummary
from cityweather.services.weather.open_meteo import weather_code_to_text


LOADING_TEXT = "Looking up location and weather…"

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)


def escape_html(value: object) -> str:
    return str(value).translate(_HTML_ESCAPES)


def join_label(*parts: str | None) -> str:
    return ", ".join(p for p in parts if p and p.strip())


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """10.0 -> "10", 10.5 -> "10.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_observed_at(time: str, timezone_abbreviation: str | None = None) -> str:
    """
    Turn an ISO-8601 local time ("2024-01-01T12:00") into "1/1/2024, 12:00:00 PM".

    Strings that do not parse are returned unchanged.
    """
    try:
        dt = datetime.fromisoformat(time)
    except ValueError:
        return time

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    text = f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    if timezone_abbreviation:
        text = f"{text} {timezone_abbreviation}"
    return text


def render_hint(message: str, *, error: bool = False) -> str:
    css = "hint error" if error else "hint"
    return f'<p class="{css}">{escape_html(message)}</p>'


def render_summary(place: Place, weather: CurrentWeather) -> RenderedSummary:
    label = join_label(place.name, place.admin1, place.country)
    temperature = round_half_up(weather.temperature)
    description = weather_code_to_text(weather.weathercode)
    observed_at = format_observed_at(weather.time, weather.timezone_abbreviation)

    html = (
        f'<div class="city">{escape_html(label)}</div>\n'
        f'<div class="temp">{escape_html(temperature)}°C</div>\n'
        f'<div class="desc">{escape_html(description)}</div>\n'
        f'<div class="meta">Wind: {escape_html(format_number(weather.windspeed))} km/h'
        f" • Last update: {escape_html(observed_at)}</div>"
    )

    return RenderedSummary(
        label=label,
        temperature=temperature,
        description=description,
        windspeed=weather.windspeed,
        observed_at=observed_at,
        place=place,
        weather=weather,
        html=html,
    )


def render_error(exc: WeatherLookupError) -> DisplayError:
    return DisplayError(
        kind=exc.kind,
        message=exc.message,
        html=render_hint(exc.message, error=True),
    )
