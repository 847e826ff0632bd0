import pytest

from cityweather.core.errors import CityNotFound, ErrorKind
from cityweather.schemas.weather import CurrentWeather, Place
from cityweather.services.weather.open_meteo import WEATHER_CODE_TEXT, weather_code_to_text
from cityweather.services.weather.render import (
    escape_html,
    format_number,
    format_observed_at,
    join_label,
    render_error,
    render_summary,
    round_half_up,
)


def test_weather_codes():
    assert weather_code_to_text(0) == "Clear sky"
    assert weather_code_to_text(3) == "Overcast"
    assert weather_code_to_text(99) == "Thunderstorm with heavy hail"
    assert weather_code_to_text(999) == "Unknown"


def test_weather_code_table_is_read_only():
    with pytest.raises(TypeError):
        WEATHER_CODE_TEXT[0] = "Sunny"


def test_escape_html():
    assert escape_html('<a href="x">Tom & Jerry</a>') == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;"
    )
    assert escape_html("&amp;") == "&amp;amp;"
    assert escape_html("O'Hare") == "O'Hare"
    assert escape_html(15) == "15"


@pytest.mark.parametrize(
    "parts, expected",
    [
        (("London", "Greater London", "UK"), "London, Greater London, UK"),
        (("London", None, "UK"), "London, UK"),
        (("London", "", "UK"), "London, UK"),
        (("London", "Greater London", None), "London, Greater London"),
        (("Monaco", None, None), "Monaco"),
    ],
)
def test_join_label(parts, expected):
    assert join_label(*parts) == expected


def test_round_half_up():
    assert round_half_up(15.4) == 15
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_format_number():
    assert format_number(10) == "10"
    assert format_number(10.0) == "10"
    assert format_number(12.7) == "12.7"


def test_format_observed_at():
    assert format_observed_at("2024-01-01T12:00") == "1/1/2024, 12:00:00 PM"
    assert format_observed_at("2024-03-09T00:15") == "3/9/2024, 12:15:00 AM"
    assert format_observed_at("2024-03-09T09:05", "CET") == "3/9/2024, 9:05:00 AM CET"
    assert format_observed_at("not a time") == "not a time"


def test_render_summary_markup():
    summary = render_summary(
        Place(name="Reykjavík", country="Iceland", latitude=64.13, longitude=-21.9),
        CurrentWeather(temperature=-3.5, windspeed=22.3, weathercode=71, time="2024-01-05T08:00"),
    )

    assert summary.label == "Reykjavík, Iceland"
    assert summary.temperature == -3
    assert summary.html.splitlines() == [
        '<div class="city">Reykjavík, Iceland</div>',
        '<div class="temp">-3°C</div>',
        '<div class="desc">Slight snow fall</div>',
        '<div class="meta">Wind: 22.3 km/h • Last update: 1/5/2024, 8:00:00 AM</div>',
    ]


def test_render_error():
    error = render_error(CityNotFound())
    assert error.kind == ErrorKind.CITY_NOT_FOUND
    assert error.html == (
        '<p class="hint error">City not found. Please check the spelling or try a nearby city.</p>'
    )
