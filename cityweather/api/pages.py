from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from cityweather.api.v1.deps import get_lookup_handler
from cityweather.core.rate_limit import LOOKUP_RATE_LIMIT, limiter
from cityweather.services.weather.lookup import WeatherLookupHandler
from cityweather.services.weather.render import escape_html


router = APIRouter()


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>City Weather</title>
  <style>
    body {{ font-family: system-ui, sans-serif; max-width: 28rem; margin: 3rem auto; padding: 0 1rem; }}
    form {{ display: flex; gap: .5rem; }}
    input {{ flex: 1; padding: .5rem; }}
    #result {{ margin-top: 1.5rem; }}
    .city {{ font-weight: 600; font-size: 1.2rem; }}
    .temp {{ font-size: 2.5rem; }}
    .meta, .hint {{ color: #666; font-size: .9rem; }}
    .error {{ color: #b00020; }}
  </style>
</head>
<body>
  <h1>City Weather</h1>
  <form id="weather-form" method="get" action="/">
    <input id="city" name="city" type="text" placeholder="Enter a city" value="{city}" autofocus>
    <button type="submit">Get weather</button>
  </form>
  <div id="result">{result}</div>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
@limiter.limit(LOOKUP_RATE_LIMIT)
async def weather_page(
    request: Request,
    city: str | None = Query(None, max_length=120),
    handler: WeatherLookupHandler = Depends(get_lookup_handler),
):
    # A bare visit shows the empty form; a submitted form (even blank) runs a lookup.
    result_html = ""
    if city is not None:
        result = await handler.lookup(city)
        result_html = result.html
    return HTMLResponse(PAGE_TEMPLATE.format(city=escape_html(city or ""), result=result_html))
