from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from cityweather.api.v1.deps import get_lookup_handler
from cityweather.core.errors import ErrorKind
from cityweather.core.rate_limit import LOOKUP_RATE_LIMIT, limiter
from cityweather.schemas.weather import LookupResponse
from cityweather.services.weather.lookup import WeatherLookupHandler


router = APIRouter()


STATUS_BY_ERROR_KIND = {
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.CITY_NOT_FOUND: 404,
    ErrorKind.NO_CURRENT_WEATHER: 404,
    ErrorKind.LOCATION_FETCH_FAILED: 502,
    ErrorKind.WEATHER_FETCH_FAILED: 502,
}


@router.get("/lookup", response_model=LookupResponse)
@limiter.limit(LOOKUP_RATE_LIMIT)
async def lookup_weather(
    request: Request,
    city: str = Query("", max_length=120),
    handler: WeatherLookupHandler = Depends(get_lookup_handler),
):
    result = await handler.lookup(city)
    body = LookupResponse(ok=result.ok, summary=result.summary, error=result.error, html=result.html)
    if result.ok:
        return body
    return JSONResponse(
        status_code=STATUS_BY_ERROR_KIND[result.error.kind],
        content=body.model_dump(mode="json"),
    )
