from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cityweather.core.errors import ErrorKind


class Place(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    admin1: str | None = Field(None, description="Region (state, province).")
    country: str | None = None
    latitude: float
    longitude: float
    timezone: str | None = None


class CurrentWeather(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    temperature: float = Field(..., description="Air temperature (C).")
    windspeed: float = Field(..., description="Wind speed (km/h).")
    weathercode: int = Field(..., description="WMO weather code.")
    time: str = Field(..., description="Observation time, local to the place.")
    timezone_abbreviation: str | None = None


class RenderedSummary(BaseModel):
    label: str
    temperature: int
    description: str
    windspeed: float
    observed_at: str
    place: Place
    weather: CurrentWeather
    html: str


class DisplayError(BaseModel):
    kind: ErrorKind
    message: str
    html: str


class LookupResult(BaseModel):
    summary: RenderedSummary | None = None
    error: DisplayError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "LookupResult":
        if (self.summary is None) == (self.error is None):
            raise ValueError("exactly one of summary or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.summary is not None

    @property
    def html(self) -> str:
        if self.summary is not None:
            return self.summary.html
        return self.error.html


class LookupResponse(BaseModel):
    ok: bool
    summary: RenderedSummary | None = None
    error: DisplayError | None = None
    html: str
