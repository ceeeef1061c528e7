"""Request/response schemas for the solar events endpoints."""

from __future__ import annotations

from datetime import date as date_type, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Period = Literal["morning", "evening"]


class SolarPlace(BaseModel):
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lon: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    tz: Optional[str] = None
    query: Optional[str] = None


class DayEventsRequest(BaseModel):
    date: date_type
    place: Optional[SolarPlace] = None
    round_to_minute: bool = False


class CrossingRequest(DayEventsRequest):
    elevation_deg: float = Field(..., ge=-90.0, le=90.0)
    after_transit: bool = False


class AfternoonRequest(DayEventsRequest):
    shadow_length: float = Field(default=1.0, gt=0.0)


class TwilightSafeguardRequest(BaseModel):
    date: date_type
    place: Optional[SolarPlace] = None
    instant: datetime
    period: Period = "morning"


class PlaceOut(BaseModel):
    lat: float
    lon: float
    tz: str
    label: str


class SolarMeta(BaseModel):
    engine: str = "solar-events"
    horizon_altitude: float
    place_defaults_used: bool = False
    tz_inferred: bool = False
    warnings: List[str] = Field(default_factory=list)


class EventTime(BaseModel):
    hours_ut: float
    local: str


class DayEventsResponse(BaseModel):
    date: str
    place: PlaceOut
    approximate_transit: float
    transit: EventTime
    sunrise: Optional[EventTime] = None
    sunset: Optional[EventTime] = None
    declination: float
    right_ascension: float
    meta: SolarMeta


class CrossingResponse(BaseModel):
    date: str
    place: PlaceOut
    elevation_deg: float
    after_transit: bool
    crossing: Optional[EventTime] = None
    meta: SolarMeta


class TwilightSafeguardResponse(BaseModel):
    date: str
    place: PlaceOut
    period: Period
    day_of_year: int
    instant: str
    adjusted: str
