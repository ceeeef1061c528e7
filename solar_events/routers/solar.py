"""Solar events API endpoints."""

from __future__ import annotations

import logging
from datetime import date, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, HTTPException
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..schemas import (
    AfternoonRequest,
    CrossingRequest,
    CrossingResponse,
    DayEventsRequest,
    DayEventsResponse,
    EventTime,
    PlaceOut,
    SolarMeta,
    SolarPlace,
    TwilightSafeguardRequest,
    TwilightSafeguardResponse,
)
from ..services.day_events import (
    DayEvents,
    EngineConfig,
    compute_day_events,
    hour_angle_crossing,
    hours_to_datetime,
    rounded_minute,
    twilight_safeguard,
)
from ..services.errors import NoEventError
from ..services.julian import day_of_year
from ..services.transit_solver import Coordinate, afternoon_elevation
from ..services.util.place_defaults import normalize_place

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/solar", tags=["solar"])


def _resolve_place(place: Optional[SolarPlace]) -> Tuple[Dict[str, Any], Dict[str, Any], ZoneInfo]:
    payload = place.model_dump(exclude_none=True) if place else None
    eff_place, flags = normalize_place(payload)
    try:
        tz = ZoneInfo(eff_place["tz"])
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail="UNKNOWN_TZ")
    return eff_place, flags, tz


def _place_out(place: Dict[str, Any]) -> PlaceOut:
    return PlaceOut(lat=place["lat"], lon=place["lon"], tz=place["tz"], label=place["query"])


def _meta(config: EngineConfig, flags: Dict[str, Any]) -> SolarMeta:
    return SolarMeta(
        horizon_altitude=config.horizon_altitude,
        place_defaults_used=flags["place_defaults_used"],
        tz_inferred=flags["tz_inferred"],
    )


def _event_time(day: date, hours: float, tz: ZoneInfo, round_to_minute: bool) -> EventTime:
    moment = hours_to_datetime(day, hours, tz)
    if round_to_minute:
        moment = rounded_minute(moment)
    return EventTime(hours_ut=hours, local=moment.isoformat())



def _local_day_events(day: date, place: Dict[str, Any], tz: ZoneInfo, config: EngineConfig) -> DayEvents:
    """Events whose transit falls on the local calendar ``day``.

    The engine works on UT days. Far from Greenwich the UT day's transit can
    land on the neighbouring local date, so the UT day is shifted once.
    """

    coordinate = Coordinate(place["lat"], place["lon"])
    events = compute_day_events(day, coordinate, config)
    transit_day = hours_to_datetime(day, events.transit, tz).date()
    if transit_day == day:
        return events
    ut_day = day - timedelta(days=1) if transit_day > day else day + timedelta(days=1)
    logger.debug("Local date %s maps to UT day %s", day.isoformat(), ut_day.isoformat())
    return compute_day_events(ut_day, coordinate, config)


@router.post("/day-events", response_model=DayEventsResponse)
def day_events_route(req: DayEventsRequest):
    place, flags, tz = _resolve_place(req.place)
    config = EngineConfig.from_env()
    events = _local_day_events(req.date, place, tz, config)

    meta = _meta(config, flags)
    sunrise = sunset = None
    if events.sunrise is None or events.sunset is None:
        meta.warnings.append("NO_SUNRISE_SUNSET: sun does not cross the horizon on this date")
    else:
        sunrise = _event_time(events.date, events.sunrise, tz, req.round_to_minute)
        sunset = _event_time(events.date, events.sunset, tz, req.round_to_minute)

    return DayEventsResponse(
        date=req.date.isoformat(),
        place=_place_out(place),
        approximate_transit=events.approximate_transit,
        transit=_event_time(events.date, events.transit, tz, req.round_to_minute),
        sunrise=sunrise,
        sunset=sunset,
        declination=events.solar.current.declination,
        right_ascension=events.solar.current.right_ascension,
        meta=meta,
    )


@router.post("/crossing", response_model=CrossingResponse)
def crossing_route(req: CrossingRequest):
    place, flags, tz = _resolve_place(req.place)
    config = EngineConfig.from_env()
    events = _local_day_events(req.date, place, tz, config)

    meta = _meta(config, flags)
    crossing = None
    try:
        hours = hour_angle_crossing(events, req.elevation_deg, req.after_transit)
        crossing = _event_time(events.date, hours, tz, req.round_to_minute)
    except NoEventError as exc:
        logger.info("No crossing for %s: %s", req.date.isoformat(), exc)
        meta.warnings.append(f"NO_EVENT: {exc}")

    return CrossingResponse(
        date=req.date.isoformat(),
        place=_place_out(place),
        elevation_deg=req.elevation_deg,
        after_transit=req.after_transit,
        crossing=crossing,
        meta=meta,
    )


@router.post("/afternoon", response_model=CrossingResponse)
def afternoon_route(req: AfternoonRequest):
    place, flags, tz = _resolve_place(req.place)
    config = EngineConfig.from_env()
    events = _local_day_events(req.date, place, tz, config)

    meta = _meta(config, flags)
    angle = afternoon_elevation(
        req.shadow_length, events.coordinate.latitude, events.solar.current.declination
    )
    crossing = None
    try:
        hours = hour_angle_crossing(events, angle, True)
        crossing = _event_time(events.date, hours, tz, req.round_to_minute)
    except NoEventError as exc:
        logger.info("No afternoon crossing for %s: %s", req.date.isoformat(), exc)
        meta.warnings.append(f"NO_EVENT: {exc}")

    return CrossingResponse(
        date=req.date.isoformat(),
        place=_place_out(place),
        elevation_deg=angle,
        after_transit=True,
        crossing=crossing,
        meta=meta,
    )


@router.post("/twilight-safeguard", response_model=TwilightSafeguardResponse)
def twilight_safeguard_route(req: TwilightSafeguardRequest):
    place, _flags, tz = _resolve_place(req.place)

    instant = req.instant
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    doy = day_of_year(req.date)
    adjusted = twilight_safeguard(place["lat"], doy, req.date.year, instant, req.period)
    return TwilightSafeguardResponse(
        date=req.date.isoformat(),
        place=_place_out(place),
        period=req.period,
        day_of_year=doy,
        instant=instant.astimezone(tz).isoformat(),
        adjusted=adjusted.astimezone(tz).isoformat(),
    )
