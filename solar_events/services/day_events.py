"""Entry points of the solar engine.

``compute_day_events`` builds the three-day ephemeris for a date and solves
transit, sunrise and sunset for an observer. The returned :class:`DayEvents`
is then the context for arbitrary elevation crossings (twilight angles,
afternoon shadow ratios). All results are hours of the UT day; use
:func:`hours_to_datetime` to place them on a clock.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional

from .errors import NoEventError
from .julian import julian_date
from .solar_ephemeris import compute_solar_position
from .transit_solver import (
    Coordinate,
    SolarPositionTriple,
    afternoon_elevation,
    approximate_transit,
    corrected_hour_angle,
    corrected_transit,
)
from .twilight import season_adjusted_evening_twilight, season_adjusted_morning_twilight

logger = logging.getLogger(__name__)

# Standard refraction (34') plus the solar semi-diameter (16').
STANDARD_HORIZON_ALTITUDE = -50.0 / 60.0


@dataclass(frozen=True)
class EngineConfig:
    """Engine settings passed explicitly into each computation."""

    horizon_altitude: float = STANDARD_HORIZON_ALTITUDE

    @classmethod
    def from_env(cls) -> "EngineConfig":
        raw = os.getenv("SOLAR_HORIZON_ALTITUDE")
        if raw is None or not raw.strip():
            return cls()
        return cls(horizon_altitude=float(raw))


@dataclass(frozen=True)
class DayEvents:
    date: date
    coordinate: Coordinate
    solar: SolarPositionTriple
    approximate_transit: float  # fraction of the UT day
    transit: float  # UT hours
    sunrise: Optional[float]  # UT hours, None during polar day/night
    sunset: Optional[float]


def solar_triple(day: date) -> SolarPositionTriple:
    """Ephemeris for ``day`` and its two neighbours, one Julian Day apart."""

    jd = julian_date(day)
    return SolarPositionTriple(
        previous=compute_solar_position(jd - 1),
        current=compute_solar_position(jd),
        next=compute_solar_position(jd + 1),
    )


def _crossing(
    coordinate: Coordinate,
    solar: SolarPositionTriple,
    approx: float,
    elevation: float,
    after_transit: bool,
) -> float:
    return corrected_hour_angle(
        approx,
        elevation,
        coordinate,
        after_transit,
        solar.sidereal_time,
        solar.right_ascension,
        solar.declination,
    )


def compute_day_events(
    day: date, coordinate: Coordinate, config: Optional[EngineConfig] = None
) -> DayEvents:
    """Transit, sunrise and sunset for ``coordinate`` on ``day``."""

    config = config or EngineConfig()
    solar = solar_triple(day)
    approx = approximate_transit(
        coordinate.longitude, solar.sidereal_time, solar.current.right_ascension
    )
    transit = corrected_transit(
        approx, coordinate.longitude, solar.sidereal_time, solar.right_ascension
    )

    sunrise: Optional[float]
    sunset: Optional[float]
    try:
        sunrise = _crossing(coordinate, solar, approx, config.horizon_altitude, False)
        sunset = _crossing(coordinate, solar, approx, config.horizon_altitude, True)
    except NoEventError as exc:
        logger.debug("No sunrise/sunset on %s: %s", day.isoformat(), exc)
        sunrise = sunset = None

    logger.debug(
        "Day events %s lat=%.4f lon=%.4f transit=%.4f sunrise=%s sunset=%s",
        day.isoformat(),
        coordinate.latitude,
        coordinate.longitude,
        transit,
        sunrise,
        sunset,
    )
    return DayEvents(
        date=day,
        coordinate=coordinate,
        solar=solar,
        approximate_transit=approx,
        transit=transit,
        sunrise=sunrise,
        sunset=sunset,
    )


def hour_angle_crossing(events: DayEvents, elevation: float, after_transit: bool) -> float:
    """UT hours at which the sun passes ``elevation`` degrees.

    Raises :class:`NoEventError` if the sun never reaches that elevation.
    """

    return _crossing(
        events.coordinate, events.solar, events.approximate_transit, elevation, after_transit
    )


def afternoon(events: DayEvents, shadow_length: float) -> float:
    """UT hours when shadows reach ``shadow_length`` times the object plus the noon shadow."""

    angle = afternoon_elevation(
        shadow_length, events.coordinate.latitude, events.solar.current.declination
    )
    return hour_angle_crossing(events, angle, True)


def twilight_safeguard(
    latitude: float, day_of_year: int, year: int, raw_instant: datetime, period: str
) -> datetime:
    """Seasonal safeguard instant: ``morning`` counts back from sunrise, ``evening`` forward from sunset."""

    if period == "morning":
        return season_adjusted_morning_twilight(latitude, day_of_year, year, raw_instant)
    if period == "evening":
        return season_adjusted_evening_twilight(latitude, day_of_year, year, raw_instant)
    raise ValueError(f"unknown twilight period: {period!r}")


def hours_to_datetime(day: date, hours: float, tz: tzinfo = timezone.utc) -> datetime:
    """Place a UT hour-of-day on ``day``, carrying into neighbouring days.

    Seconds are truncated; values below 0 or at/above 24 land on the previous
    or next calendar day. The result is expressed in ``tz``.
    """

    if not math.isfinite(hours):
        raise ValueError(f"hours must be finite, got {hours!r}")

    hour = math.floor(hours)
    minute = math.floor((hours - hour) * 60)
    second = math.floor((hours - (hour + minute / 60)) * 60 * 60)
    midnight = datetime.combine(day, time(0, 0), tzinfo=timezone.utc)
    instant = midnight + timedelta(hours=hour, minutes=minute, seconds=second)
    return instant.astimezone(tz)


def rounded_minute(value: datetime) -> datetime:
    """Round to the nearest whole minute; 30 seconds rounds up."""

    seconds = value.second
    offset = 60 - seconds if seconds >= 30 else -seconds
    return value.replace(microsecond=0) + timedelta(seconds=offset)


__all__ = [
    "DayEvents",
    "EngineConfig",
    "STANDARD_HORIZON_ALTITUDE",
    "afternoon",
    "compute_day_events",
    "hour_angle_crossing",
    "hours_to_datetime",
    "rounded_minute",
    "solar_triple",
    "twilight_safeguard",
]
