"""Seasonal twilight safeguards for high latitudes.

Above roughly 48 degrees the sun may never dip to the fajr/isha angle in
summer. These helpers give a candidate fajr (before sunrise) and isha (after
sunset) that follow a piecewise-linear seasonal curve scaled by latitude.
Picking between the candidate and the angle-based time is left to the caller.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Tuple

from .julian import is_leap_year

NORTHERN_OFFSET = 10

# Coefficients k for the constants 75 + k * |lat| / 55 at the four
# seasonal anchors (a, b, c, d).
MORNING_COEFFICIENTS: Tuple[float, float, float, float] = (28.65, 19.44, 32.74, 48.10)
EVENING_COEFFICIENTS: Tuple[float, float, float, float] = (25.60, 2.050, -9.210, 6.140)


def days_since_solstice(day_of_year: int, year: int, latitude: float) -> int:
    """Days elapsed since the hemisphere's winter solstice (approximately)."""

    southern_offset = 173 if is_leap_year(year) else 172
    days_in_year = 366 if is_leap_year(year) else 365

    if latitude >= 0:
        days = day_of_year + NORTHERN_OFFSET
        if days >= days_in_year:
            days -= days_in_year
    else:
        days = day_of_year - southern_offset
        if days < 0:
            days += days_in_year
    return days


def adjustment_minutes(
    coefficients: Tuple[float, float, float, float],
    latitude: float,
    day_of_year: int,
    year: int,
) -> float:
    """Interpolate the seasonal curve defined by ``coefficients``."""

    a, b, c, d = (75 + ((k / 55.0) * abs(latitude)) for k in coefficients)
    dyy = days_since_solstice(day_of_year, year, latitude)

    if dyy < 91:
        return a + (b - a) / 91.0 * dyy
    if dyy < 137:
        return b + (c - b) / 46.0 * (dyy - 91)
    if dyy < 183:
        return c + (d - c) / 46.0 * (dyy - 137)
    if dyy < 229:
        return d + (c - d) / 46.0 * (dyy - 183)
    if dyy < 275:
        return c + (b - c) / 46.0 * (dyy - 229)
    return b + (a - b) / 91.0 * (dyy - 275)


def _round_seconds(minutes: float) -> int:
    seconds = minutes * 60.0
    return int(seconds + 0.5) if seconds >= 0 else -int(-seconds + 0.5)


def season_adjusted_morning_twilight(
    latitude: float, day_of_year: int, year: int, sunrise: datetime
) -> datetime:
    minutes = adjustment_minutes(MORNING_COEFFICIENTS, latitude, day_of_year, year)
    return sunrise - timedelta(seconds=_round_seconds(minutes))


def season_adjusted_evening_twilight(
    latitude: float, day_of_year: int, year: int, sunset: datetime
) -> datetime:
    minutes = adjustment_minutes(EVENING_COEFFICIENTS, latitude, day_of_year, year)
    return sunset + timedelta(seconds=_round_seconds(minutes))


__all__ = [
    "EVENING_COEFFICIENTS",
    "MORNING_COEFFICIENTS",
    "adjustment_minutes",
    "days_since_solstice",
    "season_adjusted_evening_twilight",
    "season_adjusted_morning_twilight",
]
