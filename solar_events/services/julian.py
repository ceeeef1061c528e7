"""Julian Day arithmetic for the Gregorian calendar.

Inputs are assumed to be valid calendar dates; validating them is the
caller's job (the HTTP layer does it through pydantic).
"""

from __future__ import annotations

import math
from datetime import date

from .angle_math import truncate

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


def julian_day(year: int, month: int, day: int, hours: float = 0.0) -> float:
    """Return the Julian Day at ``hours`` UT of the given Gregorian date.

    Equation from Astronomical Algorithms, p. 60. January and February are
    handled as months 13 and 14 of the previous year.
    """

    y = year if month > 2 else year - 1
    m = month if month > 2 else month + 12

    a = truncate(y / 100)
    b = 2 - a + truncate(a / 4)

    i0 = truncate(365.25 * (y + 4716))
    i1 = truncate(30.6001 * (m + 1))

    return i0 + i1 + day + b - 1524.5 + (hours / 24.0)


def julian_date(value: date) -> float:
    return julian_day(value.year, value.month, value.day)


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0 (Astronomical Algorithms, p. 163)."""

    return (jd - J2000) / DAYS_PER_CENTURY


def is_leap_year(year: int) -> bool:
    if year % 4 != 0:
        return False
    if year % 100 == 0 and year % 400 != 0:
        return False
    return True


def calendar_date(jd: float) -> date:
    """Inverse of :func:`julian_day` (Astronomical Algorithms, ch. 7).

    The fraction of the day is dropped; the returned date is the civil date
    on which ``jd`` falls.
    """

    shifted = jd + 0.5
    z = math.floor(shifted)
    f = shifted - z

    if z < 2299161:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return date(int(year), int(month), int(math.floor(day)))


def day_of_year(value: date) -> int:
    return value.timetuple().tm_yday


__all__ = [
    "DAYS_PER_CENTURY",
    "J2000",
    "calendar_date",
    "day_of_year",
    "is_leap_year",
    "julian_century",
    "julian_date",
    "julian_day",
]
