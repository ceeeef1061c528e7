"""Low-precision solar ephemeris (Meeus, Astronomical Algorithms ch. 22-25).

Accuracy is about 0.01 degree in declination and right ascension, which is
more than enough for minute-level sunrise/sunset times. Every mean longitude
is unwound into [0, 360) as soon as it is derived so that the three-day
interpolation downstream never sees a wrap.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angle_math import to_degrees, to_radians, unwind_angle
from .julian import J2000, DAYS_PER_CENTURY, julian_century


@dataclass(frozen=True)
class SolarPosition:
    """Apparent equatorial position of the sun at 0h UT of a Julian Day."""

    declination: float  # degrees
    right_ascension: float  # degrees, [0, 360)
    apparent_sidereal_time: float  # degrees, Greenwich


def mean_solar_longitude(t: float) -> float:
    """Geometric mean longitude of the sun (p. 163)."""

    return unwind_angle(280.4664567 + (36000.76983 * t) + (0.0003032 * t ** 2))


def mean_lunar_longitude(t: float) -> float:
    """Mean longitude of the moon (p. 144)."""

    return unwind_angle(218.3165 + (481267.8813 * t))


def ascending_lunar_node_longitude(t: float) -> float:
    """Longitude of the moon's ascending node (p. 144)."""

    omega = 125.04452 - (1934.136261 * t) + (0.0020708 * t ** 2) + (t ** 3 / 450000)
    return unwind_angle(omega)


def mean_solar_anomaly(t: float) -> float:
    """Mean anomaly of the sun (p. 163)."""

    return unwind_angle(357.52911 + (35999.05029 * t) - (0.0001537 * t ** 2))


def solar_equation_of_the_center(t: float, mean_anomaly: float) -> float:
    """Equation of the center in degrees (p. 164)."""

    m = to_radians(mean_anomaly)
    term1 = (1.914602 - (0.004817 * t) - (0.000014 * t ** 2)) * math.sin(m)
    term2 = (0.019993 - (0.000101 * t)) * math.sin(2 * m)
    term3 = 0.000289 * math.sin(3 * m)
    return term1 + term2 + term3


def apparent_solar_longitude(t: float, mean_longitude: float) -> float:
    """Apparent longitude referred to the true equinox of date (p. 164)."""

    longitude = mean_longitude + solar_equation_of_the_center(t, mean_solar_anomaly(t))
    omega = 125.04 - (1934.136 * t)
    return unwind_angle(longitude - 0.00569 - (0.00478 * math.sin(to_radians(omega))))


def mean_obliquity_of_the_ecliptic(t: float) -> float:
    """IAU mean obliquity in degrees (p. 147)."""

    return 23.439291 - (0.013004167 * t) - (0.0000001639 * t ** 2) + (0.0000005036 * t ** 3)


def apparent_obliquity_of_the_ecliptic(t: float, mean_obliquity: float) -> float:
    """Mean obliquity corrected for the apparent solar position (p. 165)."""

    omega = 125.04 - (1934.136 * t)
    return mean_obliquity + (0.00256 * math.cos(to_radians(omega)))


def mean_sidereal_time(t: float) -> float:
    """Mean sidereal time at Greenwich in degrees (p. 88)."""

    jd = (t * DAYS_PER_CENTURY) + J2000
    theta = (
        280.46061837
        + (360.98564736629 * (jd - J2000))
        + (0.000387933 * t ** 2)
        - (t ** 3 / 38710000)
    )
    return unwind_angle(theta)


def nutation_in_longitude(solar_longitude: float, lunar_longitude: float, ascending_node: float) -> float:
    """Four-term nutation in longitude, degrees (p. 144)."""

    term1 = (-17.2 / 3600) * math.sin(to_radians(ascending_node))
    term2 = (1.32 / 3600) * math.sin(2 * to_radians(solar_longitude))
    term3 = (0.23 / 3600) * math.sin(2 * to_radians(lunar_longitude))
    term4 = (0.21 / 3600) * math.sin(2 * to_radians(ascending_node))
    return term1 - term2 - term3 + term4


def nutation_in_obliquity(solar_longitude: float, lunar_longitude: float, ascending_node: float) -> float:
    """Four-term nutation in obliquity, degrees (p. 144)."""

    term1 = (9.2 / 3600) * math.cos(to_radians(ascending_node))
    term2 = (0.57 / 3600) * math.cos(2 * to_radians(solar_longitude))
    term3 = (0.10 / 3600) * math.cos(2 * to_radians(lunar_longitude))
    term4 = (0.09 / 3600) * math.cos(2 * to_radians(ascending_node))
    return term1 + term2 + term3 - term4


def compute_solar_position(jd: float) -> SolarPosition:
    """Return the sun's declination, right ascension and sidereal time for ``jd``."""

    t = julian_century(jd)
    l0 = mean_solar_longitude(t)
    lp = mean_lunar_longitude(t)
    omega = ascending_lunar_node_longitude(t)
    lam = to_radians(apparent_solar_longitude(t, l0))
    theta0 = mean_sidereal_time(t)
    d_psi = nutation_in_longitude(l0, lp, omega)
    d_epsilon = nutation_in_obliquity(l0, lp, omega)
    epsilon0 = mean_obliquity_of_the_ecliptic(t)
    epsilon = to_radians(apparent_obliquity_of_the_ecliptic(t, epsilon0))

    declination = to_degrees(math.asin(math.sin(epsilon) * math.sin(lam)))
    right_ascension = unwind_angle(
        to_degrees(math.atan2(math.cos(epsilon) * math.sin(lam), math.cos(lam)))
    )
    apparent_sidereal_time = theta0 + (
        ((d_psi * 3600) * math.cos(to_radians(epsilon0 + d_epsilon))) / 3600
    )

    return SolarPosition(
        declination=declination,
        right_ascension=right_ascension,
        apparent_sidereal_time=apparent_sidereal_time,
    )


__all__ = [
    "SolarPosition",
    "apparent_obliquity_of_the_ecliptic",
    "apparent_solar_longitude",
    "ascending_lunar_node_longitude",
    "compute_solar_position",
    "mean_lunar_longitude",
    "mean_obliquity_of_the_ecliptic",
    "mean_sidereal_time",
    "mean_solar_anomaly",
    "mean_solar_longitude",
    "nutation_in_longitude",
    "nutation_in_obliquity",
    "solar_equation_of_the_center",
]
