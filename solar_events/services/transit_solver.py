"""Meridian transit and hour-angle solver (Astronomical Algorithms, ch. 15).

The solver works on a :class:`SolarPositionTriple` (yesterday, today and
tomorrow at 0h UT) and an observer :class:`Coordinate`. Times come back as
hours of the UT day. Both the transit and the hour-angle results use a single
correction step on top of the approximate value; there is no iteration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angle_math import (
    AngleSeries,
    ValueSeries,
    closest_angle,
    normalize_with_bound,
    to_degrees,
    to_radians,
    unwind_angle,
)
from .errors import NoEventError
from .solar_ephemeris import SolarPosition

# Sidereal degrees gained per solar day (p. 103).
SIDEREAL_RATE = 360.985647


@dataclass(frozen=True)
class Coordinate:
    """Observer location in degrees; longitude is east-positive."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class SolarPositionTriple:
    previous: SolarPosition
    current: SolarPosition
    next: SolarPosition

    @property
    def right_ascension(self) -> AngleSeries:
        return AngleSeries(
            self.previous.right_ascension,
            self.current.right_ascension,
            self.next.right_ascension,
        )

    @property
    def declination(self) -> ValueSeries:
        return ValueSeries(
            self.previous.declination,
            self.current.declination,
            self.next.declination,
        )

    @property
    def sidereal_time(self) -> float:
        return self.current.apparent_sidereal_time


def altitude_of_celestial_body(latitude: float, declination: float, hour_angle: float) -> float:
    """Altitude in degrees for a body at ``hour_angle`` (p. 93)."""

    term1 = math.sin(to_radians(latitude)) * math.sin(to_radians(declination))
    term2 = (
        math.cos(to_radians(latitude))
        * math.cos(to_radians(declination))
        * math.cos(to_radians(hour_angle))
    )
    return to_degrees(math.asin(term1 + term2))


def approximate_transit(longitude: float, sidereal_time: float, right_ascension: float) -> float:
    """Fraction of the UT day at which the sun crosses the meridian."""

    lw = longitude * -1
    return normalize_with_bound((right_ascension + lw - sidereal_time) / 360, 1)


def corrected_transit(
    approx_transit: float,
    longitude: float,
    sidereal_time: float,
    right_ascension: AngleSeries,
) -> float:
    """Refine :func:`approximate_transit` and return the transit in UT hours."""

    lw = longitude * -1
    theta = unwind_angle(sidereal_time + (SIDEREAL_RATE * approx_transit))
    alpha = unwind_angle(right_ascension.at(approx_transit))
    hour_angle = closest_angle(theta - lw - alpha)
    dm = hour_angle / -360
    return (approx_transit + dm) * 24


def corrected_hour_angle(
    approx_transit: float,
    angle: float,
    coordinate: Coordinate,
    after_transit: bool,
    sidereal_time: float,
    right_ascension: AngleSeries,
    declination: ValueSeries,
) -> float:
    """UT hours at which the sun's altitude equals ``angle``.

    ``after_transit`` selects the afternoon crossing, otherwise the morning
    one. Raises :class:`NoEventError` when the sun never reaches ``angle``
    at this latitude on this date.
    """

    lw = coordinate.longitude * -1
    lat = coordinate.latitude
    term1 = math.sin(to_radians(angle)) - (
        math.sin(to_radians(lat)) * math.sin(to_radians(declination.current))
    )
    term2 = math.cos(to_radians(lat)) * math.cos(to_radians(declination.current))
    if term2 == 0:
        raise NoEventError(angle, lat, declination.current)
    ratio = term1 / term2
    if not -1.0 <= ratio <= 1.0:
        raise NoEventError(angle, lat, declination.current)

    h0 = to_degrees(math.acos(ratio))
    m = approx_transit + (h0 / 360) if after_transit else approx_transit - (h0 / 360)
    theta = unwind_angle(sidereal_time + (SIDEREAL_RATE * m))
    alpha = unwind_angle(right_ascension.at(m))
    delta = declination.at(m)
    hour_angle = theta - lw - alpha
    h = altitude_of_celestial_body(lat, delta, hour_angle)
    term3 = h - angle
    term4 = (
        360
        * math.cos(to_radians(delta))
        * math.cos(to_radians(lat))
        * math.sin(to_radians(hour_angle))
    )
    dm = term3 / term4
    return (m + dm) * 24


def afternoon_elevation(shadow_length: float, latitude: float, declination: float) -> float:
    """Solar elevation at which an object's shadow is ``shadow_length`` plus its noon shadow."""

    tangent = abs(latitude - declination)
    inverse = shadow_length + math.tan(to_radians(tangent))
    return to_degrees(math.atan(1.0 / inverse))


__all__ = [
    "Coordinate",
    "SIDEREAL_RATE",
    "SolarPositionTriple",
    "afternoon_elevation",
    "altitude_of_celestial_body",
    "approximate_transit",
    "corrected_hour_angle",
    "corrected_transit",
]
