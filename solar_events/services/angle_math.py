"""Angle and interpolation helpers shared by the solar engine.

Everything here is plain float arithmetic so the helpers can be unit-tested
in isolation from the ephemeris code.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def truncate(x: float) -> float:
    """Drop the fractional part, rounding toward zero (not toward -inf)."""

    return math.ceil(x) if x < 0 else math.floor(x)


def to_degrees(radians: float) -> float:
    return (radians * 180.0) / math.pi


def to_radians(degrees: float) -> float:
    return (degrees * math.pi) / 180.0


def normalize_with_bound(value: float, bound: float) -> float:
    """Return ``value`` reduced into ``[0, bound)``; negative inputs included."""

    result = value - (bound * math.floor(value / bound))
    # tiny negative inputs round up to exactly ``bound``
    return 0.0 if result >= bound else result


def unwind_angle(angle: float) -> float:
    return normalize_with_bound(angle, 360.0)


def _round_half_away(value: float) -> float:
    # Python's round() is banker's rounding; the hour-angle reduction expects
    # halves to move away from zero.
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def closest_angle(angle: float) -> float:
    """Reduce ``angle`` into ``[-180, 180]``, keeping in-range values as-is."""

    if -180.0 <= angle <= 180.0:
        return angle
    return angle - (360.0 * _round_half_away(angle / 360.0))


def interpolate(value: float, previous: float, following: float, factor: float) -> float:
    """Quadratic interpolation of three equally spaced samples.

    ``value`` is the sample at t0, ``previous`` at t-1 and ``following`` at
    t+1. ``factor`` is the fractional offset from t0 (Meeus, p. 24).
    """

    a = value - previous
    b = following - value
    c = b - a
    return value + ((factor / 2.0) * (a + b + (factor * c)))


def interpolate_angles(value: float, previous: float, following: float, factor: float) -> float:
    """Same as :func:`interpolate` but the first differences are unwound.

    Use this for any quantity that wraps at 360 degrees (right ascension,
    sidereal time). Plain interpolation across 359 -> 1 collapses toward 180.
    """

    a = unwind_angle(value - previous)
    b = unwind_angle(following - value)
    c = b - a
    return value + ((factor / 2.0) * (a + b + (factor * c)))


@dataclass(frozen=True)
class ValueSeries:
    """Three consecutive daily samples of a non-wrapping quantity."""

    previous: float
    current: float
    next: float

    def at(self, factor: float) -> float:
        return interpolate(self.current, self.previous, self.next, factor)


@dataclass(frozen=True)
class AngleSeries:
    """Three consecutive daily samples of an angle that wraps at 360 degrees."""

    previous: float
    current: float
    next: float

    def at(self, factor: float) -> float:
        return interpolate_angles(self.current, self.previous, self.next, factor)


__all__ = [
    "AngleSeries",
    "ValueSeries",
    "closest_angle",
    "interpolate",
    "interpolate_angles",
    "normalize_with_bound",
    "to_degrees",
    "to_radians",
    "truncate",
    "unwind_angle",
]
