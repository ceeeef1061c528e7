"""Exceptions raised by the solar engine."""

from __future__ import annotations


class SolarEventsError(Exception):
    """Base class for solar engine failures."""


class NoEventError(SolarEventsError):
    """The sun never reaches the requested elevation on this date.

    Raised instead of returning NaN when the hour-angle ``acos`` argument
    falls outside [-1, 1] (polar day or polar night for that elevation).
    """

    def __init__(self, elevation: float, latitude: float, declination: float) -> None:
        self.elevation = elevation
        self.latitude = latitude
        self.declination = declination
        super().__init__(
            f"sun does not reach {elevation:.4f} deg at latitude {latitude:.4f} "
            f"(declination {declination:.4f})"
        )


__all__ = ["NoEventError", "SolarEventsError"]
