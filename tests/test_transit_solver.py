import math

import pytest

from solar_events.services.angle_math import AngleSeries, ValueSeries
from solar_events.services.errors import NoEventError, SolarEventsError
from solar_events.services.transit_solver import (
    Coordinate,
    afternoon_elevation,
    altitude_of_celestial_body,
    approximate_transit,
    corrected_hour_angle,
    corrected_transit,
)

# Astronomical Algorithms, example 15.a: Venus at Boston, 1988 March 20
BOSTON = Coordinate(latitude=42.3333, longitude=-71.0833)
SIDEREAL = 177.74208
RIGHT_ASCENSION = AngleSeries(previous=40.68021, current=41.73129, next=42.78204)
DECLINATION = ValueSeries(previous=18.04761, current=18.44092, next=18.82742)


def test_approximate_transit():
    m0 = approximate_transit(BOSTON.longitude, SIDEREAL, RIGHT_ASCENSION.current)
    assert abs(m0 - 0.81965) < 1e-5
    assert 0.0 <= m0 < 1.0


def test_corrected_transit():
    m0 = approximate_transit(BOSTON.longitude, SIDEREAL, RIGHT_ASCENSION.current)
    transit = corrected_transit(m0, BOSTON.longitude, SIDEREAL, RIGHT_ASCENSION)
    assert abs(transit / 24 - 0.81980) < 1e-4


def test_corrected_hour_angle_rise_and_set():
    m0 = approximate_transit(BOSTON.longitude, SIDEREAL, RIGHT_ASCENSION.current)
    rise = corrected_hour_angle(
        m0, -0.5667, BOSTON, False, SIDEREAL, RIGHT_ASCENSION, DECLINATION
    )
    setting = corrected_hour_angle(
        m0, -0.5667, BOSTON, True, SIDEREAL, RIGHT_ASCENSION, DECLINATION
    )
    assert abs(rise / 24 - 0.51766) < 1e-4
    # the setting time wraps past midnight into the next UT day
    assert 1.11 < setting / 24 < 1.13
    assert rise < 24 * 0.81980 < setting


def test_corrected_hour_angle_raises_when_elevation_unreachable():
    arctic = Coordinate(latitude=80.0, longitude=0.0)
    m0 = approximate_transit(arctic.longitude, SIDEREAL, RIGHT_ASCENSION.current)
    with pytest.raises(NoEventError) as excinfo:
        corrected_hour_angle(
            m0, -18.0, arctic, False, SIDEREAL, RIGHT_ASCENSION, DECLINATION
        )
    err = excinfo.value
    assert isinstance(err, SolarEventsError)
    assert err.elevation == -18.0
    assert err.latitude == 80.0
    assert err.declination == DECLINATION.current


def test_corrected_hour_angle_at_pole_raises():
    pole = Coordinate(latitude=90.0, longitude=0.0)
    with pytest.raises(NoEventError):
        corrected_hour_angle(0.5, 0.0, pole, True, SIDEREAL, RIGHT_ASCENSION, DECLINATION)


def test_altitude_of_celestial_body():
    # at transit the altitude is 90 - |lat - decl|
    assert abs(altitude_of_celestial_body(40.0, 10.0, 0.0) - 60.0) < 1e-9
    assert abs(altitude_of_celestial_body(0.0, 0.0, 90.0)) < 1e-9


def test_afternoon_elevation():
    # latitude equal to declination: shadow factor 1 means 45 degrees
    assert abs(afternoon_elevation(1.0, 20.0, 20.0) - 45.0) < 1e-9
    shafi = afternoon_elevation(1.0, 35.0, 10.0)
    hanafi = afternoon_elevation(2.0, 35.0, 10.0)
    assert 0.0 < hanafi < shafi < 90.0
    expected = math.degrees(math.atan(1.0 / (1.0 + math.tan(math.radians(25.0)))))
    assert abs(shafi - expected) < 1e-9
