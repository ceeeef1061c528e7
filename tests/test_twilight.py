from datetime import datetime, timedelta, timezone

import pytest

from solar_events.services.twilight import (
    EVENING_COEFFICIENTS,
    MORNING_COEFFICIENTS,
    adjustment_minutes,
    days_since_solstice,
    season_adjusted_evening_twilight,
    season_adjusted_morning_twilight,
)

SUNRISE = datetime(2015, 12, 21, 7, 0, 0, tzinfo=timezone.utc)
SUNSET = datetime(2015, 12, 21, 16, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "day_of_year, year, latitude, expected",
    [
        (1, 2015, 1.0, 11),
        (355, 2015, 1.0, 0),
        (356, 2015, 1.0, 1),
        (356, 2016, 1.0, 0),
        (0, 2015, 0.0, 10),
        (172, 2015, -1.0, 0),
        (1, 2015, -1.0, 194),
        (173, 2016, -1.0, 0),
        (1, 2016, -1.0, 194),
    ],
)
def test_days_since_solstice(day_of_year, year, latitude, expected):
    assert days_since_solstice(day_of_year, year, latitude) == expected


def test_equator_adjustment_is_flat():
    for doy in (1, 80, 150, 200, 290, 365):
        assert adjustment_minutes(MORNING_COEFFICIENTS, 0.0, doy, 2015) == 75.0
        assert adjustment_minutes(EVENING_COEFFICIENTS, 0.0, doy, 2015) == 75.0


def test_equator_safeguards_offset_75_minutes():
    assert season_adjusted_morning_twilight(0.0, 355, 2015, SUNRISE) == SUNRISE - timedelta(minutes=75)
    assert season_adjusted_evening_twilight(0.0, 355, 2015, SUNSET) == SUNSET + timedelta(minutes=75)


def test_breakpoint_values_at_latitude_55():
    # dyy = 0 is anchor a, dyy = 91 is anchor b
    assert abs(adjustment_minutes(MORNING_COEFFICIENTS, 55.0, 355, 2015) - 103.65) < 1e-9
    assert abs(adjustment_minutes(MORNING_COEFFICIENTS, 55.0, 81, 2015) - 94.44) < 1e-9
    assert abs(adjustment_minutes(EVENING_COEFFICIENTS, 55.0, 355, 2015) - 100.6) < 1e-9
    # summer solstice (dyy = 183) sits on anchor d
    assert abs(adjustment_minutes(MORNING_COEFFICIENTS, 55.0, 173, 2015) - 123.10) < 1e-9
    assert abs(adjustment_minutes(EVENING_COEFFICIENTS, 55.0, 173, 2015) - 81.14) < 1e-9


def test_safeguard_rounds_to_whole_seconds():
    morning = season_adjusted_morning_twilight(55.0, 81, 2015, SUNRISE)
    assert SUNRISE - morning == timedelta(seconds=5666)
    evening = season_adjusted_evening_twilight(55.0, 355, 2015, SUNSET)
    assert evening - SUNSET == timedelta(seconds=6036)


def test_southern_hemisphere_mirrors_season():
    # day 172 is the southern winter solstice, day 355 the northern one
    assert days_since_solstice(172, 2015, -50.0) == 0
    assert adjustment_minutes(MORNING_COEFFICIENTS, -50.0, 172, 2015) == adjustment_minutes(
        MORNING_COEFFICIENTS, 50.0, 355, 2015
    )
    assert adjustment_minutes(EVENING_COEFFICIENTS, -50.0, 355, 2015) == adjustment_minutes(
        EVENING_COEFFICIENTS, 50.0, 173, 2015
    )


def test_curve_is_continuous_through_the_year():
    previous = adjustment_minutes(MORNING_COEFFICIENTS, 60.0, 1, 2015)
    for doy in range(2, 366):
        current = adjustment_minutes(MORNING_COEFFICIENTS, 60.0, doy, 2015)
        assert abs(current - previous) < 1.0, doy
        previous = current
