from datetime import date, timedelta

import pytest

from solar_events.services.julian import (
    calendar_date,
    day_of_year,
    is_leap_year,
    julian_century,
    julian_date,
    julian_day,
)


@pytest.mark.parametrize(
    "year, month, day, expected",
    [
        (2010, 1, 2, 2455198.5),
        (2011, 2, 4, 2455596.5),
        (2012, 3, 6, 2455992.5),
        (2013, 4, 8, 2456390.5),
        (2014, 5, 10, 2456787.5),
        (2015, 6, 12, 2457185.5),
        (2016, 7, 14, 2457583.5),
        (2017, 8, 16, 2457981.5),
        (2018, 9, 18, 2458379.5),
        (2019, 10, 20, 2458776.5),
        (2020, 11, 22, 2459175.5),
        (2021, 12, 24, 2459572.5),
        (1957, 10, 4, 2436115.5),
        (1987, 4, 10, 2446895.5),
        (1992, 10, 13, 2448908.5),
    ],
)
def test_julian_day_known_values(year, month, day, expected):
    assert julian_day(year, month, day) == expected


def test_julian_day_with_hours():
    assert julian_day(2000, 1, 1, 12.0) == 2451545.0
    assert julian_day(1957, 10, 4, 0.81 * 24) == pytest.approx(2436116.31, abs=1e-9)


def test_julian_date_accepts_date_objects():
    assert julian_date(date(2015, 6, 12)) == 2457185.5


def test_julian_century():
    assert julian_century(2451545.0) == 0.0
    assert julian_century(2451545.0 + 36525) == 1.0
    assert round(julian_century(2448908.5), 9) == -0.072183436


def test_leap_years():
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert is_leap_year(2024)
    assert not is_leap_year(2023)
    assert not is_leap_year(2100)
    assert is_leap_year(2016)


def test_calendar_date_round_trip_1900_2100():
    current = date(1900, 1, 1)
    end = date(2100, 12, 31)
    while current <= end:
        jd = julian_date(current)
        assert calendar_date(jd) == current, current
        current += timedelta(days=13)
    assert calendar_date(julian_date(end)) == end


def test_calendar_date_ignores_time_of_day():
    assert calendar_date(julian_day(2024, 2, 29, 23.5)) == date(2024, 2, 29)
    assert calendar_date(2451545.0) == date(2000, 1, 1)


def test_day_of_year():
    assert day_of_year(date(2015, 1, 1)) == 1
    assert day_of_year(date(2015, 12, 31)) == 365
    assert day_of_year(date(2016, 12, 31)) == 366
