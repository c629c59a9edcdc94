# tests/test_time.py

import random

import pytest

from amlich.core.time import REFORM_JDN, from_jdn, is_julian_date, to_jdn, weekday_index
from amlich.engines.locator import MAX_JDN, MIN_JDN


def test_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jd_in = random.randint(1721426, 5373484)
        d, m, y, jd_echo = from_jdn(jd_in)
        assert jd_echo == jd_in
        assert to_jdn(d, m, y) == jd_in


def test_consecutive_days_are_monotonic():
    random.seed(7)
    for _ in range(2000):
        jd = random.randint(MIN_JDN, MAX_JDN - 1)
        d0, m0, y0, _ = from_jdn(jd)
        d1, m1, y1, _ = from_jdn(jd + 1)
        assert to_jdn(d1, m1, y1) - to_jdn(d0, m0, y0) == 1


def test_known_epochs():
    assert to_jdn(1, 1, 2000) == 2451545
    assert from_jdn(2451545) == (1, 1, 2000, 2451545)
    assert to_jdn(10, 2, 2024) == 2460351


def test_gregorian_reform_boundary():
    # 4 Oct 1582 (Julian) is followed directly by 15 Oct 1582 (Gregorian)
    assert to_jdn(4, 10, 1582) == 2299160
    assert to_jdn(15, 10, 1582) == REFORM_JDN == 2299161
    assert from_jdn(2299160) == (4, 10, 1582, 2299160)
    assert from_jdn(2299161) == (15, 10, 1582, 2299161)


def test_reform_branch_is_chosen_from_input_fields():
    assert is_julian_date(14, 10, 1582)
    assert not is_julian_date(15, 10, 1582)
    assert is_julian_date(31, 12, 1581)
    assert not is_julian_date(1, 1, 1583)
    # 14 Oct 1582 is read as a Julian date, ten days past the reform
    assert to_jdn(14, 10, 1582) == 2299170


def test_julian_leap_day_before_reform():
    # 1500 is a leap year in the Julian calendar
    assert to_jdn(1, 3, 1500) - to_jdn(28, 2, 1500) == 2


def test_supported_range_bounds():
    assert MIN_JDN == to_jdn(1, 1, 1200) == 2159358
    assert MAX_JDN == to_jdn(31, 12, 2199) == 2524593


@pytest.mark.parametrize(
    "day, month, year, expected",
    [
        (10, 2, 2024, 6),   # Saturday
        (1, 1, 2000, 6),    # Saturday
        (26, 10, 2025, 0),  # Sunday
    ],
)
def test_weekday_index(day, month, year, expected):
    assert weekday_index(to_jdn(day, month, year)) == expected
