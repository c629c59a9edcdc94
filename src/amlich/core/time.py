from __future__ import annotations
from typing import Tuple

# JDN of 15 Oct 1582, the first day of the Gregorian calendar.
REFORM_JDN = 2299161


def is_julian_date(day: int, month: int, year: int) -> bool:
    """True if (day, month, year) is strictly before 15 Oct 1582."""
    if year != 1582:
        return year < 1582
    return month < 10 or (month == 10 and day < 15)


def to_jdn(day: int, month: int, year: int) -> int:
    """
    Civil date -> Julian Day Number.

    Dates before the 1582 reform are read as Julian calendar dates, later ones
    as Gregorian. The branch is chosen from the input fields, not from the
    resulting day count.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    if is_julian_date(day, month, year):
        return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def from_jdn(jd: int) -> Tuple[int, int, int, int]:
    """
    Julian Day Number -> (day, month, year, jd), Meeus' inverse in integer form.

    Below REFORM_JDN the result is a Julian calendar date. The input jd is
    echoed unchanged as the last element.
    """
    if jd < REFORM_JDN:
        a = jd
    else:
        alpha = (4 * jd - 7468865) // 146097        # floor((jd - 1867216.25) / 36524.25)
        a = jd + 1 + alpha - alpha // 4
    b = a + 1524
    c = (20 * b - 2442) // 7305                     # floor((b - 122.1) / 365.25)
    d = (1461 * c) // 4                             # floor(365.25 * c)
    e = (10000 * (b - d)) // 306001                 # floor((b - d) / 30.6001)

    day = b - d - (306001 * e) // 10000
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return day, month, year, jd


def weekday_index(jd: int) -> int:
    """Day of week with 0=Sunday .. 6=Saturday."""
    return (jd + 1) % 7
