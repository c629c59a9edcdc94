"""
amlich.lunar_calendar
---------------------
Object wrapper around one day, seen from both calendars at once.

    >>> cal = LunarCalendar.from_solar(10, 2, 2024)
    >>> str(cal)
    'Solar: 10/2/2024, Lunar: 1/1/2024'
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from .api import lunar_to_solar, solar_to_lunar
from .attributes.standard import THU
from .core.errors import InvalidInputError
from .core.time import to_jdn, weekday_index
from .core.types import LunarDate, SolarDateInfo
from .engines.decoder import year_info
from .engines.sexagenary import day_stem_branch, month_stem_branch, year_stem_branch
from .engines.yeartable import MAX_YEAR, MIN_YEAR, TABLE

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_fields(day, month, year, *, solar: bool) -> None:
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (day, month, year)):
        raise InvalidInputError("Day, month, and year must be integers")
    if not (1 <= day <= 31):
        raise InvalidInputError("Day must be between 1 and 31")
    if not (1 <= month <= 12):
        raise InvalidInputError("Month must be between 1 and 12")
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidInputError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")

    if solar:
        max_days = _DAYS_IN_MONTH[month - 1]
        if month == 2:
            leap_year = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
            max_days = 29 if leap_year else 28
        if day > max_days:
            raise InvalidInputError(
                f"Invalid date: {day}/{month}/{year}. Month {month} has only {max_days} days."
            )


def _lunar_in_year(jd: int, months: Sequence[LunarDate]) -> LunarDate:
    """Lunar date of `jd` counted from the markers of one decoded year."""
    year = months[0].year
    end = months[0].jd + TABLE.entry_for(year).year_length
    if jd >= end:
        # day 30 of a 29-day last month is Tết of the following year
        return LunarDate(1 + jd - end, 1, year + 1, False, jd)
    start = [m for m in months if m.jd <= jd][-1]
    return LunarDate(1 + jd - start.jd, start.month, year, start.leap, jd)


class LunarCalendar:
    """A single day with its solar and lunar labels. Build it with the classmethods."""

    def __init__(self, solar: SolarDateInfo, lunar: LunarDate):
        self._solar = solar
        self._lunar = lunar

    @classmethod
    def from_solar(cls, day: int, month: int, year: int) -> "LunarCalendar":
        _check_fields(day, month, year, solar=True)
        solar = SolarDateInfo(day, month, year, to_jdn(day, month, year))
        return cls(solar, solar_to_lunar(day, month, year))

    @classmethod
    def from_lunar(cls, day: int, month: int, year: int, leap: bool = False) -> "LunarCalendar":
        _check_fields(day, month, year, solar=False)
        solar = lunar_to_solar(day, month, year, leap)
        # The lunar side comes from the requested year's own months: the solar
        # date may already lie in the next solar year.
        return cls(solar, _lunar_in_year(solar.jd, year_info(year)))

    @classmethod
    def today(cls) -> "LunarCalendar":
        now = date.today()
        return cls.from_solar(now.day, now.month, now.year)

    @property
    def lunar_date(self) -> LunarDate:
        return self._lunar

    @property
    def solar_date(self) -> SolarDateInfo:
        return self._solar

    @property
    def year_can_chi(self) -> str:
        return year_stem_branch(self._lunar.year)

    @property
    def month_can_chi(self) -> str:
        return month_stem_branch(self._lunar.month, self._lunar.year)

    @property
    def day_can_chi(self) -> str:
        return day_stem_branch(self._solar.jd)

    @property
    def day_of_week(self) -> str:
        return THU[weekday_index(self._solar.jd)]

    def format_lunar(self) -> str:
        return str(self._lunar)

    def format_solar(self) -> str:
        return str(self._solar)

    def __str__(self) -> str:
        return f"Solar: {self.format_solar()}, Lunar: {self.format_lunar()}"

    def __repr__(self) -> str:
        return f"LunarCalendar(solar={self._solar!r}, lunar={self._lunar!r})"
