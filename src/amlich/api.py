from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Sequence

from .core.errors import InvalidInputError
from .core.time import from_jdn, to_jdn
from .core.types import DayInfo, LunarDate, SolarDateInfo
from .attributes.registry import compute_attributes
from .engines.decoder import lead_in_year, year_info
from .engines.locator import locate, start_of_month
from .engines.sexagenary import day_stem_branch, month_stem_branch, year_stem_branch
from .engines.yeartable import MIN_YEAR, TABLE, check_supported_year, is_supported_year

logger = logging.getLogger(__name__)

__all__ = [
    "solar_to_lunar",
    "lunar_to_solar",
    "solar_date",
    "year_stem_branch",
    "day_stem_branch",
    "month_stem_branch",
    "day_info",
    "months_in_year",
    "month_bounds",
    "month_days",
    "days_in_month",
    "new_year_day",
]


def solar_date(jd: int) -> SolarDateInfo:
    return SolarDateInfo(*from_jdn(jd))


# ============================================================
# Conversions
# ============================================================

def solar_to_lunar(day: int, month: int, year: int) -> LunarDate:
    """
    Solar date -> lunar date.

    Years outside 1200..2199 give the all-zero LunarDate (check `year == 0`
    or `is_valid()`); nothing is raised for them.
    """
    if not is_supported_year(year):
        logger.debug("solar year %d out of range", year)
        return LunarDate.out_of_range()

    jd = to_jdn(day, month, year)
    months = year_info(year)
    if jd < months[0].jd:
        # Before Tết: the day belongs to the previous lunar year.
        logger.debug("%d/%d/%d precedes Tết %d, retrying with the previous lunar year", day, month, year, year)
        months = year_info(year - 1) if year > MIN_YEAR else lead_in_year()
    return locate(jd, months)


def lunar_to_solar(day: int, month: int, year: int, leap: bool = False) -> SolarDateInfo:
    """
    Lunar date -> solar date.

    Asking for a leap month the year does not have yields the regular month.
    Years outside 1200..2199 give the all-zero SolarDateInfo.
    """
    if not is_supported_year(year):
        logger.debug("lunar year %d out of range", year)
        return SolarDateInfo.out_of_range()
    if not (1 <= day <= 30):
        raise InvalidInputError(f"Invalid lunar day: {day}")

    start = start_of_month(year_info(year), month, leap)
    return solar_date(start.jd + day - 1)


def day_info(day: int, month: int, year: int, *, attributes: Sequence[str] = ()) -> DayInfo:
    check_supported_year(year)
    jd = to_jdn(day, month, year)
    info = DayInfo(solar=SolarDateInfo(day, month, year, jd), lunar=solar_to_lunar(day, month, year))
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info


# ============================================================
# Month-level API
# ============================================================

def months_in_year(year: int) -> List[Dict[str, Any]]:
    """One record per lunar month of `year` (13 in a leap year)."""
    months = year_info(year)
    end = months[0].jd + TABLE.entry_for(year).year_length
    bounds = [m.jd for m in months] + [end]

    out = []
    for i, m in enumerate(months):
        out.append({
            "year": year,
            "month": m.month,
            "leap": m.leap,
            "first_jdn": bounds[i],
            "last_jdn": bounds[i + 1] - 1,
            "length": bounds[i + 1] - bounds[i],
            "first_date": solar_date(bounds[i]),
            "can_chi": month_stem_branch(m.month, year),
        })
    return out


def month_bounds(year: int, month: int, *, leap: bool = False) -> Dict[str, Any]:
    """First and last solar day of a lunar month (leap fallback as in lunar_to_solar)."""
    months = year_info(year)
    start = start_of_month(months, month, leap)
    i = months.index(start)
    if i + 1 < len(months):
        end = months[i + 1].jd
    else:
        end = months[0].jd + TABLE.entry_for(year).year_length
    return {
        "year": year,
        "month": month,
        "leap": start.leap,
        "first_jdn": start.jd,
        "last_jdn": end - 1,
        "first_date": solar_date(start.jd),
        "last_date": solar_date(end - 1),
    }


def days_in_month(year: int, month: int, *, leap: bool = False) -> int:
    b = month_bounds(year, month, leap=leap)
    return b["last_jdn"] - b["first_jdn"] + 1


def month_days(year: int, month: int, *, leap: bool = False) -> List[DayInfo]:
    """Every day of a lunar month as DayInfo records."""
    b = month_bounds(year, month, leap=leap)
    rows = []
    for jd in range(b["first_jdn"], b["last_jdn"] + 1):
        lunar = LunarDate(jd - b["first_jdn"] + 1, month, year, b["leap"], jd)
        rows.append(DayInfo(solar=solar_date(jd), lunar=lunar))
    return rows


def new_year_day(year: int) -> SolarDateInfo:
    """Solar date of Tết (lunar 1/1) of `year`."""
    return solar_date(year_info(year)[0].jd)
