"""
amlich.engines.locator
----------------------
Searches a decoded lunar year: JDN -> lunar day, and lunar month -> its
start marker.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.errors import InvalidInputError
from ..core.time import to_jdn
from ..core.types import LunarDate
from .yeartable import MAX_YEAR, MIN_YEAR

logger = logging.getLogger(__name__)

MIN_JDN = to_jdn(1, 1, MIN_YEAR)
MAX_JDN = to_jdn(31, 12, MAX_YEAR)


def locate(jd: int, decoded_year: Sequence[LunarDate]) -> LunarDate:
    """
    Lunar date of `jd` within `decoded_year`.

    Returns the out-of-range sentinel if jd is outside MIN_JDN..MAX_JDN or
    precedes the first marker.
    """
    if jd < MIN_JDN or jd > MAX_JDN or not decoded_year or jd < decoded_year[0].jd:
        logger.debug("jd %d is outside the decoded range", jd)
        return LunarDate.out_of_range()

    i = len(decoded_year) - 1
    while jd < decoded_year[i].jd:
        i -= 1
    start = decoded_year[i]
    return LunarDate(1 + jd - start.jd, start.month, start.year, start.leap, jd)


def start_of_month(decoded_year: Sequence[LunarDate], month: int, leap: bool = False) -> LunarDate:
    """
    Marker of `month` (leap instance if requested).

    When the leap instance is requested but the year has no leap `month`,
    the regular month is returned instead of failing.
    """
    if not (1 <= month <= 12):
        raise InvalidInputError(f"Invalid lunar month: {month}")

    regular = None
    for marker in decoded_year:
        if marker.month != month:
            continue
        if marker.leap == leap:
            return marker
        if not marker.leap:
            regular = marker

    if regular is None:
        raise InvalidInputError(f"Month {month} is missing from the decoded year")
    logger.debug("no leap month %d in year %d; using the regular month", month, regular.year)
    return regular
