"""
amlich.engines.decoder
----------------------
Expands one year code into the ordered month-start markers of that lunar
year: 12 markers, or 13 when the year has a leap month.
"""

from __future__ import annotations

import logging
from typing import List, Union

from ..core.time import to_jdn
from ..core.types import LunarDate
from .yearcode import YearCode
from .yeartable import MIN_YEAR, TABLE, check_supported_year

logger = logging.getLogger(__name__)


def _expand(year: int, yc: YearCode) -> List[LunarDate]:
    current = to_jdn(1, 1, year) + yc.tet_offset
    months: List[LunarDate] = []
    for m in range(1, 13):
        months.append(LunarDate(1, m, year, False, current))
        current += yc.month_length(m)
        # The leap month repeats the number of the month it follows.
        if m == yc.leap_month:
            months.append(LunarDate(1, m, year, True, current))
            current += yc.leap_month_length
    return months


def decode_lunar_year(year: int, code: Union[int, YearCode]) -> List[LunarDate]:
    """
    Month-start markers (day=1) for lunar `year`, in chronological order.

    Raises UnsupportedYearError outside 1200..2199 and InvalidYearCodeError
    for a 0 code.
    """
    check_supported_year(year)
    yc = code if isinstance(code, YearCode) else YearCode.unpack(code, year)
    months = _expand(year, yc)
    logger.debug("decoded lunar year %d: %d months, leap=%d", year, len(months), yc.leap_month)
    return months


def year_info(year: int) -> List[LunarDate]:
    """Decoded markers of `year` from the bundled table."""
    check_supported_year(year)
    return decode_lunar_year(year, TABLE.entry_for(year))


def lead_in_year() -> List[LunarDate]:
    """Markers of the lunar year before MIN_YEAR, used only to resolve early January MIN_YEAR."""
    return _expand(MIN_YEAR - 1, TABLE.lead_in)
