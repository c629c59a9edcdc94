"""amlich public API.

Vietnamese lunisolar calendar for the years 1200-2199. Most users only need
the functions re-exported here.
"""

import logging

# Register the standard day attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    solar_to_lunar,
    lunar_to_solar,
    solar_date,
    year_stem_branch,
    day_stem_branch,
    month_stem_branch,
    day_info,
    months_in_year,
    month_bounds,
    month_days,
    days_in_month,
    new_year_day,
)
from .core.errors import AmlichError, InvalidInputError, InvalidYearCodeError, UnsupportedYearError
from .core.time import from_jdn, to_jdn
from .core.types import DayInfo, LunarDate, SolarDateInfo
from .engines.decoder import decode_lunar_year, year_info
from .engines.locator import locate, start_of_month
from .engines.yeartable import MAX_YEAR, MIN_YEAR, code_for
from .lunar_calendar import LunarCalendar

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    "to_jdn",
    "from_jdn",
    "code_for",
    "decode_lunar_year",
    "year_info",
    "locate",
    "start_of_month",
    "LunarDate",
    "SolarDateInfo",
    "DayInfo",
    "LunarCalendar",
    "AmlichError",
    "UnsupportedYearError",
    "InvalidYearCodeError",
    "InvalidInputError",
    "MIN_YEAR",
    "MAX_YEAR",
]
