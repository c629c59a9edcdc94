"""
amlich.engines.yearcode
-----------------------
Structured form of a packed lunar year code. All bit manipulation of the
year tables lives here; the rest of the package works with `YearCode`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import InvalidYearCodeError

_LEAP_MONTH_MASK = 0xF
_MONTH_FLAGS_SHIFT = 4
_LEAP_LENGTH_SHIFT = 16
_TET_OFFSET_SHIFT = 17

SHORT_MONTH = 29
LONG_MONTH = 30


@dataclass(frozen=True)
class YearCode:
    """
    leap_month:         0 if the year has no leap month, else 1..12
    leap_month_is_long: leap month has 30 days (meaningful only with a leap month)
    tet_offset:         days from 1 January to the first day of month 1
    month_is_long:      12 flags, index 0 = month 1
    """
    leap_month: int
    leap_month_is_long: bool
    tet_offset: int
    month_is_long: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if not (0 <= self.leap_month <= 12):
            raise ValueError("leap_month must be in 0..12")
        if self.tet_offset < 0:
            raise ValueError("tet_offset must be non-negative")
        if len(self.month_is_long) != 12:
            raise ValueError("month_is_long needs exactly 12 flags")

    @classmethod
    def unpack(cls, code: int, year: int | None = None) -> "YearCode":
        if code == 0:
            where = f" for year {year}" if year is not None else ""
            raise InvalidYearCodeError(f"Invalid year code: 0{where}")

        # Flag bits run from month 12 (lowest) up to month 1 (highest).
        flags = code >> _MONTH_FLAGS_SHIFT
        month_is_long = [False] * 12
        for i in range(12):
            month_is_long[11 - i] = bool(flags & 0x1)
            flags >>= 1

        return cls(
            leap_month=code & _LEAP_MONTH_MASK,
            leap_month_is_long=bool((code >> _LEAP_LENGTH_SHIFT) & 0x1),
            tet_offset=code >> _TET_OFFSET_SHIFT,
            month_is_long=tuple(month_is_long),
        )

    def pack(self) -> int:
        flags = 0
        for is_long in self.month_is_long:
            flags = (flags << 1) | int(is_long)
        return (
            (self.tet_offset << _TET_OFFSET_SHIFT)
            | (int(self.leap_month_is_long) << _LEAP_LENGTH_SHIFT)
            | (flags << _MONTH_FLAGS_SHIFT)
            | self.leap_month
        )

    @property
    def has_leap_month(self) -> bool:
        return self.leap_month != 0

    def month_length(self, month: int) -> int:
        return LONG_MONTH if self.month_is_long[month - 1] else SHORT_MONTH

    @property
    def leap_month_length(self) -> int:
        return LONG_MONTH if self.leap_month_is_long else SHORT_MONTH

    @property
    def year_length(self) -> int:
        days = sum(self.month_length(m) for m in range(1, 13))
        if self.has_leap_month:
            days += self.leap_month_length
        return days
