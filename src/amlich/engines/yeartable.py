"""
amlich.engines.yeartable
------------------------
Read-only lookup over the per-year codes. Codes are unpacked into
`YearCode` records once, when the table is built.
"""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

from ..core.errors import UnsupportedYearError
from . import _yearcodes
from .yearcode import YearCode

MIN_YEAR = 1200
MAX_YEAR = 2199


def is_supported_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def check_supported_year(year: int) -> None:
    if not is_supported_year(year):
        raise UnsupportedYearError(
            f"Year {year} is not supported. Supported range: {MIN_YEAR}-{MAX_YEAR}"
        )


class YearCodeTable:
    """
    Year -> packed code, built from century blocks of 100 codes each.

    `centuries` maps the first year of each block to its codes. `lead_in` is
    the code of the lunar year preceding the first block.
    """
    def __init__(self, centuries: Mapping[int, Sequence[int]], lead_in: int):
        self._codes: Dict[int, int] = {}
        for start, block in sorted(centuries.items()):
            if len(block) != 100:
                raise ValueError(f"Century block starting {start} has {len(block)} codes, expected 100")
            for i, code in enumerate(block):
                self._codes[start + i] = code

        self.first_year = min(self._codes)
        self.last_year = max(self._codes)
        if len(self._codes) != self.last_year - self.first_year + 1:
            raise ValueError("Century blocks must be contiguous")

        self._entries: Dict[int, YearCode] = {
            y: YearCode.unpack(code, y) for y, code in self._codes.items()
        }
        self.lead_in = YearCode.unpack(lead_in, self.first_year - 1)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, year: object) -> bool:
        return year in self._codes

    def code_for(self, year: int) -> int:
        if year not in self._codes:
            raise UnsupportedYearError(
                f"Year {year} is not supported. Supported range: {self.first_year}-{self.last_year}"
            )
        return self._codes[year]

    def entry_for(self, year: int) -> YearCode:
        if year not in self._entries:
            raise UnsupportedYearError(
                f"Year {year} is not supported. Supported range: {self.first_year}-{self.last_year}"
            )
        return self._entries[year]


TABLE = YearCodeTable(
    {
        1200: _yearcodes.TK13,
        1300: _yearcodes.TK14,
        1400: _yearcodes.TK15,
        1500: _yearcodes.TK16,
        1600: _yearcodes.TK17,
        1700: _yearcodes.TK18,
        1800: _yearcodes.TK19,
        1900: _yearcodes.TK20,
        2000: _yearcodes.TK21,
        2100: _yearcodes.TK22,
    },
    lead_in=_yearcodes.LEAD_IN_1199,
)


def code_for(year: int) -> int:
    """Packed code of `year` from the bundled table."""
    check_supported_year(year)
    return TABLE.code_for(year)
