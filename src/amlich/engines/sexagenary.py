"""
amlich.engines.sexagenary
-------------------------
Can Chi (heavenly stem / earthly branch) labels of years, months and days.

All functions are pure modular lookups and take raw integers, so they can
be used without converting a date first.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from ..core.errors import InvalidInputError
from .yeartable import is_supported_year

CAN: Tuple[str, ...] = ("Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý")
CHI: Tuple[str, ...] = ("Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ", "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi")
CON_GIAP: Tuple[str, ...] = ("Chuột", "Trâu", "Hổ", "Mèo", "Rồng", "Rắn", "Ngựa", "Dê", "Khỉ", "Gà", "Chó", "Lợn")

# Year stem -> Can Chi of lunar months 1..12. Month 1 is always a Dần month;
# its stem depends on the year stem (Giáp/Kỷ -> Bính, Ất/Canh -> Mậu, ...).
MONTH_STEM_BRANCH: Dict[str, Tuple[str, ...]] = {
    "Giáp": (
        "Bính Dần", "Đinh Mão", "Mậu Thìn", "Kỷ Tỵ", "Canh Ngọ", "Tân Mùi",
        "Nhâm Thân", "Quý Dậu", "Giáp Tuất", "Ất Hợi", "Bính Tý", "Đinh Sửu",
    ),
    "Ất": (
        "Mậu Dần", "Kỷ Mão", "Canh Thìn", "Tân Tỵ", "Nhâm Ngọ", "Quý Mùi",
        "Giáp Thân", "Ất Dậu", "Bính Tuất", "Đinh Hợi", "Mậu Tý", "Kỷ Sửu",
    ),
    "Bính": (
        "Canh Dần", "Tân Mão", "Nhâm Thìn", "Quý Tỵ", "Giáp Ngọ", "Ất Mùi",
        "Bính Thân", "Đinh Dậu", "Mậu Tuất", "Kỷ Hợi", "Canh Tý", "Tân Sửu",
    ),
    "Đinh": (
        "Nhâm Dần", "Quý Mão", "Giáp Thìn", "Ất Tỵ", "Bính Ngọ", "Đinh Mùi",
        "Mậu Thân", "Kỷ Dậu", "Canh Tuất", "Tân Hợi", "Nhâm Tý", "Quý Sửu",
    ),
    "Mậu": (
        "Giáp Dần", "Ất Mão", "Bính Thìn", "Đinh Tỵ", "Mậu Ngọ", "Kỷ Mùi",
        "Canh Thân", "Tân Dậu", "Nhâm Tuất", "Quý Hợi", "Giáp Tý", "Ất Sửu",
    ),
    "Kỷ": (
        "Bính Dần", "Đinh Mão", "Mậu Thìn", "Kỷ Tỵ", "Canh Ngọ", "Tân Mùi",
        "Nhâm Thân", "Quý Dậu", "Giáp Tuất", "Ất Hợi", "Bính Tý", "Đinh Sửu",
    ),
    "Canh": (
        "Mậu Dần", "Kỷ Mão", "Canh Thìn", "Tân Tỵ", "Nhâm Ngọ", "Quý Mùi",
        "Giáp Thân", "Ất Dậu", "Bính Tuất", "Đinh Hợi", "Mậu Tý", "Kỷ Sửu",
    ),
    "Tân": (
        "Canh Dần", "Tân Mão", "Nhâm Thìn", "Quý Tỵ", "Giáp Ngọ", "Ất Mùi",
        "Bính Thân", "Đinh Dậu", "Mậu Tuất", "Kỷ Hợi", "Canh Tý", "Tân Sửu",
    ),
    "Nhâm": (
        "Nhâm Dần", "Quý Mão", "Giáp Thìn", "Ất Tỵ", "Bính Ngọ", "Đinh Mùi",
        "Mậu Thân", "Kỷ Dậu", "Canh Tuất", "Tân Hợi", "Nhâm Tý", "Quý Sửu",
    ),
    "Quý": (
        "Giáp Dần", "Ất Mão", "Bính Thìn", "Đinh Tỵ", "Mậu Ngọ", "Kỷ Mùi",
        "Canh Thân", "Tân Dậu", "Nhâm Tuất", "Quý Hợi", "Giáp Tý", "Ất Sửu",
    ),
}


class StemBranch(NamedTuple):
    stem: int    # index into CAN
    branch: int  # index into CHI

    @property
    def label(self) -> str:
        return f"{CAN[self.stem]} {CHI[self.branch]}"


def year_pair(year: int) -> StemBranch:
    return StemBranch((year + 6) % 10, (year + 8) % 12)


def day_pair(jd: int) -> StemBranch:
    return StemBranch((jd + 9) % 10, (jd + 1) % 12)


def year_stem_branch(year: int) -> str:
    """E.g. 2024 -> 'Giáp Thìn'."""
    return year_pair(year).label


def day_stem_branch(jd: int) -> str:
    return day_pair(jd).label


def month_stem_branch(month: int, year: int) -> str:
    """Can Chi of lunar `month` in lunar `year` (a leap month shares its regular month's label)."""
    if not (1 <= month <= 12) or not is_supported_year(year):
        raise InvalidInputError(f"Invalid lunar month: {month} or year: {year}")

    year_can = CAN[year_pair(year).stem]
    row = MONTH_STEM_BRANCH.get(year_can)
    if row is None:
        raise InvalidInputError(f"Year Can {year_can} not found in MONTH_STEM_BRANCH")
    return row[month - 1]


def zodiac_animal(year: int) -> str:
    return CON_GIAP[year_pair(year).branch]
