from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LunarDate:
    """
    A day of the Vietnamese lunisolar calendar.

    `jd` is the canonical key; the other fields are consistent with it for
    every date produced by the engines. The all-zero value (see
    `out_of_range`) marks a query outside the supported years.
    """
    day: int
    month: int
    year: int
    leap: bool
    jd: int

    @classmethod
    def out_of_range(cls) -> "LunarDate":
        return cls(0, 0, 0, False, 0)

    def is_valid(self) -> bool:
        return self.day > 0 and self.month > 0 and self.year > 0

    def same_day(self, other: "LunarDate") -> bool:
        """Compare labels only (day, month, year, leap), ignoring jd."""
        return (self.day, self.month, self.year, self.leap) == (other.day, other.month, other.year, other.leap)

    def __str__(self) -> str:
        tag = " (nhuận)" if self.leap else ""
        return f"{self.day}/{self.month}/{self.year}{tag}"


@dataclass(frozen=True)
class SolarDateInfo:
    """Solar (Gregorian, proleptic Julian before 1582-10-15) date with its JDN."""
    day: int
    month: int
    year: int
    jd: int

    @classmethod
    def out_of_range(cls) -> "SolarDateInfo":
        return cls(0, 0, 0, 0)

    def is_valid(self) -> bool:
        return self.day > 0 and self.month > 0 and self.year > 0

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class DayInfo:
    solar: SolarDateInfo
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
