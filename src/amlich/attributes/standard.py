from __future__ import annotations
from typing import Any, Dict

from ..core.time import weekday_index
from ..engines import sexagenary as sx
from ..engines.yeartable import is_supported_year
from .registry import register_attribute

THU: tuple = ("Chủ nhật", "Thứ hai", "Thứ ba", "Thứ tư", "Thứ năm", "Thứ sáu", "Thứ bảy")

def weekday(info) -> Dict[str, Any]:
    # 0=Sunday..6=Saturday
    i = weekday_index(info.solar.jd)
    return {"weekday": i, "weekday_name": THU[i]}

def can_chi(info) -> Dict[str, Any]:
    lunar = info.lunar
    out: Dict[str, Any] = {"can_chi_day": sx.day_stem_branch(info.solar.jd)}
    if lunar.is_valid():
        out["can_chi_year"] = sx.year_stem_branch(lunar.year)
    # Month labels are only tabulated inside the supported years.
    if lunar.is_valid() and is_supported_year(lunar.year):
        out["can_chi_month"] = sx.month_stem_branch(lunar.month, lunar.year)
    return out

def zodiac(info) -> Dict[str, Any]:
    y = info.lunar.year
    return {"zodiac": sx.zodiac_animal(y) if y else None}

register_attribute("weekday", weekday)
register_attribute("can_chi", can_chi)
register_attribute("zodiac", zodiac)
