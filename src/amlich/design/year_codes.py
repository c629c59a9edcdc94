"""
amlich.design.year_codes
------------------------
Regenerates packed year codes (see amlich.engines.yearcode) from
astronomical new moons and major solar terms, following Hồ Ngọc Đức's
algorithm:

  * a lunar month starts on the local civil day of its new moon,
  * month 11 is the month containing the winter solstice,
  * in a year with 13 months between two months 11, the first month
    without a major solar term is the leap month.

Local time is UTC+8 before 1968 and UTC+7 from 1968 on.

This is how TK13..TK18 and LEAD_IN_1199 in amlich.engines._yearcodes were
produced. TK19..TK22 are the published tables and are not regenerated:
the low-precision series used here disagrees with them in 33 of those 400
years (by one day at one or more month boundaries, mostly 1800-1925).

  python -m amlich.design.year_codes --from-year 1199 --to-year 1799
  python -m amlich.design.year_codes --compare --from-year 1800 --to-year 2199
"""

from __future__ import annotations

import argparse
import math
from typing import List, NamedTuple

from amlich.core.time import from_jdn, to_jdn
from amlich.engines.yearcode import YearCode

SYNODIC_MONTH = 29.530588853
# JD of the new moon of 1 Jan 1900, origin of the lunation index k
NEW_MOON_EPOCH = 2415021.076998695


def tz_for_year(year: int) -> float:
    """UTC offset (hours) of the civil calendar for `year`."""
    return 8.0 if year < 1968 else 7.0


def new_moon_day(k: int, tz: float) -> int:
    """Local civil JDN of the k-th new moon after 1 Jan 1900 (Meeus, low precision)."""
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T
    dr = math.pi / 180
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * dr)
    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    C1 = (0.1734 - 0.000393 * T) * math.sin(M * dr) + 0.0021 * math.sin(2 * dr * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * dr) + 0.0161 * math.sin(dr * 2 * Mpr)
    C1 = C1 - 0.0004 * math.sin(dr * 3 * Mpr)
    C1 = C1 + 0.0104 * math.sin(dr * 2 * F) - 0.0051 * math.sin(dr * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(dr * (M - Mpr)) + 0.0004 * math.sin(dr * (2 * F + M))
    C1 = C1 - 0.0004 * math.sin(dr * (2 * F - M)) - 0.0006 * math.sin(dr * (2 * F + Mpr))
    C1 = C1 + 0.0010 * math.sin(dr * (2 * F - Mpr)) + 0.0005 * math.sin(dr * (2 * Mpr + M))

    # Delta T in days
    if T < -11:
        dt = 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    else:
        dt = -0.000278 + 0.000265 * T + 0.000262 * T2
    return math.floor(jd1 + C1 - dt + 0.5 + tz / 24)


def sun_sector(jdn: int, tz: float) -> int:
    """Sun's apparent longitude at local midnight starting `jdn`, in 30-degree sectors 0..11."""
    T = (jdn - 2451545.5 - tz / 24) / 36525
    T2 = T * T
    dr = math.pi / 180
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2
    DL = (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(dr * M)
    DL = DL + (0.019993 - 0.000101 * T) * math.sin(dr * 2 * M) + 0.000290 * math.sin(dr * 3 * M)
    L = (L0 + DL) * dr
    L = L - math.pi * 2 * math.floor(L / (math.pi * 2))
    return math.floor(L / math.pi * 6)


def month_11_start(year: int, tz: float) -> int:
    """JDN of the first day of lunar month 11 falling in solar `year`."""
    off = to_jdn(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    start = new_moon_day(k, tz)
    if sun_sector(start, tz) >= 9:
        start = new_moon_day(k - 1, tz)
    return start


def leap_month_offset(a11: int, tz: float) -> int:
    """Index (months after month 11) of the first month without a major solar term."""
    k = math.floor((a11 - NEW_MOON_EPOCH) / SYNODIC_MONTH + 0.5)
    last = 0
    i = 1
    arc = sun_sector(new_moon_day(k + i, tz), tz)
    while arc != last and i < 14:
        last = arc
        i += 1
        arc = sun_sector(new_moon_day(k + i, tz), tz)
    return i - 1


class MonthStart(NamedTuple):
    jd: int
    month: int
    year: int
    leap: bool


def classify(month_start: int, tz: float) -> MonthStart:
    """Lunar month number, year and leap flag of the month starting on `month_start`."""
    year = from_jdn(month_start)[2]
    a11 = month_11_start(year, tz)
    b11 = a11
    if a11 >= month_start:
        lunar_year = year
        a11 = month_11_start(year - 1, tz)
    else:
        lunar_year = year + 1
        b11 = month_11_start(year + 1, tz)

    diff = (month_start - a11) // 29
    leap = False
    month = diff + 11
    if b11 - a11 > 365:
        ld = leap_month_offset(a11, tz)
        if diff >= ld:
            month = diff + 10
            leap = diff == ld
    if month > 12:
        month -= 12
    if month >= 11 and diff < 4:
        lunar_year -= 1
    return MonthStart(month_start, month, lunar_year, leap)


def generate_code(year: int, tz: float | None = None) -> int:
    """Packed year code of lunar `year`."""
    if tz is None:
        tz = tz_for_year(year)

    k0 = math.floor((to_jdn(1, 1, year) - NEW_MOON_EPOCH) / SYNODIC_MONTH) - 2
    starts: List[MonthStart] = []
    for k in range(k0, k0 + 20):
        ms = classify(new_moon_day(k, tz), tz)
        if ms.year == year:
            starts.append(ms)
    end = new_moon_day(k0, tz)
    while end <= starts[-1].jd:
        k0 += 1
        end = new_moon_day(k0, tz)

    if starts[0].month != 1 or starts[0].leap:
        raise ValueError(f"{year}: first month start is not month 1")

    bounds = [s.jd for s in starts] + [end]
    month_is_long = [False] * 12
    leap_month = 0
    leap_long = False
    for s, a, b in zip(starts, bounds, bounds[1:]):
        if b - a not in (29, 30):
            raise ValueError(f"{year}: month {s.month} has {b - a} days")
        if s.leap:
            leap_month = s.month
            leap_long = b - a == 30
        else:
            month_is_long[s.month - 1] = b - a == 30

    if len(starts) != (13 if leap_month else 12):
        raise ValueError(f"{year}: {len(starts)} month starts")

    return YearCode(
        leap_month=leap_month,
        leap_month_is_long=leap_long,
        tet_offset=starts[0].jd - to_jdn(1, 1, year),
        month_is_long=tuple(month_is_long),
    ).pack()


def format_block(name: str, codes: List[int], per_line: int = 10) -> str:
    lines = [f"{name}: Tuple[int, ...] = ("]
    for i in range(0, len(codes), per_line):
        lines.append("    " + " ".join(f"0x{c:06x}," for c in codes[i:i + per_line]))
    lines.append(")")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Generate packed lunar year codes (TK blocks).")
    p.add_argument("--from-year", type=int, default=1199)
    p.add_argument("--to-year", type=int, default=1799)
    p.add_argument("--compare", action="store_true",
                   help="Compare against the bundled table instead of printing blocks.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    if args.compare:
        from amlich.engines.yeartable import TABLE

        mismatches = 0
        for y in range(args.from_year, args.to_year + 1):
            bundled = TABLE.lead_in.pack() if y == TABLE.first_year - 1 else TABLE.code_for(y)
            got = generate_code(y)
            if got != bundled:
                mismatches += 1
                print(f"{y}: generated 0x{got:06x}, bundled 0x{bundled:06x}")
        print(f"{mismatches} of {args.to_year - args.from_year + 1} years differ")
        return 0

    y = args.from_year
    if y % 100 == 99:
        print(f"LEAD_IN_{y} = 0x{generate_code(y):06x}\n")
        y += 1
    while y <= args.to_year:
        last = min(args.to_year, y - y % 100 + 99)
        codes = [generate_code(v) for v in range(y, last + 1)]
        print(format_block(f"TK{y // 100 + 1}", codes))
        print()
        y = last + 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
