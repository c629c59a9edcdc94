"""
Structural checks over the bundled year table.

For every year in range:
  * the code decodes (non-zero, 12 or 13 markers),
  * markers are strictly increasing with day == 1,
  * a leap marker, if any, directly follows its regular month,
  * month lengths are 29 or 30 days,
  * the year ends exactly where the next year's Tết begins.
"""

from __future__ import annotations

import argparse
from typing import List

from amlich.core.types import LunarDate
from amlich.engines.decoder import decode_lunar_year, lead_in_year
from amlich.engines.yeartable import MAX_YEAR, MIN_YEAR, TABLE


def check_year(year: int, months: List[LunarDate]) -> List[str]:
    problems: List[str] = []
    yc = TABLE.entry_for(year)

    expected = 13 if yc.has_leap_month else 12
    if len(months) != expected:
        problems.append(f"{year}: {len(months)} markers, expected {expected}")

    for a, b in zip(months, months[1:]):
        if b.jd - a.jd not in (29, 30):
            problems.append(f"{year}: month {a.month}{'L' if a.leap else ''} has {b.jd - a.jd} days")

    if any(m.day != 1 for m in months):
        problems.append(f"{year}: marker with day != 1")

    leaps = [i for i, m in enumerate(months) if m.leap]
    if len(leaps) > 1:
        problems.append(f"{year}: {len(leaps)} leap markers")
    for i in leaps:
        if i == 0 or months[i - 1].month != months[i].month or months[i - 1].leap:
            problems.append(f"{year}: leap month {months[i].month} does not follow its regular month")

    return problems


def check_table(first: int = MIN_YEAR, last: int = MAX_YEAR) -> List[str]:
    problems: List[str] = []
    prev_end = None
    if first == MIN_YEAR:
        lead = lead_in_year()
        prev_end = lead[0].jd + TABLE.lead_in.year_length

    for year in range(first, last + 1):
        months = decode_lunar_year(year, TABLE.code_for(year))
        problems.extend(check_year(year, months))
        if prev_end is not None and months[0].jd != prev_end:
            problems.append(f"{year}: Tết at JDN {months[0].jd}, previous year ends at {prev_end}")
        prev_end = months[0].jd + TABLE.entry_for(year).year_length

    return problems


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check that every year code decodes and the years chain without gaps.")
    p.add_argument("--from-year", type=int, default=MIN_YEAR)
    p.add_argument("--to-year", type=int, default=MAX_YEAR)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    problems = check_table(args.from_year, args.to_year)
    n = args.to_year - args.from_year + 1
    if not problems:
        print(f"Checked {n} years: OK")
        return 0

    for msg in problems:
        print(msg)
    print(f"Checked {n} years: {len(problems)} problem(s)")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
