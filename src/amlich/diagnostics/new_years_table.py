from __future__ import annotations

import argparse

import amlich
from amlich.core.types import SolarDateInfo
from amlich.engines.yeartable import TABLE


def mmdd(d: SolarDateInfo) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def iso(d: SolarDateInfo) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Tết (lunar New Year) date table with year labels and leap months."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format of the Tết column (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=2,
        help="After the table, list the Tết dates that fall in this solar month (default: 2).",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else iso

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Tết", "Can Chi", "Leap"]
    colw = [5, 10, 10, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[SolarDateInfo] = []

    for Y in range(Y0, Y1 + 1):
        d = amlich.new_year_day(Y)
        leap = TABLE.entry_for(Y).leap_month
        row = [str(Y), fmt(d), amlich.year_stem_branch(Y), str(leap) if leap else "-"]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if d.month == args.list_month:
            hits.append(d)

    print(f"\nTết occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for d in sorted(hits, key=lambda s: (s.month, s.day, s.year)):
        print(iso(d))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
