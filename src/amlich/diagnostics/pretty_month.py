from __future__ import annotations

import argparse

import amlich
from amlich.core.time import from_jdn, to_jdn, weekday_index


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def monday_offset(jd: int) -> int:
    # weekday_index counts from Sunday
    return (weekday_index(jd) + 6) % 7


def layout(first_jd: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(monday_offset(first_jd))]
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> None:
    b = amlich.month_bounds(Y, M, leap=is_leap)
    d0 = b["first_date"]
    d1 = b["last_date"]

    days = []
    for info in amlich.month_days(Y, M, leap=is_leap):
        days.append((f"{info.lunar.day:2d}", f"{info.solar.month:02d}-{info.solar.day:02d}"))

    leap_tag = "L" if b["leap"] else ""
    title = f"Lunar month  Y={Y}  M={M}{leap_tag}   ({d0} .. {d1})"
    print_grid(title, layout(d0.jd, days))


def solar_month_calendar(gy: int, gm: int) -> None:
    first = to_jdn(1, gm, gy)
    next_first = to_jdn(1, 1, gy + 1) if gm == 12 else to_jdn(1, gm + 1, gy)

    # Walk day numbers: Julian Februaries and October 1582 come out right
    days = []
    for jd in range(first, next_first):
        d, m, y, _ = from_jdn(jd)
        t = amlich.solar_to_lunar(d, m, y)
        leap_tag = "L" if t.leap else ""
        days.append((f"{d:2d}", f"{t.month:02d}{leap_tag}-{t.day:02d}"))

    title = f"Solar month  {gy}-{gm:02d}"
    print_grid(title, layout(first, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a solar-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2025 6)")
    p.add_argument("--leap", action="store_true",
                   help="If set, lunar month is the leap instance (falls back to the regular month).")
    p.add_argument("--solar", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Solar month to print: GY GM (e.g. 2025 7)")
    args = p.parse_args(argv)

    if not args.lunar and not args.solar:
        lunar_month_calendar(Y=2025, M=6, is_leap=True)
        solar_month_calendar(gy=2025, gm=7)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(Y=Y, M=M, is_leap=args.leap)

    if args.solar:
        gy, gm = args.solar
        solar_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
