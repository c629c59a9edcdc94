from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import AmlichError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """'YYYY-MM-DD' -> (day, month, year)."""
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return d, m, y


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich day", description="Solar date -> lunar date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d, m, y = args.date
    info = amlich.day_info(d, m, y, attributes=tuple(args.attr))
    print(f"Solar: {info.solar}  (JDN {info.solar.jd})")
    print(f"Lunar: {info.lunar}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich lunar", description="Lunar date -> solar date")
    p.add_argument("day", type=int)
    p.add_argument("month", type=int)
    p.add_argument("year", type=int)
    p.add_argument("--leap", action="store_true", help="Day lies in the leap instance of the month.")
    args = p.parse_args(argv)

    s = amlich.lunar_to_solar(args.day, args.month, args.year, args.leap)
    if not s.is_valid():
        print(f"Year {args.year} is outside {amlich.MIN_YEAR}-{amlich.MAX_YEAR}", file=sys.stderr)
        return 1
    print(f"{s}  (JDN {s.jd})")
    return 0


def cmd_year(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich year", description="List the lunar months of a year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    print(f"Lunar year {args.year}  {amlich.year_stem_branch(args.year)}")
    print("Month  Start        Days  Can Chi")
    print("-" * 36)
    for rec in amlich.months_in_year(args.year):
        label = f"{rec['month']}{'L' if rec['leap'] else ''}"
        print(f"{label:<6} {str(rec['first_date']):<12} {rec['length']:<5} {rec['can_chi']}")
    return 0


def cmd_can_chi(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich can-chi", description="Can Chi labels of a lunar year and its months")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    print(f"Year {args.year}: {amlich.year_stem_branch(args.year)}")
    for m in range(1, 13):
        print(f"  month {m:2d}: {amlich.month_stem_branch(m, args.year)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunar calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Solar date -> lunar date", add_help=False)
    sub.add_parser("lunar", help="Lunar date -> solar date", add_help=False)
    sub.add_parser("year", help="Lunar months of a year", add_help=False)
    sub.add_parser("can-chi", help="Can Chi labels of a year and its months", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/solar month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Tết date table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip", "table-check"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    commands = {
        "day": cmd_day,
        "lunar": cmd_lunar,
        "year": cmd_year,
        "can-chi": cmd_can_chi,
    }
    modules = {
        "pretty-month": "amlich.diagnostics.pretty_month",
        "new-years": "amlich.diagnostics.new_years_table",
    }
    tool_map = {
        "leap-months": "amlich.diagnostics.leap_months",
        "round-trip": "amlich.diagnostics.round_trip",
        "table-check": "amlich.diagnostics.table_check",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in modules:
            return _run_module_main(modules[args.cmd], rest)
        if args.cmd == "diag":
            return _run_module_main(tool_map[args.tool], rest)
    except AmlichError as e:
        print(f"amlich: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
