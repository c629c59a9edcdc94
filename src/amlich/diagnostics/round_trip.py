from __future__ import annotations

import argparse
import logging
import random

import amlich
from amlich.core.time import from_jdn, to_jdn

logger = logging.getLogger(__name__)


def parse_date(s: str) -> int:
    """'YYYY-MM-DD' -> JDN."""
    y, m, d = s.split("-")
    return to_jdn(int(d), int(m), int(y))


def roundtrip_test(N: int, start_jd: int, end_jd: int, seed: int, *, max_failures: int) -> int:
    """solar -> lunar -> solar on N random days; returns the number of failures."""
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        jd = rng.randint(start_jd, end_jd)
        d, m, y, _ = from_jdn(jd)

        t = amlich.solar_to_lunar(d, m, y)
        back = amlich.lunar_to_solar(t.day, t.month, t.year, t.leap)
        if t.jd != jd or back.jd != jd:
            failures += 1
            print("\nFAIL")
            print("solar:", f"{d}/{m}/{y}", "jd:", jd)
            print("lunar:", t, "jd:", t.jd)
            print("back:", back, "jd:", back.jd)
            if failures >= max_failures:
                return failures

    logger.debug("round trip: %d samples, %d failures", N, failures)
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar.")
    p.add_argument("--N", type=int, default=5000, help="Number of trials.")
    # 18 Jan 1200 is Tết 1200; earlier days belong to lunar 1199 and cannot go back.
    p.add_argument("--start", type=str, default="1200-01-18", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2199-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
