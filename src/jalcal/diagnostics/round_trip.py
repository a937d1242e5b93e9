from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import jalcal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """gregorian -> jalali -> gregorian, then jalali -> gregorian -> jalali."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        j = jalcal.jalali_from_date(d0)
        back = jalcal.to_gregorian(j.year, j.month, j.day).to_date()
        if back != d0:
            failures += 1
            print("\nFAIL (g->j->g)")
            print("d0:", d0)
            print("jalali:", j)
            print("back:", back)
            if failures >= max_failures:
                return failures

        jm = random.randint(1, 12)
        jd = random.randint(1, jalcal.month_length(j.year, jm))
        g = jalcal.to_gregorian(j.year, jm, jd)
        j2 = jalcal.to_jalali(g.year, g.month, g.day)
        if (j2.year, j2.month, j2.day) != (j.year, jm, jd):
            failures += 1
            print("\nFAIL (j->g->j)")
            print("jalali:", (j.year, jm, jd))
            print("gregorian:", g)
            print("back:", j2)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian <-> jalali.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="1800-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2200-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    f = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
