from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import json
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_VERBOSE_FLAGS = ("-v", "--verbose")


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _parse_today(s: str | None) -> date | None:
    if s is None:
        return None
    return date(*_parse_ymd(s))


def _load_logs(path: str | None):
    from jalcal.habits import parse_logs

    if path is None:
        return ()
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    # Accept either a bare log list or a whole habit record with "logs".
    if isinstance(raw, dict):
        raw = raw.get("logs", [])
    return parse_logs(raw)


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


def cmd_to_jalali(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", help="Gregorian YYYY-MM-DD")
    p.add_argument("--lang", default="en", choices=["en", "fa"])
    args = p.parse_args(argv)

    from jalcal.locale import month_name

    j = jalcal.to_jalali(*_parse_ymd(args.date))
    print(f"{j.isoformat()}  ({j.day} {month_name(j.month, args.lang)} {j.year})")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="Jalali YYYY-MM-DD")
    args = p.parse_args(argv)

    g = jalcal.to_gregorian(*_parse_ymd(args.date))
    print(g.isoformat())
    return 0


def cmd_month_length(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal month-length", description="Days in a Jalali month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    args = p.parse_args(argv)

    print(jalcal.month_length(args.year, args.month))
    return 0


def cmd_grid(argv: list[str]) -> int:
    import jalcal
    from jalcal.locale import month_name, weekday_names

    p = argparse.ArgumentParser(prog="jalcal grid", description="Print a Saturday-first Jalali month grid")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--logs", help="JSON file with habit logs (list, or object with 'logs')")
    p.add_argument("--today", help="Override today's date, Gregorian YYYY-MM-DD")
    p.add_argument("--lang", default="en", choices=["en", "fa"])
    p.add_argument("--json", action="store_true", help="Emit cells as JSON instead of a text grid")
    args = p.parse_args(argv)

    cells = jalcal.month_grid(args.year, args.month, _load_logs(args.logs), today=_parse_today(args.today))

    if args.json:
        print(json.dumps([c.__dict__ for c in cells], ensure_ascii=False, indent=2))
        return 0

    print(f"{month_name(args.month, args.lang)} {args.year}")
    print(" ".join(f"{w:>4}" for w in weekday_names(args.lang)))
    for wk in jalcal.weeks(cells):
        row = []
        for c in wk:
            if c.is_blank:
                row.append("    ")
                continue
            mark = "*" if c.is_completed else " "
            if c.is_today:
                mark = "[" if not c.is_completed else "#"
            row.append(f"{mark}{c.day_number:>3}")
        print(" ".join(row))
    print("\n* done   [ today   # done today")
    return 0


def cmd_streak(argv: list[str]) -> int:
    from jalcal.core.time import local_today
    from jalcal.habits import current_streak

    p = argparse.ArgumentParser(prog="jalcal streak", description="Current streak of a habit log")
    p.add_argument("--logs", required=True, help="JSON file with habit logs")
    p.add_argument("--today", help="Override today's date, Gregorian YYYY-MM-DD")
    args = p.parse_args(argv)

    today = _parse_today(args.today) or local_today()
    print(current_streak(_load_logs(args.logs), today))
    return 0


def cmd_stats(argv: list[str]) -> int:
    from jalcal.core.time import local_today
    from jalcal.habits import completion_rate, current_streak, total_completed

    p = argparse.ArgumentParser(prog="jalcal stats", description="Consistency summary of a habit log")
    p.add_argument("--logs", required=True, help="JSON file with habit logs")
    p.add_argument("--today", help="Override today's date, Gregorian YYYY-MM-DD")
    args = p.parse_args(argv)

    logs = _load_logs(args.logs)
    today = _parse_today(args.today) or local_today()
    print(f"completed: {total_completed(logs)}")
    print(f"rate:      {completion_rate(logs)}%")
    print(f"streak:    {current_streak(logs, today)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `jalcal [-v] YYYY-MM-DD`
    head = [a for a in argv if a not in _VERBOSE_FLAGS]
    if head and _DATE_RE.match(head[0]):
        _setup_logging(len(head) != len(argv))
        try:
            return cmd_to_jalali(head)
        except ValueError as e:
            raise SystemExit(f"jalcal: {e}") from e

    p = argparse.ArgumentParser(prog="jalcal", description="Jalali calendar and habit grid toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("month-length", help="Days in a Jalali month")
    sub.add_parser("grid", help="Print a Jalali month grid with habit completion marks")
    sub.add_parser("streak", help="Current streak from a habit log file")
    sub.add_parser("stats", help="Completed count, completion rate and streak of a habit log")

    # diagnostics
    sub.add_parser("pretty-month", help="Print paired Jalali/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print Nowruz table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["nowruz-equinox"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    _setup_logging(args.verbose)

    try:
        if args.cmd == "to-jalali":
            return cmd_to_jalali(rest)

        if args.cmd == "to-gregorian":
            return cmd_to_gregorian(rest)

        if args.cmd == "month-length":
            return cmd_month_length(rest)

        if args.cmd == "grid":
            return cmd_grid(rest)

        if args.cmd == "streak":
            return cmd_streak(rest)

        if args.cmd == "stats":
            return cmd_stats(rest)
    except (ValueError, OSError) as e:
        # CalendarRangeError, HabitLogError, malformed dates, unreadable log file
        raise SystemExit(f"jalcal: {e}") from e

    if args.cmd == "pretty-month":
        return _run_module_main("jalcal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("jalcal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "jalcal.diagnostics.round_trip",
            "leap-years": "jalcal.diagnostics.leap_years",
            "nowruz-scatter": "jalcal.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "nowruz-equinox": "jalcal.diagnostics.ephem.nowruz_equinox",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
