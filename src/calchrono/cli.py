from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import List, Tuple

from .core.errors import CalendricalError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")
_FIELD_RE = re.compile(r"^([A-Za-z]+)=(-?\d+)$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    m = _DATE_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _parse_field(s: str):
    from .rules.base import DateTimeField
    from .rules.registry import rule_for_name

    m = _FIELD_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected Rule=VALUE, got {s!r}")
    try:
        rule = rule_for_name(m.group(1))
    except KeyError as e:
        raise argparse.ArgumentTypeError(str(e.args[0])) from e
    return DateTimeField(rule, int(m.group(2)))


def cmd_list(argv: List[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono list", description="List registered chronologies")
    p.parse_args(argv)
    for name in calchrono.list_chronologies():
        print(name)
    return 0


def cmd_info(argv: List[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono info", description="Describe one chronology")
    p.add_argument("name")
    args = p.parse_args(argv)

    info = calchrono.chronology_info(args.name)
    print(f"{info['name']}")
    print(f"  months per year : {info['months_per_year']}")
    print(f"  years           : {info['min_year']} to {info['max_year']}")
    print("  eras            : " + ", ".join(f"{e['name']}={e['value']}" for e in info["eras"]))
    return 0


def cmd_convert(argv: List[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono convert", description="Show one day in several calendar systems")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD (proleptic year)")
    p.add_argument("--from", dest="source", default=calchrono.DEFAULT_CHRONOLOGY)
    p.add_argument("--to", action="append", default=[], help="target chronology (repeatable, default all)")
    p.add_argument("--fields", action="store_true", help="also print the field set of each date")
    args = p.parse_args(argv)

    d = calchrono.date_of(*args.date, chronology=args.source)
    targets = args.to or calchrono.list_chronologies()
    print(f"epoch day {d.to_epoch_day()}")
    for name in targets:
        out = calchrono.convert(d, name)
        print(out)
        if args.fields:
            print(f"  {calchrono.fields_of(out)}")
    return 0


def cmd_add(argv: List[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono add", description="Date arithmetic with end-of-month clamping")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD (proleptic year)")
    p.add_argument("--chronology", default=calchrono.DEFAULT_CHRONOLOGY)
    p.add_argument("--years", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--weeks", type=int, default=0)
    p.add_argument("--days", type=int, default=0)
    args = p.parse_args(argv)

    d = calchrono.date_of(*args.date, chronology=args.chronology)
    out = d.plus_years(args.years).plus_months(args.months).plus_weeks(args.weeks).plus_days(args.days)
    print(out)
    return 0


def cmd_fields(argv: List[str]) -> int:
    import calchrono

    p = argparse.ArgumentParser(prog="calchrono fields", description="Print a canonical field set")
    p.add_argument("fields", nargs="*", type=_parse_field, help="Rule=VALUE, e.g. MonthOfYear=12")
    p.add_argument("--match", type=_parse_ymd, help="also test the set against this date")
    p.add_argument("--chronology", default=calchrono.DEFAULT_CHRONOLOGY)
    args = p.parse_args(argv)

    fields = calchrono.FieldValueSet.of_many(args.fields)
    print(fields)
    if args.match is not None:
        d = calchrono.date_of(*args.match, chronology=args.chronology)
        print(f"{d}: {'match' if fields.matches(d) else 'no match'}")
    return 0


_COMMANDS = {
    "list": cmd_list,
    "info": cmd_info,
    "convert": cmd_convert,
    "add": cmd_add,
    "fields": cmd_fields,
}


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calchrono YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["convert"] + argv

    p = argparse.ArgumentParser(prog="calchrono", description="Chronology-neutral calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("list", help="List registered chronologies")
    sub.add_parser("info", help="Describe one chronology")
    sub.add_parser("convert", help="Show one day in several calendar systems")
    sub.add_parser("add", help="Add years, months, weeks or days to a date")
    sub.add_parser("fields", help="Print a canonical field set")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.cmd](rest)
    except CalendricalError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"calchrono: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
