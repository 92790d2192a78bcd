#!/usr/bin/env python
"""Visual verification report for calendar-boundaries.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Unit boundaries (first/last per unit)  -- input/output tables + ASCII month grids
  2. Interval parsing (valid and rejected HH:MM:SS values)
  3. Date patterns (parse, format, illegal patterns)
  4. Function calls (first_day_of / last_day_of end-to-end)
  5. Schema checks (declared argument categories)
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from calendar_boundaries.calendar import first_of, last_of
from calendar_boundaries.debug import show_period
from calendar_boundaries.functions import FIRST_DAY_OF, LAST_DAY_OF
from calendar_boundaries.interval import parse_interval
from calendar_boundaries.patterns import DAY_NAMES, format_datetime, parse_datetime
from calendar_boundaries.schema import check_signature
from calendar_boundaries.types import (
    ArgumentCategory,
    ArgumentError,
    ArgumentTypeError,
    CalendarUnit,
    FormatError,
    IntervalSpec,
    PatternError,
)


def _load(name: str):
    with open(SCENARIOS / f"{name}.json") as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_dt(iso: str) -> str:
    """Format ISO datetime as 'Sat 2011-01-22 10:11'."""
    dt = datetime.fromisoformat(iso)
    return f"{DAY_NAMES[dt.weekday()][:3]} {dt.strftime('%Y-%m-%d %H:%M')}"


def _mark(ok: bool) -> str:
    return "OK" if ok else "FAIL"


# ---------------------------------------------------------------------------
# Section 1: Unit boundaries
# ---------------------------------------------------------------------------
def section_boundaries():
    banner("UNIT BOUNDARIES")

    data = _load("boundaries")

    heading("Function: first_of(unit, dt) / last_of(unit, dt) -> datetime")
    print("    Weeks run Monday to Sunday. Units above DAY land on midnight.\n")
    rows = []
    for s in data["cases"]:
        unit = CalendarUnit[s["unit"]]
        dt = datetime.fromisoformat(s["datetime"])
        first = first_of(unit, dt)
        last = last_of(unit, dt)
        ok = (first == datetime.fromisoformat(s["first"])
              and last == datetime.fromisoformat(s["last"]))
        rows.append([
            s["id"], s["unit"], _fmt_dt(s["datetime"]),
            _fmt_dt(first.isoformat()), _fmt_dt(last.isoformat()),
            _mark(ok), s.get("notes", ""),
        ])
    table(["ID", "Unit", "Input", "First", "Last", "", "Notes"], rows)

    heading("Period views for Sat 2011-01-22 ([dd] = boundary, *dd = inside)")
    reference = datetime(2011, 1, 22)
    for unit in (CalendarUnit.WEEK, CalendarUnit.MONTH, CalendarUnit.QUARTER):
        print()
        show_period(unit, reference)


# ---------------------------------------------------------------------------
# Section 2: Interval parsing
# ---------------------------------------------------------------------------
def section_intervals():
    banner("INTERVAL PARSING")

    data = _load("intervals")

    heading("Function: parse_interval(text) -> IntervalSpec")
    rows = []
    for s in data["valid"]:
        result = parse_interval(s["text"])
        ok = result == IntervalSpec(*s["expected"])
        rows.append([s["id"], repr(s["text"]), str(result), _mark(ok)])
    table(["ID", "Text", "Parsed", ""], rows)

    heading("parse_interval() rejections  -- FormatError expected")
    rows = []
    for s in data["invalid"]:
        try:
            parse_interval(s["text"])
            err = "NO ERROR"
            ok = False
        except FormatError as e:
            err = str(e)
            ok = err == s["message"]
        rows.append([s["id"], repr(s["text"]), err, _mark(ok)])
    table(["ID", "Text", "Error", ""], rows)


# ---------------------------------------------------------------------------
# Section 3: Date patterns
# ---------------------------------------------------------------------------
def section_patterns():
    banner("DATE PATTERNS")

    data = _load("patterns")

    heading("Function: parse_datetime(text, pattern) -> datetime | None")
    print("    Leading-prefix match; out-of-range fields roll over.\n")
    rows = []
    for s in data["parse"]:
        result = parse_datetime(s["text"], s["pattern"])
        expected = datetime.fromisoformat(s["expected"]) if s["expected"] else None
        rows.append([
            s["id"], repr(s["text"]), s["pattern"],
            result.isoformat() if result else "None", _mark(result == expected),
        ])
    table(["ID", "Text", "Pattern", "Parsed", ""], rows)

    heading("Function: format_datetime(dt, pattern) -> str")
    rows = []
    for s in data["format"]:
        result = format_datetime(datetime.fromisoformat(s["datetime"]), s["pattern"])
        rows.append([
            s["id"], s["pattern"], repr(result), _mark(result == s["expected"]),
        ])
    table(["ID", "Pattern", "Rendered", ""], rows)

    heading("Illegal patterns  -- PatternError expected")
    rows = []
    for s in data["errors"]:
        try:
            format_datetime(datetime(2011, 1, 22), s["pattern"])
            err = "NO ERROR"
            ok = False
        except PatternError as e:
            err = e.reason
            ok = True
        rows.append([s["id"], repr(s["pattern"]), err, _mark(ok)])
    table(["ID", "Pattern", "Reason", ""], rows)


# ---------------------------------------------------------------------------
# Section 4: Function calls
# ---------------------------------------------------------------------------
def section_functions():
    banner("FUNCTIONS: first_day_of / last_day_of")

    data = _load("functions")
    functions = {"first": FIRST_DAY_OF, "last": LAST_DAY_OF}

    heading("Call: fn(unit, date, [input_format], [output_format], [include_interval], [interval])")
    rows = []
    for s in data["calls"]:
        fn = functions[s["boundary"]]
        try:
            result = fn(*s["args"])
            shown = repr(result)
            ok = result == s["expected"]
        except ArgumentError as e:
            shown = f"{type(e).__name__}: {e}"
            ok = False
        rows.append([
            s["id"], fn.name, ", ".join(repr(a) for a in s["args"][:2]),
            shown, _mark(ok),
        ])
    table(["ID", "Function", "Unit, Date", "Result", ""], rows)


# ---------------------------------------------------------------------------
# Section 5: Schema checks
# ---------------------------------------------------------------------------
def section_signatures():
    banner("SCHEMA CHECKS")

    data = _load("signatures")

    heading("Function: check_signature(categories) -> Signature")
    rows = []
    for s in data["valid"]:
        signature = check_signature([ArgumentCategory(c) for c in s["categories"]])
        rows.append([
            s["id"], ", ".join(s["categories"]),
            signature.date_category.value, _mark(signature.arity == len(s["categories"])),
        ])
    table(["ID", "Categories", "Date As", ""], rows)

    heading("check_signature() rejections  -- ArgumentTypeError expected")
    rows = []
    for s in data["invalid"]:
        try:
            check_signature([ArgumentCategory(c) for c in s["categories"]])
            err = "NO ERROR"
            ok = False
        except ArgumentTypeError as e:
            err = str(e)
            ok = e.position == s["position"] and err == s["message"]
        rows.append([s["id"], str(s["position"]), err, _mark(ok)])
    table(["ID", "Pos", "Error", ""], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("CALENDAR-BOUNDARIES   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {SCENARIOS.relative_to(ROOT)}/")

    section_boundaries()
    section_intervals()
    section_patterns()
    section_functions()
    section_signatures()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
