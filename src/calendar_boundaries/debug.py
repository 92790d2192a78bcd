"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime

from calendar_boundaries.calendar import first_of, last_of
from calendar_boundaries.patterns import MONTH_NAMES
from calendar_boundaries.types import CalendarUnit


def _months_between(first: date, last: date) -> list[tuple[int, int]]:
    months: list[tuple[int, int]] = []
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


def show_period(unit: CalendarUnit, day: date | datetime) -> str:
    """Print ASCII month grids covering the period that contains ``day``.

    Legend: '[dd]' = first/last day of the period, '*dd' = inside the
    period, ' dd' = outside. Weeks run Monday to Sunday.
    Returns the string and also prints to stdout.

    Args:
        unit: CalendarUnit whose period is shown
        day: any date or datetime inside the period
    """
    dt = day if isinstance(day, datetime) else datetime(day.year, day.month, day.day)
    first = first_of(unit, dt).date()
    last = last_of(unit, dt).date()

    lines: list[str] = [f"{unit.name}: {first.isoformat()} .. {last.isoformat()}"]

    for year, month in _months_between(first, last):
        lines.append("")
        lines.append(f"{MONTH_NAMES[month - 1]} {year}".center(28).rstrip())
        lines.append("".join(f"{name:>4s}" for name in ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")))

        for week in calendar.monthcalendar(year, month):
            cells: list[str] = []
            for number in week:
                if number == 0:
                    cells.append("    ")
                    continue
                current = date(year, month, number)
                if current in (first, last):
                    cells.append(f"[{number:2d}]")
                elif first < current < last:
                    cells.append(f" *{number:2d}")
                else:
                    cells.append(f"  {number:2d}")
            lines.append("".join(cells).rstrip())

    result = "\n".join(lines)
    print(result)
    return result
