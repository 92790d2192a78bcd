"""UnitBoundary: first/last day of the period containing a datetime.

All datetimes are naive (local wall time). Every function is pure and
returns a new datetime. Non-DAY results are at midnight; DAY keeps the
input's time-of-day, since the first and last day of a day is the day itself.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from dateutil.relativedelta import MO, SU, relativedelta

from calendar_boundaries.types import Boundary, CalendarUnit, DateRangeError

BoundaryFunction = Callable[[datetime], datetime]


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def quarter_index(dt: datetime) -> int:
    """0-based quarter of the year: Jan-Mar = 0 ... Oct-Dec = 3."""
    return (dt.month - 1) // 3


# ----------------------------------------------------------------------
# DAY
# ----------------------------------------------------------------------

def first_of_day(dt: datetime) -> datetime:
    return dt


def last_of_day(dt: datetime) -> datetime:
    return dt


# ----------------------------------------------------------------------
# WEEK (ISO: Monday through Sunday)
# ----------------------------------------------------------------------

def first_of_week(dt: datetime) -> datetime:
    return _midnight(dt) + relativedelta(weekday=MO(-1))


def last_of_week(dt: datetime) -> datetime:
    return _midnight(dt) + relativedelta(weekday=SU(+1))


# ----------------------------------------------------------------------
# MONTH
# ----------------------------------------------------------------------

def first_of_month(dt: datetime) -> datetime:
    return _midnight(dt).replace(day=1)


def last_of_month(dt: datetime) -> datetime:
    # relativedelta clamps day=31 to the month's length (leap-year aware)
    return _midnight(dt) + relativedelta(day=31)


# ----------------------------------------------------------------------
# QUARTER
# ----------------------------------------------------------------------

def first_of_quarter(dt: datetime) -> datetime:
    return _midnight(dt).replace(month=3 * quarter_index(dt) + 1, day=1)


def last_of_quarter(dt: datetime) -> datetime:
    """Last calendar day of the quarter's third month.

    Stays inside the quarter, so 9999-12-31 is reachable.
    """
    return first_of_quarter(dt) + relativedelta(months=2, day=31)


# ----------------------------------------------------------------------
# YEAR
# ----------------------------------------------------------------------

def first_of_year(dt: datetime) -> datetime:
    return _midnight(dt).replace(month=1, day=1)


def last_of_year(dt: datetime) -> datetime:
    return _midnight(dt).replace(month=12, day=31)


# ----------------------------------------------------------------------
# Dispatch
# ----------------------------------------------------------------------

BOUNDARIES: dict[tuple[CalendarUnit, Boundary], BoundaryFunction] = {
    (CalendarUnit.DAY, Boundary.FIRST): first_of_day,
    (CalendarUnit.DAY, Boundary.LAST): last_of_day,
    (CalendarUnit.WEEK, Boundary.FIRST): first_of_week,
    (CalendarUnit.WEEK, Boundary.LAST): last_of_week,
    (CalendarUnit.MONTH, Boundary.FIRST): first_of_month,
    (CalendarUnit.MONTH, Boundary.LAST): last_of_month,
    (CalendarUnit.QUARTER, Boundary.FIRST): first_of_quarter,
    (CalendarUnit.QUARTER, Boundary.LAST): last_of_quarter,
    (CalendarUnit.YEAR, Boundary.FIRST): first_of_year,
    (CalendarUnit.YEAR, Boundary.LAST): last_of_year,
}

_missing = [
    (unit, boundary)
    for unit in CalendarUnit
    for boundary in Boundary
    if (unit, boundary) not in BOUNDARIES
]
if _missing:
    raise ImportError(f"No boundary function for {_missing}")


def boundary_of(unit: CalendarUnit, boundary: Boundary, dt: datetime) -> datetime:
    """Dispatch to the boundary function for (unit, boundary).

    Raises DateRangeError when the boundary lies outside datetime's range.
    """
    try:
        return BOUNDARIES[(unit, boundary)](dt)
    except (OverflowError, ValueError):
        raise DateRangeError(unit, boundary, dt) from None


def first_of(unit: CalendarUnit, dt: datetime) -> datetime:
    return boundary_of(unit, Boundary.FIRST, dt)


def last_of(unit: CalendarUnit, dt: datetime) -> datetime:
    return boundary_of(unit, Boundary.LAST, dt)
