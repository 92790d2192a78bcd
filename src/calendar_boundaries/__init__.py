"""calendar-boundaries: first and last day of a day/week/month/quarter/year."""

from calendar_boundaries.arguments import CallArguments, DeferredArgument
from calendar_boundaries.calendar import boundary_of, first_of, last_of
from calendar_boundaries.functions import (
    FIRST_DAY_OF,
    LAST_DAY_OF,
    DayOfUnitFunction,
    first_day_of,
    last_day_of,
)
from calendar_boundaries.interval import overlay_interval, parse_interval
from calendar_boundaries.patterns import format_datetime, parse_datetime
from calendar_boundaries.types import (
    ArgumentCategory,
    ArgumentError,
    ArgumentTypeError,
    ArityError,
    Boundary,
    CalendarUnit,
    DateRangeError,
    FormatDefaults,
    FormatError,
    IntervalSpec,
    NullArgumentError,
    PatternError,
    UnitValueError,
)

__all__ = [
    "ArgumentCategory",
    "ArgumentError",
    "ArgumentTypeError",
    "ArityError",
    "Boundary",
    "CalendarUnit",
    "CallArguments",
    "DateRangeError",
    "DayOfUnitFunction",
    "DeferredArgument",
    "FIRST_DAY_OF",
    "FormatDefaults",
    "FormatError",
    "IntervalSpec",
    "LAST_DAY_OF",
    "NullArgumentError",
    "PatternError",
    "UnitValueError",
    "boundary_of",
    "first_day_of",
    "first_of",
    "format_datetime",
    "last_day_of",
    "last_of",
    "overlay_interval",
    "parse_datetime",
    "parse_interval",
]
