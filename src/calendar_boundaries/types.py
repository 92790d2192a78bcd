"""Shared types: calendar enums, IntervalSpec, FormatDefaults and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_DATE_FORMAT = "yyyy-MM-dd"
DEFAULT_INTERVAL_FORMAT = "HH:mm:ss"

FUNCTION_USAGE = (
    "Invalid function usage: Correct Usage => FunctionName(<String> unit, "
    "<String/Timestamp/Date> date, <String> input_format[optional], "
    "<String> output_format[optional], <boolean> include_interval [optional], "
    "<String> interval[optional])"
)


class CalendarUnit(Enum):
    """Granularity of the period whose boundary is computed."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    QUARTER = "QUARTER"
    YEAR = "YEAR"

    @classmethod
    def parse(cls, text: str) -> CalendarUnit:
        """Case-insensitive, whitespace-trimmed lookup.

        Raises UnitValueError for anything outside the five keywords.
        """
        try:
            return cls[text.strip().upper()]
        except (KeyError, AttributeError):
            raise UnitValueError(text) from None


class Boundary(Enum):
    """Which edge of the period is requested."""

    FIRST = "first"
    LAST = "last"


class ArgumentCategory(Enum):
    """Host type categories an argument can be declared with.

    Values are the lower-case type names the host reports.
    """

    STRING = "string"
    VARCHAR = "varchar"
    CHAR = "char"
    DATE = "date"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    INT = "int"
    BIGINT = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BINARY = "binary"
    VOID = "void"

    @property
    def is_text(self) -> bool:
        return self in _TEXT_CATEGORIES


_TEXT_CATEGORIES = frozenset(
    {ArgumentCategory.STRING, ArgumentCategory.VARCHAR, ArgumentCategory.CHAR}
)


@dataclass(frozen=True)
class IntervalSpec:
    """Time-of-day overlay parsed from ``HH:MM:SS``.

    Invariants:
        - 0 <= hour <= 23
        - 0 <= minute <= 59
        - 0 <= second <= 59
    """

    hour: int
    minute: int
    second: int

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class FormatDefaults:
    """Patterns used when the caller leaves a format position out."""

    input_format: str = DEFAULT_DATE_FORMAT
    output_format: str = DEFAULT_DATE_FORMAT
    interval_format: str = DEFAULT_INTERVAL_FORMAT


class ArgumentError(Exception):
    """Base class for every error raised while binding or evaluating a call."""


class ArityError(ArgumentError):
    """Raised when the argument count is outside 2..6."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(FUNCTION_USAGE)


class ArgumentTypeError(ArgumentError, TypeError):
    """Raised at schema time when a position is declared with the wrong category."""

    def __init__(
        self,
        position: int,
        parameter: str,
        expected: str,
        received: ArgumentCategory,
        ordinal: str,
    ) -> None:
        self.position = position
        self.parameter = parameter
        self.expected = expected
        self.received = received
        verb = "are" if "/" in expected else "is"
        super().__init__(
            f"Only {expected} {verb} accepted for {parameter} parameter "
            f"but {received.value} is passed as {ordinal} argument"
        )


class NullArgumentError(ArgumentError, ValueError):
    """Raised at call time when a bound position holds no value."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter} cannot be null")


class UnitValueError(ArgumentError, ValueError):
    """Raised when the unit text is not one of the recognised keywords."""

    def __init__(self, value: object) -> None:
        self.value = value
        names = ", ".join(unit.name for unit in CalendarUnit)
        super().__init__(f"unit can only be one of {names}")


class FormatError(ArgumentError, ValueError):
    """Raised when the interval text is malformed or out of range."""

    def __init__(self, value: str, message: str) -> None:
        self.value = value
        super().__init__(message)


class DateRangeError(ArgumentError, ValueError):
    """Raised when a boundary falls outside the representable date range.

    Only reachable at the very ends of the calendar, e.g. the Sunday after
    Friday 9999-12-31.
    """

    def __init__(self, unit: CalendarUnit, boundary: Boundary, value: object) -> None:
        self.unit = unit
        self.boundary = boundary
        self.value = value
        super().__init__(
            f"{boundary.value} day of {unit.name} for {value} is outside the supported date range"
        )


class PatternError(ArgumentError, ValueError):
    """Raised when a date pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Illegal date pattern {pattern!r}: {reason}")
