"""Boundary functions: first_day_of and last_day_of.

Both share one pipeline and differ only in the Boundary they compute:

    bind arguments -> resolve date -> unit boundary -> interval overlay -> render
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Sequence

from calendar_boundaries.arguments import Deferred, DeferredArgument, bind_arguments
from calendar_boundaries.calendar import boundary_of
from calendar_boundaries.interval import overlay_interval
from calendar_boundaries.patterns import render
from calendar_boundaries.resolution import resolve_date
from calendar_boundaries.schema import Signature, check_signature, infer_signature
from calendar_boundaries.types import (
    FUNCTION_USAGE,
    ArgumentCategory,
    Boundary,
    FormatDefaults,
)

logger = logging.getLogger(__name__)

_MISSING = object()

_EXAMPLES = {
    Boundary.FIRST: (
        "  > SELECT first_day_of('QUARTER', '22-01-2011', 'dd-MM-yyyy', 'yyyy-MM-dd', true, '23:45:45');\n"
        "  '2011-01-01 23:45:45'\n"
        "  > SELECT first_day_of('YEAR', '02-08-2011', 'dd-MM-yyyy');\n"
        "  '2011-01-01'"
    ),
    Boundary.LAST: (
        "  > SELECT last_day_of('QUARTER', '22-01-2011', 'dd-MM-yyyy', 'yyyy-MM-dd', true, '23:45:45');\n"
        "  '2011-03-31 23:45:45'\n"
        "  > SELECT last_day_of('YEAR', '02-08-2011', 'dd-MM-yyyy');\n"
        "  '2011-12-31'"
    ),
}


class DayOfUnitFunction:
    """Scalar function returning the first or last day of a calendar unit.

    Host-style use: ``initialize`` once with the declared categories, then
    ``evaluate`` per row with deferred values. Plain Python use: call the
    instance with values; categories are inferred per call.

    The instance keeps only its Boundary, FormatDefaults and the signature
    set by ``initialize``; every call works on local values.
    """

    usage = FUNCTION_USAGE

    def __init__(
        self,
        boundary: Boundary,
        defaults: FormatDefaults | None = None,
    ) -> None:
        self.boundary = boundary
        self.defaults = defaults or FormatDefaults()
        self._signature: Signature | None = None

    def __repr__(self) -> str:
        return f"DayOfUnitFunction({self.boundary.name}, {self.defaults!r})"

    @property
    def name(self) -> str:
        return f"{self.boundary.value}_day_of"

    @property
    def display_string(self) -> str:
        return (
            f"Gets {self.boundary.value} day of day/week/month/quarter/year "
            "for a provided date with optional interval timestamp value can be added."
        )

    @property
    def extended(self) -> str:
        return (
            "unit accepts value DAY, WEEK, MONTH, QUARTER, YEAR.\n"
            f"date is a string in input_format (default '{self.defaults.input_format}'), "
            "a date or a timestamp.\n"
            f"output_format defaults to '{self.defaults.output_format}'.\n"
            "include_interval controls whether the output carries a time of day.\n"
            "interval is a string 'HH:mm:ss' placed on the returned date.\n"
            "Example:\n" + _EXAMPLES[self.boundary]
        )

    # ------------------------------------------------------------------
    # Host interface
    # ------------------------------------------------------------------

    def initialize(self, categories: Sequence[ArgumentCategory]) -> ArgumentCategory:
        """Validate declared categories; returns the result category."""
        self._signature = check_signature(categories)
        return ArgumentCategory.STRING

    def evaluate(self, arguments: Sequence[Deferred]) -> str | None:
        """Evaluate one call with deferred values.

        Returns None when a text date does not match the input format.
        """
        if self._signature is None:
            raise RuntimeError(f"{self.name}: initialize() must be called before evaluate()")
        return self._run(self._signature, arguments)

    # ------------------------------------------------------------------
    # Python interface
    # ------------------------------------------------------------------

    def __call__(self, *values: object) -> str | None:
        signature = infer_signature(values)
        return self._run(signature, [DeferredArgument(value) for value in values])

    def _run(self, signature: Signature, arguments: Sequence[Deferred]) -> str | None:
        bound = bind_arguments(signature, arguments, self.defaults)

        dt = resolve_date(bound.date, signature.date_category, bound.input_format)
        if dt is None:
            return None

        result = boundary_of(bound.unit, self.boundary, dt)
        result = overlay_interval(result, bound.include_interval, bound.interval)
        text = render(
            result,
            bound.output_format,
            bound.include_interval,
            self.defaults.interval_format,
        )
        logger.debug("%s(%s, %s) -> %s", self.name, bound.unit.name, dt.isoformat(), text)
        return text


FIRST_DAY_OF = DayOfUnitFunction(Boundary.FIRST)
LAST_DAY_OF = DayOfUnitFunction(Boundary.LAST)


def _positional(
    unit: object,
    date: object,
    input_format: object,
    output_format: object,
    include_interval: object,
    interval: object,
    defaults: FormatDefaults,
) -> list[object]:
    """Positional values up to the last supplied keyword.

    Skipped positions before a supplied one take their defaults.
    """
    fallbacks = [defaults.input_format, defaults.output_format, False, _MISSING]
    optional = [input_format, output_format, include_interval, interval]
    while optional and optional[-1] is _MISSING:
        optional.pop()
    filled = [
        fallback if value is _MISSING else value
        for value, fallback in zip(optional, fallbacks)
    ]
    return [unit, date, *filled]


def first_day_of(
    unit: str,
    date: str | date_type,
    input_format: str = _MISSING,  # type: ignore[assignment]
    output_format: str = _MISSING,  # type: ignore[assignment]
    include_interval: bool = _MISSING,  # type: ignore[assignment]
    interval: str = _MISSING,  # type: ignore[assignment]
) -> str | None:
    """First day of the unit containing ``date``, rendered as text.

    >>> first_day_of("QUARTER", "22-01-2011", "dd-MM-yyyy")
    '2011-01-01'
    """
    return FIRST_DAY_OF(*_positional(
        unit, date, input_format, output_format, include_interval, interval,
        FIRST_DAY_OF.defaults,
    ))


def last_day_of(
    unit: str,
    date: str | date_type,
    input_format: str = _MISSING,  # type: ignore[assignment]
    output_format: str = _MISSING,  # type: ignore[assignment]
    include_interval: bool = _MISSING,  # type: ignore[assignment]
    interval: str = _MISSING,  # type: ignore[assignment]
) -> str | None:
    """Last day of the unit containing ``date``, rendered as text.

    >>> last_day_of("MONTH", "2011-01-22")
    '2011-01-31'
    """
    return LAST_DAY_OF(*_positional(
        unit, date, input_format, output_format, include_interval, interval,
        LAST_DAY_OF.defaults,
    ))
