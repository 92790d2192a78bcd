"""Call-time binding: deferred argument values to CallArguments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from calendar_boundaries.interval import parse_interval
from calendar_boundaries.schema import PARAMETERS, Signature
from calendar_boundaries.types import (
    DEFAULT_DATE_FORMAT,
    ArityError,
    CalendarUnit,
    FormatDefaults,
    IntervalSpec,
    NullArgumentError,
)

logger = logging.getLogger(__name__)


class Deferred(Protocol):
    """A host-supplied argument whose value is read on demand."""

    def get(self) -> object: ...


@dataclass(frozen=True)
class DeferredArgument:
    """Eager value exposed through the deferred ``get()`` interface."""

    value: object

    def get(self) -> object:
        return self.value


@dataclass(frozen=True)
class CallArguments:
    """Bound arguments of one call.

    Positions left out by the caller keep the defaults below (the format
    defaults are replaced by the function's FormatDefaults when binding).
    ``interval`` is only set when the sixth position is supplied.
    """

    unit: CalendarUnit
    date: object
    input_format: str = DEFAULT_DATE_FORMAT
    output_format: str = DEFAULT_DATE_FORMAT
    include_interval: bool = False
    interval: IntervalSpec | None = None


def _read(arguments: Sequence[Deferred], position: int) -> object:
    """Value at a 1-based position; None raises NullArgumentError."""
    value = arguments[position - 1].get()
    if value is None:
        raise NullArgumentError(PARAMETERS[position - 1].name)
    return value


def bind_arguments(
    signature: Signature,
    arguments: Sequence[Deferred],
    defaults: FormatDefaults | None = None,
) -> CallArguments:
    """Read, null-check and convert every supplied position, in order.

    Raises:
        ArityError: argument count differs from the validated signature.
        NullArgumentError: a supplied position holds None.
        UnitValueError: unit text is not a recognised unit.
        FormatError: interval text is malformed or out of range.
    """
    defaults = defaults or FormatDefaults()
    count = len(arguments)
    if count != signature.arity:
        raise ArityError(count)

    unit = CalendarUnit.parse(str(_read(arguments, 1)))
    date_value = _read(arguments, 2)
    input_format = str(_read(arguments, 3)) if count >= 3 else defaults.input_format
    output_format = str(_read(arguments, 4)) if count >= 4 else defaults.output_format
    include_interval = bool(_read(arguments, 5)) if count >= 5 else False
    interval = parse_interval(str(_read(arguments, 6))) if count >= 6 else None

    bound = CallArguments(
        unit=unit,
        date=date_value,
        input_format=input_format,
        output_format=output_format,
        include_interval=include_interval,
        interval=interval,
    )
    logger.debug("Bound %d arguments: %r", count, bound)
    return bound
