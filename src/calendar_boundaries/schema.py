"""Schema-time validation of declared argument categories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from calendar_boundaries.types import ArgumentCategory, ArgumentTypeError, ArityError

_TEXT = frozenset(category for category in ArgumentCategory if category.is_text)

ORDINALS = ("first", "second", "third", "fourth", "fifth", "sixth")


@dataclass(frozen=True)
class Parameter:
    """One positional parameter of the boundary functions."""

    name: str
    expected: str
    accepts: frozenset[ArgumentCategory]
    default_category: ArgumentCategory


PARAMETERS = (
    Parameter("unit", "String", _TEXT, ArgumentCategory.STRING),
    Parameter(
        "date",
        "STRING/TIMESTAMP/DATEWRITABLE",
        _TEXT | {ArgumentCategory.DATE, ArgumentCategory.TIMESTAMP},
        ArgumentCategory.STRING,
    ),
    Parameter("input_format", "String", _TEXT, ArgumentCategory.STRING),
    Parameter("output_format", "String", _TEXT, ArgumentCategory.STRING),
    Parameter(
        "include_interval",
        "boolean",
        frozenset({ArgumentCategory.BOOLEAN}),
        ArgumentCategory.BOOLEAN,
    ),
    Parameter("interval", "String", _TEXT, ArgumentCategory.STRING),
)

MIN_ARGUMENTS = 2
MAX_ARGUMENTS = len(PARAMETERS)


@dataclass(frozen=True)
class Signature:
    """Validated argument categories of one call shape. Immutable."""

    categories: tuple[ArgumentCategory, ...]

    @property
    def arity(self) -> int:
        return len(self.categories)

    @property
    def date_category(self) -> ArgumentCategory:
        return self.categories[1]


def check_arity(count: int) -> None:
    """Raise ArityError unless 2 <= count <= 6."""
    if count < MIN_ARGUMENTS or count > MAX_ARGUMENTS:
        raise ArityError(count)


def check_signature(categories: Sequence[ArgumentCategory]) -> Signature:
    """Validate declared categories position by position.

    Checks arity first, then each position in increasing order; the first
    position whose category is not accepted raises ArgumentTypeError.
    """
    check_arity(len(categories))

    for position, (parameter, category) in enumerate(zip(PARAMETERS, categories), 1):
        if category not in parameter.accepts:
            raise ArgumentTypeError(
                position=position,
                parameter=parameter.name,
                expected=parameter.expected,
                received=category,
                ordinal=ORDINALS[position - 1],
            )

    return Signature(tuple(categories))


def infer_category(value: object, default: ArgumentCategory) -> ArgumentCategory:
    """Category of a plain Python value; ``default`` for None.

    Raises TypeError for values with no host counterpart.
    """
    if value is None:
        return default
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ArgumentCategory.BOOLEAN
    if isinstance(value, int):
        return ArgumentCategory.BIGINT
    if isinstance(value, float):
        return ArgumentCategory.DOUBLE
    if isinstance(value, Decimal):
        return ArgumentCategory.DECIMAL
    if isinstance(value, str):
        return ArgumentCategory.STRING
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime):
        return ArgumentCategory.TIMESTAMP
    if isinstance(value, date):
        return ArgumentCategory.DATE
    if isinstance(value, (bytes, bytearray)):
        return ArgumentCategory.BINARY
    raise TypeError(f"No argument category for {type(value).__name__} values")


def infer_signature(values: Sequence[object]) -> Signature:
    """Infer and validate the signature of a plain Python call."""
    check_arity(len(values))
    categories = [
        infer_category(value, parameter.default_category)
        for parameter, value in zip(PARAMETERS, values)
    ]
    return check_signature(categories)
