"""Boundary: DateResolver, turning the date argument into a naive datetime."""

from __future__ import annotations

import logging
from datetime import date, datetime

from calendar_boundaries.patterns import parse_datetime
from calendar_boundaries.types import ArgumentCategory

logger = logging.getLogger(__name__)


def _to_naive(dt: datetime) -> datetime:
    """Drop tzinfo, keeping the wall-clock fields as they are."""
    if dt.tzinfo is not None:
        return dt.replace(tzinfo=None)
    return dt


def resolve_date(
    value: object,
    category: ArgumentCategory,
    input_format: str,
) -> datetime | None:
    """Convert a date argument to a naive datetime.

    Text is parsed with ``input_format``; text that does not match returns
    None rather than raising. Date values become midnight; timestamp values
    pass through as naive wall time. ``input_format`` is only used for text.

    Raises TypeError if the value does not fit its declared category.
    """
    if category.is_text:
        parsed = parse_datetime(str(value), input_format)
        if parsed is None:
            logger.debug("Date %r does not match pattern %r", value, input_format)
        return parsed

    if category is ArgumentCategory.TIMESTAMP:
        if isinstance(value, datetime):
            return _to_naive(value)
        raise TypeError(f"timestamp argument must be a datetime, got {type(value).__name__}")

    if category is ArgumentCategory.DATE:
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        raise TypeError(f"date argument must be a date, got {type(value).__name__}")

    raise TypeError(f"Cannot resolve a date from a {category.value} argument")
