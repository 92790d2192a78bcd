"""IntervalSpec parsing and the interval overlay."""

from __future__ import annotations

import re
from datetime import datetime

from calendar_boundaries.types import FormatError, IntervalSpec

_MALFORMED = "Invalid interval value. Supported format is HH:MM:SS"
_UNPARSABLE = "Unparsable interval value. Supported format is HH:MM:SS"

# Optional sign, ASCII digits only, within a signed 32-bit int
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

# (field label, upper bound), checked left to right
_RANGES = (
    ("hour", 23),
    ("minutes", 59),
    ("seconds", 59),
)


def _split_fields(text: str) -> list[str]:
    """Split on ':' dropping trailing empty fields, so '23:22:22:' has three."""
    chunks = text.split(":")
    while len(chunks) > 1 and chunks[-1] == "":
        chunks.pop()
    return chunks


def _parse_field(text: str, chunk: str) -> int:
    if _INTEGER.fullmatch(chunk) is None:
        raise FormatError(text, _UNPARSABLE)
    value = int(chunk)
    if value < _INT_MIN or value > _INT_MAX:
        raise FormatError(text, _UNPARSABLE)
    return value


def parse_interval(text: str) -> IntervalSpec:
    """Parse ``HH:MM:SS`` into an IntervalSpec.

    Raises FormatError when the field count is not three, a field is not a
    plain integer, or a field is out of range. Each field is parsed then
    range-checked in turn (hour, minute, second); the first failure decides
    the message.
    """
    chunks = _split_fields(text)
    if len(chunks) != 3:
        raise FormatError(text, _MALFORMED)

    fields: list[int] = []
    for chunk, (label, upper) in zip(chunks, _RANGES):
        value = _parse_field(text, chunk)
        if value < 0 or value > upper:
            raise FormatError(
                text,
                f"Invalid {label} value in interval. "
                f"It should be in between 0 and {upper}",
            )
        fields.append(value)

    return IntervalSpec(*fields)


def overlay_interval(
    dt: datetime,
    include_interval: bool,
    interval: IntervalSpec | None,
) -> datetime:
    """Merge the interval's clock fields onto a boundary datetime.

    - include_interval False: dt unchanged.
    - include_interval True with an interval: same date, interval's h/m/s.
    - include_interval True without an interval: dt's own h/m/s.
    """
    if not include_interval:
        return dt
    if interval is None:
        return dt.replace(microsecond=0)
    return dt.replace(
        hour=interval.hour,
        minute=interval.minute,
        second=interval.second,
        microsecond=0,
    )
