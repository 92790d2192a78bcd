"""Date pattern engine: SimpleDateFormat-style patterns to and from datetime.

Supported letters:

    y  year (``yy`` = two-digit year, pivoted 80 years back / 20 forward)
    M  month (1-2 letters numeric, 3 short English name, 4+ full name)
    d  day of month
    D  day of year (render only)
    H  hour 0-23      k  hour 1-24
    K  hour 0-11      h  hour 1-12
    m  minute         s  second
    S  fraction of second (milliseconds when parsing)
    a  AM/PM marker
    E  day name (3 letters short, 4+ full; ignored when parsing)

Text between single quotes is literal, ``''`` is a single quote. Any other
ASCII letter is rejected with PatternError. All names are English.

Parsing is lenient: out-of-range numeric fields carry into the next larger
field, so ``2011-02-30`` parses as 2011-03-02.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import Callable

from dateutil.relativedelta import relativedelta

from calendar_boundaries.types import DEFAULT_INTERVAL_FORMAT, PatternError

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

_MONTH_LOOKUP = {name[:3].lower(): index for index, name in enumerate(MONTH_NAMES, 1)}

_FIELD_LETTERS = frozenset("yMdDHkKhmsSaE")
_NUMERIC_LETTERS = frozenset("ydDHkKhmsS")

# Literal substrings whose presence marks a pattern as already carrying time.
_TIME_TOKENS = ("HH", "mm", "ss")

_NUMERIC_FIELDS: dict[str, Callable[[datetime], int]] = {
    "d": lambda v: v.day,
    "D": lambda v: v.timetuple().tm_yday,
    "H": lambda v: v.hour,
    "k": lambda v: v.hour or 24,
    "K": lambda v: v.hour % 12,
    "h": lambda v: v.hour % 12 or 12,
    "m": lambda v: v.minute,
    "s": lambda v: v.second,
}


@dataclass(frozen=True)
class Token:
    """One run of a pattern letter, or a literal (letter is None)."""

    letter: str | None
    count: int = 0
    text: str = ""

    @property
    def is_numeric(self) -> bool:
        if self.letter is None:
            return False
        if self.letter == "M":
            return self.count <= 2
        return self.letter in _NUMERIC_LETTERS


@lru_cache(maxsize=128)
def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split a pattern into field and literal tokens.

    Adjacent literal characters (quoted or not) are merged into one token.
    Raises PatternError for unknown letters and unterminated quotes.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        ch = pattern[i]

        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                if end >= n:
                    raise PatternError(pattern, "unterminated quote")
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            i = end + 1
            continue

        if ch.isascii() and ch.isalpha():
            if ch not in _FIELD_LETTERS:
                raise PatternError(pattern, f"unsupported letter {ch!r}")
            if literal:
                tokens.append(Token(None, text="".join(literal)))
                literal = []
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            tokens.append(Token(ch, j - i))
            i = j
            continue

        literal.append(ch)
        i += 1

    if literal:
        tokens.append(Token(None, text="".join(literal)))
    return tuple(tokens)


def has_time_pattern(pattern: str) -> bool:
    """True if the pattern text contains an ``HH``, ``mm`` or ``ss`` run."""
    return any(token in pattern for token in _TIME_TOKENS)


# ----------------------------------------------------------------------
# Rendering
# ----------------------------------------------------------------------

def _render_token(token: Token, value: datetime) -> str:
    letter, count = token.letter, token.count
    if letter is None:
        return token.text
    if letter == "y":
        if count == 2:
            return f"{value.year % 100:02d}"
        return str(value.year).zfill(count)
    if letter == "M":
        if count >= 4:
            return MONTH_NAMES[value.month - 1]
        if count == 3:
            return MONTH_NAMES[value.month - 1][:3]
        return str(value.month).zfill(count)
    if letter == "E":
        name = DAY_NAMES[value.weekday()]
        return name if count >= 4 else name[:3]
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "S":
        # Fraction of second truncated to ``count`` digits
        return f"{value.microsecond:06d}"[:count].ljust(count, "0")
    return str(_NUMERIC_FIELDS[letter](value)).zfill(count)


def format_datetime(value: datetime, pattern: str) -> str:
    """Render a datetime with a SimpleDateFormat-style pattern."""
    return "".join(_render_token(token, value) for token in tokenize(pattern))


def render(
    value: datetime,
    output_format: str,
    include_interval: bool,
    interval_format: str = DEFAULT_INTERVAL_FORMAT,
) -> str:
    """Render the final boundary value.

    When an interval is requested and the pattern has no time token, the
    interval pattern is appended after a single space. A pattern with a
    partial time token (e.g. only ``HH``) is left as is.
    """
    pattern = output_format
    if include_interval and not has_time_pattern(pattern):
        pattern = f"{pattern} {interval_format}"
        logger.debug("Output pattern %r augmented to %r", output_format, pattern)
    return format_datetime(value, pattern)


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------

def _field_regex(token: Token, following: Token | None) -> str:
    letter, count = token.letter, token.count
    if token.is_numeric:
        # Width is only fixed when another number follows without a separator
        if following is not None and following.is_numeric:
            return f"[0-9]{{{count}}}"
        return "[0-9]+"
    if letter == "M":
        return "|".join(MONTH_NAMES + tuple(name[:3] for name in MONTH_NAMES))
    if letter == "E":
        return "|".join(DAY_NAMES + tuple(name[:3] for name in DAY_NAMES))
    return "AM|PM"


@lru_cache(maxsize=128)
def _compile(pattern: str) -> tuple[re.Pattern[str], tuple[Token, ...]]:
    tokens = tokenize(pattern)
    parts: list[str] = []
    for index, token in enumerate(tokens):
        if token.letter is None:
            parts.append(re.escape(token.text))
            continue
        if token.letter == "D":
            raise PatternError(pattern, "day of year cannot be parsed")
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        parts.append(f"({_field_regex(token, following)})")
    fields = tuple(token for token in tokens if token.letter is not None)
    return re.compile("".join(parts), re.IGNORECASE), fields


def expand_two_digit_year(yy: int, today: date | None = None) -> int:
    """Place a two-digit year within 80 years before / 20 years after today."""
    today = today or date.today()
    start = today.year - 80
    year = start - start % 100 + yy
    if year < start:
        year += 100
    return year


def _field_values(fields: tuple[Token, ...], groups: tuple[str, ...]) -> dict[str, int]:
    """Raw field values, not yet range-checked."""
    values = {
        "year": 1970, "month": 1, "day": 1,
        "hour": 0, "minute": 0, "second": 0, "millisecond": 0,
    }
    hour_of_half_day: int | None = None
    is_pm = False

    for token, raw in zip(fields, groups):
        letter = token.letter
        if letter == "y":
            year = int(raw)
            if token.count == 2 and len(raw) == 2:
                year = expand_two_digit_year(year)
            values["year"] = year
        elif letter == "M":
            values["month"] = int(raw) if token.is_numeric else _MONTH_LOOKUP[raw[:3].lower()]
        elif letter == "d":
            values["day"] = int(raw)
        elif letter == "H":
            values["hour"] = int(raw)
        elif letter == "k":
            hour = int(raw)
            values["hour"] = 0 if hour == 24 else hour
        elif letter == "h":
            hour = int(raw)
            hour_of_half_day = 0 if hour == 12 else hour
        elif letter == "K":
            hour_of_half_day = int(raw)
        elif letter == "m":
            values["minute"] = int(raw)
        elif letter == "s":
            values["second"] = int(raw)
        elif letter == "S":
            values["millisecond"] = int(raw)
        elif letter == "a":
            is_pm = raw.upper() == "PM"

    if hour_of_half_day is not None:
        values["hour"] = hour_of_half_day + (12 if is_pm else 0)
    return values


def parse_datetime(text: str, pattern: str) -> datetime | None:
    """Parse the leading part of ``text`` with ``pattern``.

    Parsing is lenient: out-of-range fields roll over into the next larger
    field, so ``2011-02-30`` is 2011-03-02 and ``2011-13-05`` is 2012-01-05.
    Returns None when the text does not match, or when the rolled-over value
    falls outside datetime's range (years 1 to 9999). Text after the matched
    prefix is ignored. Fields the pattern does not mention default to
    1970-01-01 00:00:00.
    """
    regex, fields = _compile(pattern)
    match = regex.match(text)
    if match is None:
        return None

    try:
        values = _field_values(fields, match.groups())
        return datetime(values["year"], 1, 1) + relativedelta(
            months=values["month"] - 1,
            days=values["day"] - 1,
            hours=values["hour"],
            minutes=values["minute"],
            seconds=values["second"],
            microseconds=values["millisecond"] * 1000,
        )
    except (ValueError, OverflowError):
        # Digit runs too long for int(), or a year outside 1..9999
        return None
