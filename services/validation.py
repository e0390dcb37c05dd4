"""Validation and coercion of raw request input.

Request bodies and query strings arrive as loosely typed values (text from
forms and query strings, any JSON scalar from JSON bodies). The functions in
this module turn them into the canonical values stored and compared by the
tracker, or raise a ``TrackerError`` subclass when nothing sensible can be
made of them.

Dates and limits are lenient on purpose: a malformed date becomes "now" and a
malformed limit is ignored, neither ever rejects a request.
"""

import math
import re
from datetime import date as date_type, datetime, timezone
from typing import Any, Mapping, NamedTuple, Optional, Union

from utils.errors import InvalidNumber, MissingField

USERNAME_REQUIRED = "username required"
EXERCISE_FIELDS_REQUIRED = "description and duration required"
DURATION_NOT_NUMBER = "duration must be a number"

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# Tried in order after ISO 8601.
_DATE_FORMATS = (
    "%a %b %d %Y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

# Largest magnitude BSON stores as an integer.
_INT64_LIMIT = 2 ** 63


class NewExercise(NamedTuple):
    """Validated exercise input, ready to be appended to a log."""
    description: str
    duration: Union[int, float]
    date: datetime


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required_text(value: Any, message: str) -> str:
    if value is None or value == "" or isinstance(value, (bool, list, dict)):
        raise MissingField(message)
    return value if isinstance(value, str) else str(value)


def validate_username(value: Any) -> str:
    """Return the username or raise ``MissingField`` if absent or empty."""
    return _required_text(value, USERNAME_REQUIRED)


def validate_description(value: Any) -> str:
    """Return the exercise description or raise ``MissingField``."""
    return _required_text(value, EXERCISE_FIELDS_REQUIRED)


def coerce_duration(value: Any) -> Union[int, float]:
    """Coerce a duration to a finite number of minutes.

    Absent or empty input raises ``MissingField`` before any numeric check.
    Integral results that fit a 64-bit integer come back as ``int`` so they
    serialize as ``30``, not ``30.0``; larger ones stay ``float``.
    """
    if _is_blank(value):
        raise MissingField(EXERCISE_FIELDS_REQUIRED)
    if isinstance(value, bool):
        raise InvalidNumber(DURATION_NOT_NUMBER)

    if isinstance(value, int):
        if abs(value) < _INT64_LIMIT:
            return value
        try:
            number = float(value)
        except OverflowError:
            raise InvalidNumber(DURATION_NOT_NUMBER)
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str) and _NUMBER_RE.match(value.strip()):
        number = float(value.strip())
    else:
        raise InvalidNumber(DURATION_NOT_NUMBER)

    if not math.isfinite(number):
        raise InvalidNumber(DURATION_NOT_NUMBER)
    if number.is_integer() and abs(number) < _INT64_LIMIT:
        return int(number)
    return number


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date-like value into a naive UTC ``datetime``.

    Accepts ``datetime``/``date`` objects, epoch milliseconds, ISO 8601 text
    and a few common textual forms, including the ``"Sun Jan 01 2023"`` form
    this service emits. Date-only values mean midnight UTC. Returns ``None``
    for anything that cannot be read as a calendar instant.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return _to_naive_utc(parsed)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return _to_naive_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def coerce_date(value: Any, now: datetime) -> datetime:
    """Return the parsed date, or ``now`` when absent or unparsable."""
    parsed = parse_date(value)
    return parsed if parsed is not None else _to_naive_utc(now)


def parse_limit(value: Any) -> Optional[int]:
    """Parse a result limit; absent, malformed or negative yields ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        limit = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if not match:
            return None
        limit = int(match.group(1))
    else:
        return None
    return limit if limit >= 0 else None


def validate_exercise(raw: Mapping[str, Any], now: datetime) -> NewExercise:
    """Validate a raw exercise payload in field order: description, duration, date."""
    description = validate_description(raw.get("description"))
    duration = coerce_duration(raw.get("duration"))
    return NewExercise(
        description=description,
        duration=duration,
        date=coerce_date(raw.get("date"), now),
    )
