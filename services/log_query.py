"""Filtered, sorted and truncated views of a user's exercise log."""

from datetime import datetime
from typing import Any, List

from schemas.exercise import Exercise, LogEntry, LogResponse
from schemas.user import User
from services.validation import parse_date, parse_limit

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(value: datetime) -> str:
    """Render a date as ``"Sun Jan 01 2023"`` regardless of locale."""
    return "%s %s %02d %04d" % (
        _WEEKDAYS[value.weekday()],
        _MONTHS[value.month - 1],
        value.day,
        value.year,
    )


def filter_log(
    log: List[Exercise],
    from_: Any = None,
    to: Any = None,
    limit: Any = None,
) -> List[Exercise]:
    """Apply the from/to filters, sort by date and truncate to ``limit``.

    Unparsable ``from``/``to``/``limit`` values are ignored. The input list is
    left untouched; ties on date keep their log order.
    """
    entries = list(log)

    start = parse_date(from_)
    if start is not None:
        entries = [e for e in entries if e.date >= start]

    end = parse_date(to)
    if end is not None:
        entries = [e for e in entries if e.date <= end]

    entries.sort(key=lambda e: e.date)

    max_entries = parse_limit(limit)
    if max_entries is not None:
        entries = entries[:max_entries]

    return entries


def build_log(user: User, from_: Any = None, to: Any = None, limit: Any = None) -> LogResponse:
    """Build the log response for ``user`` with the given query parameters."""
    entries = [
        LogEntry(
            description=e.description,
            duration=e.duration,
            date=format_date(e.date),
        )
        for e in filter_log(user.log, from_, to, limit)
    ]
    return LogResponse(
        username=user.username,
        count=len(entries),
        id=user.id,
        log=entries,
    )
