"""Date normalizer — canonical YYYY-MM-DD strings and day counts."""

import math
from datetime import date, datetime

from app.exceptions import InvalidDateError

# Tried in order after ISO-8601; month-first for slashed dates
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%a, %d %b %Y",
    "%a %b %d %Y",
    "%Y%m%d",
)

DateInput = str | date | datetime


def parse_datetime(value: DateInput) -> datetime:
    """Parse a date or datetime string (or object) into a datetime.

    Raises InvalidDateError when the value is not a calendar date.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if not text:
        raise InvalidDateError("Empty date string")

    try:
        # fromisoformat does not accept a trailing "Z" before 3.11
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise InvalidDateError(f"Could not parse date: {value!r}")


def parse_date(value: DateInput) -> date:
    return parse_datetime(value).date()


def normalize_date(value: DateInput) -> str:
    """Return the calendar date of `value` as YYYY-MM-DD."""
    return parse_date(value).isoformat()


def days_between(start: DateInput, end: DateInput) -> int:
    """Absolute number of days between two dates, any partial day counting as a full one.

    Symmetric: ordering is not enforced here.
    """
    a = parse_datetime(start)
    b = parse_datetime(end)
    # Mixing aware and naive values: compare wall-clock times
    if (a.tzinfo is None) != (b.tzinfo is None):
        a = a.replace(tzinfo=None)
        b = b.replace(tzinfo=None)
    seconds = abs((b - a).total_seconds())
    return math.ceil(seconds / 86400)
