from __future__ import annotations

import re
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
INVALID_DATE_MESSAGE = "Invalid date format"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value) -> date | None:
    """
    Parses a wire date in the exact form YYYY-MM-DD.

    None / "" means no value was supplied and returns None; required-field
    checks are left to the caller. Any other shape raises ValueError.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        raise ValueError(INVALID_DATE_MESSAGE)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(INVALID_DATE_MESSAGE)
    if value == "":
        return None
    if not _DATE_RE.match(value):
        raise ValueError(INVALID_DATE_MESSAGE)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(INVALID_DATE_MESSAGE) from None


def format_date(value: date | None) -> str | None:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)
