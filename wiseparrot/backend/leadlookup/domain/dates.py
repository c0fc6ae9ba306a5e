# leadlookup/domain/dates.py
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from .errors import InvalidDateError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _to_utc_date(dt: datetime) -> date:
    # Naive values are local wall-clock time; astimezone() attaches the local zone.
    try:
        if dt.tzinfo is None:
            dt = dt.astimezone()
        return dt.astimezone(timezone.utc).date()
    except (OverflowError, ValueError, OSError) as e:
        # shifting to UTC can step outside year 1..9999
        raise InvalidDateError(f"date out of range: {dt!r}") from e


def normalize_date(value: Any) -> str:
    """
    Turn operator input into the canonical YYYY-MM-DD key used by the remote
    equality filter.

    - date-only ISO strings are read as UTC midnight, so they map to themselves
    - anything else is parsed as a local instant and converted to the UTC day

    Near midnight in a non-UTC zone the result can be the adjacent day.
    """
    if isinstance(value, datetime):
        return _to_utc_date(value).isoformat()
    if isinstance(value, date):
        return value.isoformat()

    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"unusable date input: {value!r}")

    s = value.strip()
    if _ISO_DATE.match(s):
        try:
            return date.fromisoformat(s).isoformat()
        except ValueError as e:
            raise InvalidDateError(f"invalid calendar date: {s!r}") from e

    try:
        parsed = date_parser.parse(s)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"unparseable date: {s!r}") from e

    return _to_utc_date(parsed).isoformat()
