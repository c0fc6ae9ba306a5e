# leadlookup/domain/matching.py
from __future__ import annotations

from typing import Any

from .parsing import get_first, is_empty, to_text
from .types import ACCOUNT_ID_ALIASES, DISPLAY_FIELDS, SCORE_FIELD, LeadRecord


def is_blank(record: LeadRecord) -> bool:
    """
    True when every display field is absent or empty.
    A Lead Score of 0 is a real score, not an empty cell.
    """
    for key in DISPLAY_FIELDS:
        v = record.get(key)
        if key == SCORE_FIELD and isinstance(v, (int, float)) and not isinstance(v, bool):
            return False
        if not is_empty(v):
            return False
    return True


def account_value(record: LeadRecord) -> Any:
    """Account identifier under the first populated alias, or None."""
    return get_first(record.fields, *ACCOUNT_ID_ALIASES)


def _account_key(value: Any) -> str:
    # Leading/trailing whitespace is trimmed; inner whitespace is significant.
    return to_text(value).strip().lower()


def matches_account(record: LeadRecord, account_id: str) -> bool:
    v = account_value(record)
    if v is None:
        return False
    return _account_key(v) == _account_key(account_id)
