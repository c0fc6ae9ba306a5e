# leadlookup/domain/filtering.py
from __future__ import annotations

from typing import Iterable

from .errors import NoResultsError
from .matching import is_blank, matches_account
from .types import LeadRecord


def drop_blank(records: Iterable[LeadRecord]) -> list[LeadRecord]:
    return [r for r in records if not is_blank(r)]


def keep_account(records: Iterable[LeadRecord], account_id: str) -> list[LeadRecord]:
    return [r for r in records if matches_account(r, account_id)]


def filter_records(records: Iterable[LeadRecord], account_id: str) -> list[LeadRecord]:
    """
    Blank rows first, then the account filter. Remote order is kept as-is.
    Raises NoResultsError when nothing survives.
    """
    out = keep_account(drop_blank(records), account_id)
    if not out:
        raise NoResultsError(f"0 records matched account_id={account_id!r}")
    return out
