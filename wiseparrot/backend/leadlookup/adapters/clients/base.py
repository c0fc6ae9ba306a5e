# leadlookup/adapters/clients/base.py
from __future__ import annotations

from typing import Protocol

from ...domain.errors import NotFoundOrMisconfiguredError
from ...domain.types import LeadRecord


class LeadTableClient(Protocol):
    async def fetch_records(self, date_key: str) -> list[LeadRecord]:
        raise NotImplementedError


class UnconfiguredClient:
    """Stand-in when credentials are missing; surfaces as not_found_or_misconfigured on first fetch."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    async def fetch_records(self, date_key: str) -> list[LeadRecord]:
        raise NotFoundOrMisconfiguredError(self.reason)
