# leadlookup/service_layer/use_cases/search.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from ...adapters.clients.base import LeadTableClient
from ...domain.dates import normalize_date
from ...domain.errors import (
    LeadSearchError,
    MissingAccountIdError,
    MissingDateError,
    NotFoundOrMisconfiguredError,
    RateLimitedError,
    SearchInProgressError,
    UnknownSearchError,
)
from ...domain.filtering import filter_records
from ...domain.types import LeadRecord, SearchOutcome, SearchResult

log = logging.getLogger(__name__)


def _is_missing(x: Any) -> bool:
    if x is None:
        return True
    return isinstance(x, str) and not x.strip()


def _map_transport_error(e: Exception) -> LeadSearchError:
    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        if status == 429:
            return RateLimitedError(f"remote status {status}")
        if status == 404:
            return NotFoundOrMisconfiguredError(f"remote status {status}")
        return UnknownSearchError(f"remote status {status}")
    return UnknownSearchError(f"{type(e).__name__}: {e}")


async def _fetch(client: LeadTableClient, date_key: str) -> list[LeadRecord]:
    try:
        return await client.fetch_records(date_key)
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, ValueError) as e:
        # ValueError covers a non-JSON body; InvalidURL/StreamError sit outside HTTPError
        mapped = _map_transport_error(e)
        log.warning("lead fetch failed for %s -> %s (%s)", date_key, mapped.outcome.value, mapped.detail)
        raise mapped from e


async def search_leads(date_value: Any, account_id: Any, *, client: LeadTableClient) -> SearchResult:
    """
    One full search: validate, normalize, fetch once, filter.

    Every failure is folded into a SearchResult with a fixed message.
    Validation happens before the client is touched.
    """
    date_key: str | None = None
    try:
        if _is_missing(date_value):
            raise MissingDateError()
        if _is_missing(account_id):
            raise MissingAccountIdError()

        date_key = normalize_date(date_value)
        raw = await _fetch(client, date_key)
        leads = filter_records(raw, str(account_id))
    except LeadSearchError as e:
        if e.detail:
            log.info("search ended with %s: %s", e.outcome.value, e.detail)
        return SearchResult(outcome=e.outcome, message=e.message, date_key=date_key)

    return SearchResult(outcome=SearchOutcome.success, records=tuple(leads), date_key=date_key)


class SearchState(str, Enum):
    idle = "idle"
    searching = "searching"
    success = "success"
    no_results = "no_results"
    failed = "failed"


class LeadSearchSession:
    """
    Operator view state around search_leads(): one search at a time,
    displayed records cleared when a new search starts.
    """

    def __init__(self, client: LeadTableClient) -> None:
        self._client = client
        self.state = SearchState.idle
        self.records: tuple[LeadRecord, ...] = ()
        self.message: str | None = None

    @property
    def busy(self) -> bool:
        return self.state == SearchState.searching

    def clear(self) -> None:
        if self.busy:
            raise SearchInProgressError("cannot clear while a search is running")
        self.state = SearchState.idle
        self.records = ()
        self.message = None

    async def run(self, date_value: Any, account_id: Any) -> SearchResult:
        if self.busy:
            raise SearchInProgressError("a search is already in flight")

        self.state = SearchState.searching
        self.records = ()
        self.message = None
        try:
            result = await search_leads(date_value, account_id, client=self._client)
        except BaseException:
            self.state = SearchState.failed
            raise

        self.records = result.records
        self.message = result.message
        if result.outcome == SearchOutcome.success:
            self.state = SearchState.success
        elif result.outcome == SearchOutcome.no_results:
            self.state = SearchState.no_results
        else:
            self.state = SearchState.failed
        return result
