# leadlookup/adapters/clients/aitable.py
from __future__ import annotations

import logging
from typing import Any

import httpx

from ...config import settings
from ...domain.types import LeadRecord

log = logging.getLogger(__name__)


def parse_records(data: Any) -> list[LeadRecord]:
    """
    Envelope: {"data": {"records": [{"recordId": ..., "fields": {...}}, ...]}}
    Missing data/records is an empty set, not an error.
    """
    if not isinstance(data, dict):
        return []
    inner = data.get("data")
    if not isinstance(inner, dict):
        return []
    rows = inner.get("records")
    if not isinstance(rows, list):
        return []
    return [LeadRecord.from_payload(x) for x in rows if isinstance(x, dict)]


class AITableClient:
    """
    Read-only client for one AITable datasheet's records endpoint.
    One GET per call; no retries, no paging.
    """

    def __init__(
        self,
        *,
        datasheet_id: str,
        api_token: str,
        base_url: str = "https://aitable.ai/fusion/v1",
        date_field: str = "date",
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._datasheet_id = datasheet_id
        self._api_token = api_token
        self._base_url = (base_url or "").rstrip("/")
        self._date_field = date_field
        self._timeout_s = timeout_s
        self._transport = transport

    @classmethod
    def from_settings(cls, transport: httpx.AsyncBaseTransport | None = None) -> "AITableClient":
        if not settings.AITABLE_DATASHEET_ID:
            raise RuntimeError("AITABLE_DATASHEET_ID is not set")
        if not settings.AITABLE_API_TOKEN:
            raise RuntimeError("AITABLE_API_TOKEN is not set")
        return cls(
            datasheet_id=settings.AITABLE_DATASHEET_ID,
            api_token=settings.AITABLE_API_TOKEN,
            base_url=settings.AITABLE_BASE_URL,
            date_field=settings.AITABLE_DATE_FIELD,
            timeout_s=settings.AITABLE_TIMEOUT_S,
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "Authorization": f"Bearer {self._api_token}"}

    def records_url(self) -> str:
        return f"{self._base_url}/datasheets/{self._datasheet_id}/records"

    async def fetch_records(self, date_key: str) -> list[LeadRecord]:
        url = self.records_url()
        params = {"filter": f"{self._date_field}={date_key}"}
        log.debug("aitable GET %s params=%s", url, params)

        async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
            r = await client.get(url, headers=self._headers(), params=params)
            r.raise_for_status()
            data = r.json()

        records = parse_records(data)
        log.info("aitable returned %d records for %s", len(records), date_key)
        return records
