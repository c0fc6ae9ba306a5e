# tests/conftest.py
import time

import httpx
import pytest

from leadlookup.adapters.clients.aitable import AITableClient
from leadlookup.domain.types import LeadRecord


class FakeTableClient:
    """Records every fetch; returns canned records or raises canned errors."""

    def __init__(self, records=None, exc: Exception | None = None):
        self.records = list(records or [])
        self.exc = exc
        self.calls: list[str] = []

    async def fetch_records(self, date_key: str) -> list[LeadRecord]:
        self.calls.append(date_key)
        if self.exc is not None:
            raise self.exc
        return list(self.records)


def rec(record_id: str = "rec1", **fields) -> LeadRecord:
    return LeadRecord(record_id=record_id, fields=fields)


def status_error(code: int) -> httpx.HTTPStatusError:
    req = httpx.Request("GET", "https://aitable.test/fusion/v1/datasheets/dst1/records")
    resp = httpx.Response(code, request=req, text="raw upstream body")
    return httpx.HTTPStatusError(f"status {code}", request=req, response=resp)


def mock_client(handler) -> AITableClient:
    return AITableClient(
        datasheet_id="dst1",
        api_token="tok_secret",
        base_url="https://aitable.test/fusion/v1",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def fake_client():
    return FakeTableClient


@pytest.fixture
def local_tz(monkeypatch):
    """Pin the process-local timezone (POSIX TZ string) for the duration of a test."""

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def make_record():
    return rec


@pytest.fixture
def make_status_error():
    return status_error


@pytest.fixture
def make_mock_client():
    return mock_client
