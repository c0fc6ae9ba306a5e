# leadlookup/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Header, HTTPException

from ...adapters.clients.aitable import AITableClient
from ...adapters.clients.base import LeadTableClient, UnconfiguredClient
from ...config import settings


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    if settings.API_KEY:
        if not x_api_key or x_api_key != settings.API_KEY:
            raise HTTPException(status_code=401, detail="Invalid API key")


def get_table_client() -> LeadTableClient:
    # Missing credentials still let input validation run first.
    try:
        return AITableClient.from_settings()
    except RuntimeError as e:
        return UnconfiguredClient(str(e))
