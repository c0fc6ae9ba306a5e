# leadlookup/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import require_api_key
from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def _redact(v: str | None) -> str | None:
    if not v:
        return v
    if len(v) <= 8:
        return "***"
    return v[:4] + "***" + v[-4:]


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config() -> dict[str, Any]:
    return {
        "ENV": settings.ENV,
        "AITABLE_BASE_URL": settings.AITABLE_BASE_URL,
        "AITABLE_DATASHEET_ID": _redact(settings.AITABLE_DATASHEET_ID),
        "AITABLE_DATE_FIELD": settings.AITABLE_DATE_FIELD,
        "AITABLE_TIMEOUT_S": settings.AITABLE_TIMEOUT_S,
        "AITABLE_API_TOKEN_SET": bool(settings.AITABLE_API_TOKEN),
    }
