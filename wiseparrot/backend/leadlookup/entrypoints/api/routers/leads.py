# leadlookup/entrypoints/api/routers/leads.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_table_client, require_api_key
from ....adapters.clients.base import LeadTableClient
from ....domain.classify import quality_tier, score_bar_width, score_tier
from ....domain.types import (
    DATE_FIELD,
    NAME_FIELD,
    QUALITY_FIELD,
    SCORE_FIELD,
    SUGGESTION_FIELD,
    LeadRecord,
    SearchOutcome,
)
from ....presentation import SCORE_BAR_COLORS, badge_style, display_date, results_caption
from ....schemas import LeadOut, SearchResponse
from ....service_layer.use_cases.search import search_leads

router = APIRouter(tags=["leads"])

OUTCOME_STATUS: dict[SearchOutcome, int] = {
    SearchOutcome.missing_date: 400,
    SearchOutcome.missing_account_id: 400,
    SearchOutcome.invalid_input: 400,
    SearchOutcome.rate_limited: 429,
    SearchOutcome.not_found_or_misconfigured: 502,
    SearchOutcome.unknown: 502,
}


def _opt_text(v: Any) -> str | None:
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    return str(v)


def _to_lead_out(record: LeadRecord) -> LeadOut:
    quality = _opt_text(record.get(QUALITY_FIELD))
    score = record.get(SCORE_FIELD)
    q_tier = quality_tier(quality)
    s_tier = score_tier(score)
    return LeadOut(
        record_id=record.record_id,
        date=_opt_text(record.get(DATE_FIELD)),
        display_date=display_date(record.get(DATE_FIELD)),
        name=_opt_text(record.get(NAME_FIELD)),
        suggestion=_opt_text(record.get(SUGGESTION_FIELD)),
        lead_quality=quality,
        quality_tier=int(q_tier),
        quality_style=badge_style(q_tier),
        lead_score=score,
        score_tier=int(s_tier),
        score_style=badge_style(s_tier),
        score_bar_width=score_bar_width(score),
        score_bar_color=SCORE_BAR_COLORS[s_tier],
    )


@router.get("/leads/search", response_model=SearchResponse, dependencies=[Depends(require_api_key)])
async def search(
    date: str | None = Query(default=None),
    account_id: str | None = Query(default=None),
    client: LeadTableClient = Depends(get_table_client),
) -> SearchResponse:
    result = await search_leads(date, account_id, client=client)

    if not result.ok:
        raise HTTPException(
            status_code=OUTCOME_STATUS[result.outcome],
            detail={"outcome": result.outcome.value, "message": result.message},
        )

    leads = [_to_lead_out(r) for r in result.records]
    return SearchResponse(
        outcome=result.outcome.value,
        message=result.message,
        date=result.date_key,
        count=len(leads),
        caption=results_caption(len(leads)) if leads else None,
        leads=leads,
    )
