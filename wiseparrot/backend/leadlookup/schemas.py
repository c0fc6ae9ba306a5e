from pydantic import BaseModel, Field
from typing import Any


class LeadOut(BaseModel):
    record_id: str

    date: str | None = None
    display_date: str
    name: str | None = None
    suggestion: str | None = None

    lead_quality: str | None = None
    quality_tier: int = Field(..., ge=1, le=4)
    quality_style: dict[str, str]

    # shown unclamped; only score_bar_width is capped
    lead_score: Any = None
    score_tier: int = Field(..., ge=1, le=4)
    score_style: dict[str, str]
    score_bar_width: float = Field(..., ge=0, le=100)
    score_bar_color: str


class SearchResponse(BaseModel):
    outcome: str
    message: str | None = None
    date: str | None = None
    count: int = Field(..., ge=0)
    caption: str | None = None
    leads: list[LeadOut]
