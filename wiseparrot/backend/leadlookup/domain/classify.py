# leadlookup/domain/classify.py
from __future__ import annotations

from typing import Any

from .parsing import to_float
from .types import Tier


QUALITY_TIERS: dict[str, Tier] = {
    "high": Tier.STRONG,
    "excellent": Tier.STRONG,
    "medium": Tier.MEDIUM,
    "good": Tier.MEDIUM,
    "low": Tier.WEAK,
    "poor": Tier.WEAK,
}

# (inclusive lower bound, tier), checked top-down
SCORE_THRESHOLDS: tuple[tuple[float, Tier], ...] = (
    (80.0, Tier.STRONG),
    (60.0, Tier.MEDIUM),
    (40.0, Tier.WEAK),
)

SCORE_BAR_MAX = 100.0


def quality_tier(label: Any) -> Tier:
    if not isinstance(label, str):
        return Tier.DEFAULT
    return QUALITY_TIERS.get(label.strip().lower(), Tier.DEFAULT)


def score_tier(score: Any) -> Tier:
    v = to_float(score)
    if v is None:
        return Tier.DEFAULT
    for bound, tier in SCORE_THRESHOLDS:
        if v >= bound:
            return tier
    return Tier.DEFAULT


def score_bar_width(score: Any) -> float:
    """Bar width in percent, 0..100. Only the bar is capped; the score itself is shown as-is."""
    v = to_float(score)
    if v is None:
        return 0.0
    return max(0.0, min(v, SCORE_BAR_MAX))
