# leadlookup/presentation.py
from __future__ import annotations

from datetime import date
from typing import Any

from dateutil import parser as date_parser

from .domain.types import Tier

EMPTY_CELL = "—"

# Brand orange (#ef631d) with tier-scaled emphasis.
TIER_BADGE_STYLES: dict[Tier, dict[str, str]] = {
    Tier.STRONG: {
        "backgroundColor": "rgba(239, 99, 29, 0.2)",
        "color": "#ef631d",
        "borderColor": "rgba(239, 99, 29, 0.5)",
    },
    Tier.MEDIUM: {
        "backgroundColor": "rgba(239, 99, 29, 0.15)",
        "color": "#ef631d",
        "borderColor": "rgba(239, 99, 29, 0.4)",
    },
    Tier.WEAK: {
        "backgroundColor": "rgba(239, 99, 29, 0.1)",
        "color": "#ef631d",
        "borderColor": "rgba(239, 99, 29, 0.3)",
    },
    Tier.DEFAULT: {
        "backgroundColor": "rgba(239, 99, 29, 0.05)",
        "color": "#ef631d",
        "borderColor": "rgba(239, 99, 29, 0.2)",
    },
}

SCORE_BAR_COLORS: dict[Tier, str] = {
    Tier.STRONG: "#ef631d",
    Tier.MEDIUM: "rgba(239, 99, 29, 0.8)",
    Tier.WEAK: "rgba(239, 99, 29, 0.6)",
    Tier.DEFAULT: "rgba(239, 99, 29, 0.4)",
}


def badge_style(tier: Tier) -> dict[str, str]:
    return dict(TIER_BADGE_STYLES[tier])


def display_date(value: Any) -> str:
    """'2024-01-05' -> 'Jan 5, 2024'. Unparseable values are shown verbatim."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return EMPTY_CELL
    if isinstance(value, date):
        d = value
    else:
        try:
            d = date_parser.parse(str(value)).date()
        except (ValueError, OverflowError):
            return str(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def cell_text(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return EMPTY_CELL
    return str(value)


def results_caption(count: int) -> str:
    return f"Found {count} lead{'' if count == 1 else 's'} for the selected date"
