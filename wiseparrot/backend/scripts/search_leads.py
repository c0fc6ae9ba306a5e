# scripts/search_leads.py
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from leadlookup.adapters.clients.aitable import AITableClient
from leadlookup.adapters.clients.base import UnconfiguredClient
from leadlookup.config import settings
from leadlookup.domain.classify import quality_tier, score_tier
from leadlookup.domain.types import (
    DATE_FIELD,
    NAME_FIELD,
    QUALITY_FIELD,
    SCORE_FIELD,
    SUGGESTION_FIELD,
)
from leadlookup.presentation import cell_text, display_date, results_caption
from leadlookup.service_layer.use_cases.search import search_leads


def _quiet_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Look up leads for one date and account")
    parser.add_argument("--date", default="", help="YYYY-MM-DD or any parseable date")
    parser.add_argument("--account", default="", help="Account ID (case-insensitive)")
    args = parser.parse_args()

    _quiet_logging()

    try:
        client = AITableClient.from_settings()
    except RuntimeError as e:
        client = UnconfiguredClient(str(e))

    result = await search_leads(args.date, args.account, client=client)
    if not result.records:
        print(result.message)
        return 0 if result.ok else 1

    print(results_caption(len(result.records)), result.date_key)
    for r in result.records:
        f = r.fields
        print(
            display_date(f.get(DATE_FIELD)),
            cell_text(f.get(NAME_FIELD)),
            f"{cell_text(f.get(QUALITY_FIELD))} (tier {int(quality_tier(f.get(QUALITY_FIELD)))})",
            f"{cell_text(f.get(SCORE_FIELD))} (tier {int(score_tier(f.get(SCORE_FIELD)))})",
            cell_text(f.get(SUGGESTION_FIELD)),
            sep=" | ",
        )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
