# leadlookup/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from ..config import settings
from .api.routers import health, leads


def create_app() -> FastAPI:
    app = FastAPI(title="The Wise Parrot - Lead Lookup")

    logging.getLogger("leadlookup").setLevel(settings.LOG_LEVEL.upper())

    # Routers
    app.include_router(health.router)
    app.include_router(leads.router)

    return app
