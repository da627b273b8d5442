# brief_prioritization_project/app/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from app.config import setup_json_logging, settings
from app.api.routes.briefs import router as briefs_router
from app.api.routes.frameworks import router as frameworks_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="BRIEF PRIORITIZATION - Review API",
        version="0.1.0",
    )

    app.include_router(frameworks_router)
    app.include_router(briefs_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
