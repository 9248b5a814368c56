"""
api/main.py: punkt wejścia FastAPI.

Adaptery (simplifier, evaluator, formatter) są bezstanowe: tworzone raz
z konfiguracji i trzymane w app.state.engine.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from api.routers import evaluate, render, simplify
from api.schemas import HealthResponse
from config import Settings
from expression import from_settings

logger = logging.getLogger("symath")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.engine = from_settings(settings)

    # Routers
    app.include_router(simplify.router)
    app.include_router(evaluate.router)
    app.include_router(render.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    logger.info(
        "Symath API ready (scale=%d, precision=%d).",
        settings.eval_scale, settings.eval_precision,
    )
    return app


app = create_app()
