# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — FastAPI Application Entry Point
Creates the app, registers lifespan events, CORS, routers,
and global error handlers.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rowgram.api.middleware.error_handler import register_error_handlers
from rowgram.api.routes import catalog, render
from rowgram.config import get_settings
from rowgram.dependencies import init_coordinator, init_preset_store
from rowgram.modules.rendering.fonts import find_font_path
from rowgram.modules.rendering.registry import TEMPLATE_REGISTRY
from rowgram.utils.logger import configure_logging, get_logger

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging, load presets, build the coordinator and
    resolve fonts once so the first render does not pay for the search.
    """
    # ── Startup ──────────────────────────────────────────────────────────────
    configure_logging()
    settings = get_settings()

    log.info(
        "rowgram_startup",
        version="1.0.0",
        default_template=settings.default_template_id,
        default_size=f"{settings.default_width}x{settings.default_height}",
        name_char_budget=settings.name_char_budget,
        templates=len(TEMPLATE_REGISTRY),
    )

    init_preset_store()
    init_coordinator()

    for family in ("serif", "sans"):
        for style in ("regular", "bold", "italic"):
            find_font_path(family, style)

    log.info("rowgram_ready")
    yield

    # ── Shutdown ─────────────────────────────────────────────────────────────
    log.info("rowgram_shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rowgram",
        summary="Crew roster images for rowing clubs.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",   # Vite dev server
            "http://localhost:3000",   # Alternative dev port
            "http://localhost:80",     # Docker nginx
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Render-Width", "X-Render-Height", "X-Render-Warnings"],
    )

    # ── Error Handlers ───────────────────────────────────────────────────────
    register_error_handlers(app)

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(render.router)
    app.include_router(catalog.router)

    # ── Health Check ─────────────────────────────────────────────────────────
    @app.get("/health", tags=["health"], summary="Health check")
    async def health() -> dict:
        return {
            "status": "ok",
            "service": "rowgram",
            "version": "1.0.0",
            "templates": sorted(TEMPLATE_REGISTRY),
        }

    return app


# Module-level app instance for uvicorn
app = create_app()
