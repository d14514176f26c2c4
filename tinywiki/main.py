#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
TinyWiki — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from tinywiki.core.config import Settings, get_settings
from tinywiki.core.logging import setup_logging
from tinywiki.core.templates import PageTemplates
from tinywiki.routes import pages, render
from tinywiki.schemas import HealthResponse
from tinywiki.services.storage import PageStore
from tinywiki.ui import views


# -----------------------------------------------------------------------------

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    data_dir = settings.data_dir_resolved
    log.info("%s %s serving pages from %s", settings.app_name, settings.app_version, data_dir)
    yield


# -----------------------------------------------------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A minimal file-backed wiki with [Title] page links.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ── Shared state, built once per process ──────────────────────────────

    app.state.settings  = settings
    app.state.store     = PageStore(settings.data_dir)
    app.state.templates = PageTemplates(settings)

    # ── Static files ──────────────────────────────────────────────────────

    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    # ── API routers ───────────────────────────────────────────────────────

    prefix = "/api/v1"

    app.include_router(pages.router,  prefix=prefix)
    app.include_router(render.router, prefix=prefix)

    # ── UI (Jinja2) router ────────────────────────────────────────────────

    app.include_router(views.router)

    # ── Global exception handlers ─────────────────────────────────────────

    def _error_response(request: Request, status_code: int, message: str):
        if request.url.path.startswith("/api/"):
            return JSONResponse(status_code=status_code, content={"detail": message})
        return app.state.templates.render(
            request, "error", status_code=status_code, message=message,
        )

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and not request.url.path.startswith("/api/"):
            message = "The page you requested could not be found."
        return _error_response(request, exc.status_code, message)

    @app.exception_handler(500)
    async def server_error(request: Request, exc: Exception):
        log.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"], response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.app_version, app=settings.app_name)

    return app


# -----------------------------------------------------------------------------
