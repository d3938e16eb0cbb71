#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
logo-test: FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from logotest.core.config import get_settings
from logotest.core.errors import LogoTestError
from logotest.core.http import close_http_client, init_http_client
from logotest.core.registry import close_registry, init_registry
from logotest.ui import views

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings = get_settings()
    init_http_client()
    init_registry()
    log.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    await close_http_client()
    await close_registry()


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Preview candidate logos on live Wikimedia wikis.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # ── Static files ──────────────────────────────────────────────────────

    static_dir = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # ── UI (Jinja2) router ────────────────────────────────────────────────

    app.include_router(views.router)

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(LogoTestError)
    async def logo_test_error(request: Request, exc: LogoTestError):
        return views.render_error(request, exc)

    return app


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------
