#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views
===============
GET  /          : form, pre-filled (and pre-validated) from ?wiki=&logo=
GET  /test      : the wiki's main page with the candidate logo injected
GET  /diff      : two candidate logos side by side
GET  /healthz   : liveness probe
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from logotest.core.config import get_settings
from logotest.core.errors import LogoTestError
from logotest.core.http import get_http_client
from logotest.core.registry import RegistryClient, get_registry
from logotest.schemas import SKINS, ErrorView, PreviewRequest
from logotest.services.preview import build_diff, build_index, build_preview

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _ctx(**extra) -> dict:
    """Base template context (request passed separately as first arg to TemplateResponse)."""
    settings = get_settings()
    return {
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "skins": sorted(SKINS),
        **extra,
    }


def render_error(request: Request, err: LogoTestError) -> HTMLResponse:
    log.debug("%s %s failed: %r", request.method, request.url.path, err)
    return templates.TemplateResponse(
        request,
        "error.html",
        _ctx(**ErrorView(error=str(err)).model_dump()),
    )


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    # An empty form field means "not given"
    return value or None


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Index
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    wiki: Optional[str] = None,
    logo: Optional[str] = None,
    registry: RegistryClient = Depends(get_registry),
):
    try:
        view = await build_index(
            _blank_to_none(wiki), _blank_to_none(logo), registry=registry,
        )
    except LogoTestError as err:
        return render_error(request, err)
    return templates.TemplateResponse(
        request,
        "main.html",
        _ctx(wiki=view.wiki, logo=view.logo),
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Preview
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/test", response_class=HTMLResponse)
async def test(
    request: Request,
    wiki:    str = Query(..., min_length=1),
    logo:    str = Query(..., min_length=1),
    useskin: str = Query(..., min_length=1),
    client:   httpx.AsyncClient = Depends(get_http_client),
    registry: RegistryClient    = Depends(get_registry),
):
    req = PreviewRequest(wiki=wiki, logo=logo, skin=useskin)
    try:
        text = await build_preview(
            req.wiki, req.logo, req.skin, client=client, registry=registry,
        )
    except LogoTestError as err:
        return render_error(request, err)
    return HTMLResponse(text)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Diff
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/diff", response_class=HTMLResponse)
async def diff(
    request: Request,
    logo1: Optional[str] = None,
    logo2: Optional[str] = None,
    registry: RegistryClient = Depends(get_registry),
):
    try:
        view = await build_diff(
            _blank_to_none(logo1), _blank_to_none(logo2), registry=registry,
        )
    except LogoTestError as err:
        return render_error(request, err)
    return templates.TemplateResponse(
        request,
        "diff.html",
        _ctx(**view.model_dump()),
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Health
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/healthz", response_class=PlainTextResponse, tags=["system"])
async def healthz():
    return "OK"


# -----------------------------------------------------------------------------
