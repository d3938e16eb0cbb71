#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Preview pipelines
=================
build_index    : validate optional form values for ``/``
build_preview  : fetch a wiki page and inject the candidate logo (``/test``)
build_diff     : validate two logo URLs for the side-by-side view (``/diff``)

Each step raises a ``LogoTestError`` subclass on failure, which aborts the
rest of the pipeline.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Optional

import httpx
from jinja2.utils import htmlsafe_json_dumps

from logotest.core.http import fetch
from logotest.core.registry import RegistryClient
from logotest.schemas import DiffView, IndexView
from logotest.services.logo_css import fetch_logo_css
from logotest.services.rewriter import RootRelativeLinkRewriter
from logotest.services.validators import validate_logo, validate_skin, validate_wiki

log = logging.getLogger(__name__)

HEAD_CLOSE = "</head>"


# -----------------------------------------------------------------------------

def splice_css(html: str, css: str) -> str:
    """Replace the first ``</head>`` in *html* with *css* (which ends in its own).

    Pages without a ``</head>`` are returned unchanged.
    """
    before, sep, after = html.partition(HEAD_CLOSE)
    if not sep:
        return html
    return before + css + after


# -----------------------------------------------------------------------------

async def build_index(
    wiki: Optional[str],
    logo: Optional[str],
    *,
    registry: RegistryClient,
) -> IndexView:
    if wiki is not None:
        await validate_wiki(wiki, registry)
    if logo is not None:
        validate_logo(logo)
    return IndexView(wiki=wiki, logo=logo)


# -----------------------------------------------------------------------------

async def build_preview(
    wiki: str,
    logo: str,
    skin: str,
    *,
    client: httpx.AsyncClient,
    registry: RegistryClient,
) -> str:
    validate_skin(skin)
    host = await validate_wiki(wiki, registry)
    validate_logo(logo)

    resp = await fetch(client, f"https://{host}/", params={"useskin": skin})
    text = resp.text

    # Make some URLs absolute
    fixed = RootRelativeLinkRewriter(host).rewrite(text)

    css = await fetch_logo_css(client, logo)
    if HEAD_CLOSE not in fixed:
        log.debug("No </head> in page from %s, logo CSS not injected", host)
    return splice_css(fixed, css)


# -----------------------------------------------------------------------------

async def build_diff(
    logo1: Optional[str],
    logo2: Optional[str],
    *,
    registry: RegistryClient,
) -> DiffView:
    if logo1 is not None:
        await validate_wiki(logo1, registry)
    if logo2 is not None:
        await validate_wiki(logo2, registry)
    return DiffView(
        logo1=logo1,
        logo2=logo2,
        logo1_js=str(htmlsafe_json_dumps(logo1)) if logo1 is not None else None,
        logo2_js=str(htmlsafe_json_dumps(logo2)) if logo2 is not None else None,
    )


# -----------------------------------------------------------------------------
