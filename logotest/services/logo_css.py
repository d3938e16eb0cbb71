#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Logo CSS builder
================
Looks up a logo's thumbnails on Commons and renders the stylesheet MediaWiki
itself would emit for a ``$wgLogos`` entry of that file: a 135px thumbnail
plus 1.5x and 2x variants for high density screens.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from string import Template
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from logotest.core.config import get_settings
from logotest.core.errors import ParseError
from logotest.core.http import fetch
from logotest.schemas import LogoImageInfo

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

# Copied from MediaWiki's output.  The closing </head> is part of the
# fragment: the page's own </head> is replaced by it.
LOGO_CSS = Template("""
<style type="text/css">
.mw-wiki-logo {
 background-image:url($logo)
}

@media (-webkit-min-device-pixel-ratio:1.5),(min--moz-device-pixel-ratio:1.5),(min-resolution:1.5dppx),(min-resolution:144dpi) {
 .mw-wiki-logo {
  background-image:url($logo_1_5x);
  background-size:135px auto
 }
}
@media (-webkit-min-device-pixel-ratio:2),(min--moz-device-pixel-ratio:2),(min-resolution:2dppx),(min-resolution:192dpi) {
 .mw-wiki-logo {
  background-image:url($logo_2x);
  background-size:135px auto;
 }
}
</style>
</head>
""")


# -----------------------------------------------------------------------------

def build_logo_css(info: LogoImageInfo, fix_1_5x_width: bool = False) -> str:
    """Fill the three logo URLs into ``LOGO_CSS``."""
    url_1_5x = info.url_1_5x
    if fix_1_5x_width:
        url_1_5x = url_1_5x.replace("203", "202")
    return LOGO_CSS.substitute(
        logo=info.thumburl,
        logo_1_5x=url_1_5x,
        logo_2x=info.url_2x,
    )


# -----------------------------------------------------------------------------

def imageinfo_params(logo: str, width: int) -> dict[str, Any]:
    return {
        "action": "query",
        "format": "json",
        "prop": "imageinfo",
        "titles": logo,
        "formatversion": "2",
        "iiprop": "url",
        "iiurlwidth": str(width),
    }


# -----------------------------------------------------------------------------

def parse_imageinfo(logo: str, data: Any) -> LogoImageInfo:
    """Pull the first imageinfo entry out of an API response."""
    try:
        page = data["query"]["pages"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise ParseError(f"Commons returned no page for {logo}") from exc

    if isinstance(page, dict) and page.get("missing"):
        raise ParseError(f"{logo} does not exist on Commons")

    try:
        raw = page["imageinfo"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise ParseError(f"Commons returned no image info for {logo}") from exc

    try:
        return LogoImageInfo.model_validate(raw)
    except PydanticValidationError as exc:
        raise ParseError(f"Commons did not return thumbnail URLs for {logo}") from exc


# -----------------------------------------------------------------------------

async def fetch_logo_css(
    client: httpx.AsyncClient,
    logo: str,
    *,
    api_url: str | None = None,
    width: int | None = None,
    fix_1_5x_width: bool | None = None,
) -> str:
    """Fetch thumbs from Commons and turn them into CSS."""
    settings = get_settings()
    resp = await fetch(
        client,
        api_url or settings.commons_api_url,
        params=imageinfo_params(logo, width or settings.logo_width),
    )
    try:
        data = resp.json()
    except ValueError as exc:
        raise ParseError(f"Commons returned invalid JSON for {logo}") from exc
    log.debug("imageinfo for %s: %s", logo, data)

    info = parse_imageinfo(logo, data)
    if fix_1_5x_width is None:
        fix_1_5x_width = settings.fix_1_5x_thumb_width
    return build_logo_css(info, fix_1_5x_width=fix_1_5x_width)


# -----------------------------------------------------------------------------
