#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 models for request values, upstream responses and view contexts.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Requests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

SKINS = frozenset({"vector", "timeless", "monobook"})


class PreviewRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    wiki: str
    logo: str
    skin: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Commons imageinfo
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ResponsiveUrls(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    one_half: str = Field(alias="1.5")
    two: str = Field(alias="2")


# -----------------------------------------------------------------------------

class LogoImageInfo(BaseModel):
    """``query.pages[0].imageinfo[0]`` of an ``iiurlwidth`` imageinfo query."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    thumburl: str
    responsive_urls: ResponsiveUrls = Field(alias="responsiveUrls")

    @property
    def url_1_5x(self) -> str:
        return self.responsive_urls.one_half

    @property
    def url_2x(self) -> str:
        return self.responsive_urls.two


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Views
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class IndexView(BaseModel):
    model_config = ConfigDict(frozen=True)

    wiki: Optional[str] = None
    logo: Optional[str] = None


# -----------------------------------------------------------------------------

class DiffView(BaseModel):
    """Two candidate logo URLs, raw and as JSON string literals for <script>."""

    model_config = ConfigDict(frozen=True)

    logo1: Optional[str] = None
    logo2: Optional[str] = None
    logo1_js: Optional[str] = None
    logo2_js: Optional[str] = None


# -----------------------------------------------------------------------------

class ErrorView(BaseModel):
    error: str
