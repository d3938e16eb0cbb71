#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for logo-test.

Outbound HTTP goes through ``httpx.MockTransport`` and the wiki registry is an
in-memory fake, so no network or database is needed.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import json
import os

os.environ.setdefault("ENVIRONMENT", "testing")

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from logotest.core.http import get_http_client, make_client
from logotest.core.registry import get_registry
from logotest.main import create_app


# -----------------------------------------------------------------------------

THUMB_BASE = "https://upload.wikimedia.org/wikipedia/commons/thumb/f/f6/Wikipedia-logo-v2-wordmark.svg"
THUMB_1X   = f"{THUMB_BASE}/135px-Wikipedia-logo-v2-wordmark.svg.png"
THUMB_1_5X = f"{THUMB_BASE}/203px-Wikipedia-logo-v2-wordmark.svg.png"
THUMB_2X   = f"{THUMB_BASE}/270px-Wikipedia-logo-v2-wordmark.svg.png"

LOGO = "File:Wikipedia-logo-v2-wordmark.svg"

IMAGEINFO_RESPONSE = {
    "batchcomplete": True,
    "query": {
        "pages": [
            {
                "ns": 6,
                "title": LOGO,
                "imagerepository": "local",
                "imageinfo": [
                    {
                        "thumburl": THUMB_1X,
                        "thumbwidth": 135,
                        "thumbheight": 23,
                        "responsiveUrls": {
                            "1.5": THUMB_1_5X,
                            "2": THUMB_2X,
                        },
                        "url": "https://upload.wikimedia.org/wikipedia/commons/f/f6/Wikipedia-logo-v2-wordmark.svg",
                        "descriptionurl": "https://commons.wikimedia.org/wiki/File:Wikipedia-logo-v2-wordmark.svg",
                    }
                ],
            }
        ]
    },
}

WIKI_PAGE = """<!DOCTYPE html>
<html class="client-nojs" lang="en" dir="ltr">
<head>
<meta charset="UTF-8">
<title>Wikipedia, the free encyclopedia</title>
<link rel="stylesheet" href="/w/load.php?lang=en&amp;modules=site.styles&amp;only=styles&amp;skin=vector">
<script src="/w/load.php?lang=en&amp;modules=startup&amp;only=scripts&amp;skin=vector"></script>
<link rel="icon" href="/static/favicon/wikipedia.ico">
</head>
<body>
<a class="mw-wiki-logo" href="/wiki/Main_Page"></a>
<a href="https://donate.wikimedia.org/">Donate</a>
<img src="//upload.wikimedia.org/wikipedia/en/thumb/x.png">
</body>
</html>
"""


# -----------------------------------------------------------------------------

class FakeRegistry:
    """Registry double: knows a fixed set of wiki URLs and records lookups."""

    def __init__(self, known: set[str] | None = None):
        self.known = known if known is not None else {"https://en.wikipedia.org"}
        self.lookups: list[str] = []

    async def lookup(self, url: str) -> bool:
        self.lookups.append(url)
        return url in self.known

    async def close(self) -> None:
        pass


# -----------------------------------------------------------------------------

class FakeUpstream:
    """Stands in for Commons and the wikis behind ``httpx.MockTransport``."""

    def __init__(self):
        self.imageinfo: dict | str = IMAGEINFO_RESPONSE
        self.commons_status = 200
        self.pages: dict[str, str] = {"en.wikipedia.org": WIKI_PAGE}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host == "commons.wikimedia.org":
            body = self.imageinfo
            if isinstance(body, dict):
                body = json.dumps(body)
            return httpx.Response(
                self.commons_status,
                content=body.encode("utf-8"),
                headers={"Content-Type": "application/json; charset=utf-8"},
            )
        if host in self.pages:
            return httpx.Response(
                200,
                content=self.pages[host].encode("utf-8"),
                headers={"Content-Type": "text/html; charset=UTF-8"},
            )
        return httpx.Response(404, text="Not Found")


# -----------------------------------------------------------------------------

@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest_asyncio.fixture(scope="function")
async def http_client(upstream):
    async with make_client(transport=httpx.MockTransport(upstream)) as c:
        yield c


@pytest_asyncio.fixture(scope="function")
async def client(http_client, registry):
    """HTTP test client with outbound HTTP and the registry replaced by fakes."""
    async def override_get_http_client():
        yield http_client

    async def override_get_registry():
        yield registry

    app = create_app()
    app.dependency_overrides[get_http_client] = override_get_http_client
    app.dependency_overrides[get_registry] = override_get_registry

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
