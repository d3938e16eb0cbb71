#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Outbound HTTP client.

One ``httpx.AsyncClient`` is shared by all requests.  It identifies the tool
through the User-Agent header and enforces a bounded timeout on every call.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

import httpx

from .config import get_settings
from .errors import FetchError

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def make_client(
    user_agent: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    settings = get_settings()
    return httpx.AsyncClient(
        headers={"User-Agent": user_agent or settings.user_agent},
        timeout=timeout if timeout is not None else settings.http_timeout,
        follow_redirects=True,
        transport=transport,
    )


# -----------------------------------------------------------------------------

_client: httpx.AsyncClient | None = None


# -----------------------------------------------------------------------------

def init_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the shared client.  Call once at startup."""
    global _client
    _client = make_client(transport=transport)
    return _client


# -----------------------------------------------------------------------------

async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


# -----------------------------------------------------------------------------

async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """FastAPI dependency that yields the shared outbound client."""
    if _client is None:
        init_http_client()
    yield _client


# -----------------------------------------------------------------------------

async def fetch(client: httpx.AsyncClient, url: str, params: dict | None = None) -> httpx.Response:
    """GET *url*, turning transport errors and non-2xx answers into ``FetchError``."""
    log.debug("GET %s params=%s", url, params)
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"{exc.request.url} returned HTTP {exc.response.status_code}",
            url=str(exc.request.url),
            status_code=exc.response.status_code,
        ) from exc
    except httpx.InvalidURL as exc:
        raise FetchError(f"Invalid URL {url}: {exc}", url=url) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Could not fetch {url}: {exc}", url=url) from exc
    return resp


# -----------------------------------------------------------------------------
