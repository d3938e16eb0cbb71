#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Input validation for wiki domains, logo file names and skins.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlsplit

from logotest.core.config import get_settings
from logotest.core.errors import InvalidDomain, InvalidLogo, InvalidSkin
from logotest.core.registry import RegistryClient
from logotest.schemas import SKINS


# -----------------------------------------------------------------------------

def resolve_host(candidate: str) -> str:
    """Return the host named by *candidate*, which is a bare host or an https:// URL."""
    if not candidate.startswith("https://"):
        return candidate
    try:
        host = urlsplit(candidate).hostname
    except ValueError as exc:
        raise InvalidDomain(f"Invalid URL: {candidate}") from exc
    if not host:
        raise InvalidDomain(f"URL has no host: {candidate}")
    return host


# -----------------------------------------------------------------------------

async def validate_wiki(
    candidate: str,
    registry: RegistryClient,
    safe_hosts: Iterable[str] | None = None,
) -> str:
    """Check that *candidate* names a known wiki (or a safe non-wiki host).

    Returns the resolved host.
    """
    host = resolve_host(candidate)
    if safe_hosts is None:
        safe_hosts = get_settings().safe_hosts
    # upload/static hosts aren't wikis, so they're not in the registry
    if host in safe_hosts:
        return host
    if not await registry.lookup(f"https://{host}"):
        raise InvalidDomain("Invalid wiki")
    return host


# -----------------------------------------------------------------------------

def validate_logo(candidate: str) -> None:
    if not candidate.endswith(".svg"):
        raise InvalidLogo("Logo must be a SVG")
    if not candidate.startswith("File:"):
        raise InvalidLogo("Logo must begin with File:")


# -----------------------------------------------------------------------------

def validate_skin(skin: str) -> None:
    if skin not in SKINS:
        raise InvalidSkin("Invalid skin specified")


# -----------------------------------------------------------------------------
