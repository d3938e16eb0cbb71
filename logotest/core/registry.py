#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Wiki domain registry.

The registry is a read-only table of known wikis keyed by their canonical
``https://{domain}`` URL (``meta_p.wiki`` on the Wiki Replicas).  Validation
code only talks to a ``RegistryClient``; which implementation it gets is
decided once, at startup:

  - ``SqlRegistry``  : queries the table through an async SQLAlchemy engine
  - ``NullRegistry`` : accepts everything, used when no registry is configured
                       outside production
  - ``UnconfiguredRegistry`` : rejects every lookup, used in production when
                       no registry is configured
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Protocol

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .config import get_settings
from .errors import RegistryUnavailable

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

class RegistryClient(Protocol):

    async def lookup(self, url: str) -> bool:
        """Return True if *url* belongs to a known wiki."""
        ...

    async def close(self) -> None:
        ...


# -----------------------------------------------------------------------------

class NullRegistry:
    """Registry stand-in for local development: every wiki is known."""

    async def lookup(self, url: str) -> bool:
        return True

    async def close(self) -> None:
        pass


# -----------------------------------------------------------------------------

class SqlRegistry:
    """Existence check against the registry table.

    With ``strict=False`` a database that can't be connected to counts as a
    hit, so the tool stays usable outside its hosting environment.  With
    ``strict=True`` that is raised as ``RegistryUnavailable``.  Failures of
    the query itself (missing table, bad credentials for the schema) are
    always raised.
    """

    def __init__(self, engine: AsyncEngine, table: str = "meta_p.wiki", strict: bool = True):
        self.engine = engine
        self.strict = strict
        self._query = text(f"SELECT 1 FROM {table} WHERE url = :url LIMIT 1")

    async def lookup(self, url: str) -> bool:
        try:
            conn = await self.engine.connect()
        except (SQLAlchemyError, OSError) as exc:
            if self.strict:
                raise RegistryUnavailable(f"Wiki registry is unavailable: {exc}") from exc
            log.warning("Wiki registry unreachable, skipping check for %s (%s)", url, exc)
            return True

        try:
            result = await conn.execute(self._query, {"url": url})
            row = result.first()
        except SQLAlchemyError as exc:
            raise RegistryUnavailable(f"Wiki registry query failed: {exc}") from exc
        finally:
            await conn.close()
        return row is not None

    async def close(self) -> None:
        await self.engine.dispose()


# -----------------------------------------------------------------------------

class UnconfiguredRegistry:
    """Production without a registry: refuse to vouch for any wiki."""

    async def lookup(self, url: str) -> bool:
        raise RegistryUnavailable("No wiki registry is configured")

    async def close(self) -> None:
        pass


# -----------------------------------------------------------------------------

def make_registry(url: str | None = None, strict: bool | None = None) -> RegistryClient:
    settings = get_settings()
    db_url = url or settings.registry_url
    if strict is None:
        strict = settings.is_production

    if not db_url:
        if strict:
            log.error("No registry configured, every wiki lookup will fail")
            return UnconfiguredRegistry()
        log.warning("No registry configured, wiki domains will not be validated")
        return NullRegistry()

    kwargs: dict = {"echo": settings.registry_echo}
    if "sqlite" in db_url:
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_recycle"] = 3600

    engine = create_async_engine(db_url, **kwargs)
    return SqlRegistry(
        engine,
        table=settings.registry_table,
        strict=strict,
    )


# -----------------------------------------------------------------------------

_registry: RegistryClient | None = None


# -----------------------------------------------------------------------------

def init_registry(url: str | None = None, strict: bool | None = None) -> RegistryClient:
    """Initialise the shared registry client.  Call once at startup."""
    global _registry
    _registry = make_registry(url, strict)
    return _registry


# -----------------------------------------------------------------------------

async def close_registry() -> None:
    global _registry
    if _registry is not None:
        await _registry.close()
        _registry = None


# -----------------------------------------------------------------------------

async def get_registry() -> AsyncGenerator[RegistryClient, None]:
    """FastAPI dependency that yields the shared registry client."""
    if _registry is None:
        init_registry()
    yield _registry


# -----------------------------------------------------------------------------
