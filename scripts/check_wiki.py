#!/usr/bin/env python
#
# -------------------------------------------------------------------------------

import asyncio
import sys

from logotest.core.config import get_settings
from logotest.core.errors import LogoTestError
from logotest.core.registry import init_registry, close_registry
from logotest.services.validators import validate_wiki


async def check(domains):
    s = get_settings()
    print("REGISTRY_URL:", s.registry_url or "(none)")
    registry = init_registry()
    try:
        for domain in domains:
            try:
                host = await validate_wiki(domain, registry)
                print(f"  {domain}: ok ({host})")
            except LogoTestError as exc:
                print(f"  {domain}: {exc}")
    finally:
        await close_registry()


asyncio.run(check(sys.argv[1:] or ["en.wikipedia.org"]))
