#!/usr/bin/env python
"""
Print the stylesheet /test would inject for a Commons logo.

Usage:
    .venv/bin/python scripts/logo_css.py File:Wikipedia-logo-v2-wordmark.svg [--width 135]
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from logotest.core.errors import LogoTestError
from logotest.core.http import make_client
from logotest.services.logo_css import fetch_logo_css
from logotest.services.validators import validate_logo


async def main(logo: str, width: int | None, fix: bool) -> int:
    try:
        validate_logo(logo)
        async with make_client() as client:
            css = await fetch_logo_css(client, logo, width=width, fix_1_5x_width=fix)
    except LogoTestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(css, end="")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("logo", help="File name on Commons, including the File: prefix")
    parser.add_argument("--width", type=int, default=None, help="Thumbnail width (default: 135)")
    parser.add_argument("--fix-1-5x", action="store_true", help="Rewrite 203 to 202 in the 1.5x URL")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.logo, args.width, args.fix_1_5x)))
