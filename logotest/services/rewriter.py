#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Root-relative link rewriting.

A page fetched from ``https://{wiki}/`` is served back from our own origin, so
its root-relative resources (``/w/load.php``, ``/w/index.php?...``) would resolve
against us.  MediaWiki puts its entry points under single-letter paths, so
only those are pointed back at the wiki; everything else is left alone.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re


# -----------------------------------------------------------------------------

class RootRelativeLinkRewriter:
    """Rewrite ``src="/X`` and ``href="/X`` (X a single letter) to ``//{host}/X``."""

    pattern = re.compile(r'(?P<attr>src|href)="/(?P<letter>[A-Za-z])(?=[/"?#])')

    def __init__(self, host: str):
        self.host = host

    def _replace(self, m: re.Match) -> str:
        return f'{m.group("attr")}="//{self.host}/{m.group("letter")}'

    def rewrite(self, html: str) -> str:
        return self.pattern.sub(self._replace, html)


# -----------------------------------------------------------------------------
