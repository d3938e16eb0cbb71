"""Installed distribution version of logo-test."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("logo-test")
except PackageNotFoundError:
    # Source tree that was never pip-installed
    __version__ = "0.0.0+unknown"
