#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Error taxonomy
==============
Every failure a request can run into is a ``LogoTestError``.  Route handlers
catch it and render ``error.html`` with ``str(exc)`` as the message.

  LogoTestError
  ├── ValidationError
  │   ├── InvalidDomain
  │   ├── InvalidLogo
  │   └── InvalidSkin
  ├── FetchError
  ├── ParseError
  └── RegistryUnavailable
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


# -----------------------------------------------------------------------------

class LogoTestError(Exception):
    """Base class for errors rendered into the error view."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# User input
# -----------------------------------------------------------------------------

class ValidationError(LogoTestError):
    default_message = "Invalid input"


class InvalidDomain(ValidationError):
    default_message = "Invalid wiki"


class InvalidLogo(ValidationError):
    default_message = "Invalid logo"


class InvalidSkin(ValidationError):
    default_message = "Invalid skin specified"


# -----------------------------------------------------------------------------
# Upstream services
# -----------------------------------------------------------------------------

class FetchError(LogoTestError):
    """An outbound HTTP request failed or returned a non-success status."""

    default_message = "Fetching remote content failed"

    def __init__(self, message: str | None = None, url: str | None = None,
                 status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(LogoTestError):
    """The Commons API answered with something we can't use."""

    default_message = "Unexpected response from Commons"


class RegistryUnavailable(LogoTestError):
    default_message = "Wiki registry is unavailable"


# -----------------------------------------------------------------------------
