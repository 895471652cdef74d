"""Exception hierarchy shared by every hoshi module."""

from __future__ import annotations


class HoshiError(Exception):
    """Base class for all errors raised by hoshi itself."""


class ConfigError(HoshiError):
    """Raised when settings cannot be loaded from the environment."""
