"""
hoshi: small utilities shared across projects.

This package contains reusable modules for:
- Events (an in-process event bus)
- Types (Rust-style Option and Result containers)
- Timing (a stopwatch) and lazily evaluated values
- Deprecation warnings and recursive directory listing
"""

from __future__ import annotations

from hoshi.events import EventBus, ListenerLimitExceededError, is_event_emitter_like
from hoshi.exceptions import ConfigError, HoshiError
from hoshi.lazy import Lazy, lazy
from hoshi.stopwatch import Stopwatch
from hoshi.types import (
    Option,
    Result,
    UnwrapErrOnOkError,
    UnwrapError,
    UnwrapOnErrError,
    UnwrapOnNoneError,
    err,
    none,
    ok,
    some,
    tri,
    tri_async,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EventBus",
    "HoshiError",
    "Lazy",
    "ListenerLimitExceededError",
    "Option",
    "Result",
    "Stopwatch",
    "UnwrapErrOnOkError",
    "UnwrapError",
    "UnwrapOnErrError",
    "UnwrapOnNoneError",
    "__version__",
    "err",
    "is_event_emitter_like",
    "lazy",
    "none",
    "ok",
    "some",
    "tri",
    "tri_async",
]
