"""
Sum types for optional and fallible values.

Provides Rust-style ``Option`` and ``Result`` containers plus helpers
that turn raised exceptions into ``Result`` values.
"""

from __future__ import annotations

from .errors import (
    UnwrapError,
    UnwrapErrOnOkError,
    UnwrapOnErrError,
    UnwrapOnNoneError,
)
from .option import Option, OptionVariant, none, some
from .result import Result, ResultVariant, err, ok, tri, tri_async

__all__ = [
    "Option",
    "OptionVariant",
    "Result",
    "ResultVariant",
    "UnwrapError",
    "UnwrapErrOnOkError",
    "UnwrapOnErrError",
    "UnwrapOnNoneError",
    "err",
    "none",
    "ok",
    "some",
    "tri",
    "tri_async",
]
