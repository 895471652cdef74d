"""Errors raised when unwrapping the wrong variant of an Option or Result."""

from __future__ import annotations

from typing import Any

from hoshi.exceptions import HoshiError


class UnwrapError(HoshiError):
    """Base class for unwrap failures. These signal programmer errors."""


class UnwrapOnNoneError(UnwrapError):
    """Raised by ``Option.unwrap``/``Option.expect`` on a None variant."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "called Option#unwrap() on a `None` value")


class UnwrapOnErrError(UnwrapError):
    """Raised by ``Result.unwrap``/``Result.expect`` on an Err variant."""

    def __init__(self, error: Any, message: str | None = None):
        self.error = error
        prefix = message or "called Result#unwrap() on an `Err` value"
        super().__init__(f"{prefix}: {error}")


class UnwrapErrOnOkError(UnwrapError):
    """Raised by ``Result.unwrap_err`` on an Ok variant."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"called Result#unwrap_err() on an `Ok` value: {value!r}")
