"""
Helpers to mark functions and classes as deprecated.

Both helpers emit a :class:`DeprecationWarning` through :mod:`warnings`.

Example:
    from hoshi.deprecate import deprecated, deprecated_class

    old_parse = deprecated(parse, alternatives=["parse_v2"])

    @deprecated_class("Use NewClient instead.")
    class OldClient:
        ...
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type)

# Either a fixed message or a builder receiving (name, alternatives)
Message = str | Callable[[str, Sequence[str] | None], str]


def _build_message(
    kind: str,
    name: str,
    message: Message | None,
    alternatives: Sequence[str] | None,
) -> str:
    if isinstance(message, str):
        return message
    if message is not None:
        return message(name, alternatives)

    text = f"{kind} {name} is deprecated and will be removed in a later release."
    if alternatives:
        text += f" You can also try the alternatives of {name}: {', '.join(alternatives)}"
    return text


def deprecated(
    func: F,
    message: Message | None = None,
    alternatives: Sequence[str] | None = None,
) -> F:
    """
    Wrap ``func`` so that every call emits a deprecation warning.

    Args:
        func: The deprecated function
        message: Custom message, or a callable building one from the
            function name and alternatives
        alternatives: Names of functions to use instead

    Returns:
        Wrapped function with the same signature
    """
    name = getattr(func, "__name__", None) or "<anonymous>"
    text = _build_message("Function", name, message, alternatives)

    @wraps(func)
    def wrapper(*args, **kwargs):
        warnings.warn(text, DeprecationWarning, stacklevel=2)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def deprecated_class(
    message: Message | None = None,
    alternatives: Sequence[str] | None = None,
) -> Callable[[C], C]:
    """
    Class decorator that emits a deprecation warning on instantiation.

    Args:
        message: Custom message, or a callable building one from the
            class name and alternatives
        alternatives: Names of classes to use instead

    Returns:
        Decorator applied to the deprecated class
    """

    def decorator(cls: C) -> C:
        text = _build_message("Class", cls.__name__, message, alternatives)
        original_init = cls.__init__

        @wraps(original_init)
        def __init__(self, *args, **kwargs):
            warnings.warn(text, DeprecationWarning, stacklevel=2)
            original_init(self, *args, **kwargs)

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator
