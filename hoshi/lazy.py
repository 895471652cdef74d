"""
Lazily evaluated values.

Example:
    from hoshi.lazy import lazy

    config = lazy(load_config)
    config.get()  # load_config() runs here
    config.get()  # cached
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Computes a value on first access and returns the same value afterwards."""

    def __init__(self, func: Callable[..., T]) -> None:
        self._func = func
        self._value: T | None = None
        self._evaluated = False

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def get(self, *args: Any, **kwargs: Any) -> T:
        """
        Return the cached value, computing it on the first call.

        Arguments are only used by the first call.
        """
        if not self._evaluated:
            self._value = self._func(*args, **kwargs)
            self._evaluated = True
        return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        """Drop the cached value so the next :meth:`get` recomputes it."""
        self._value = None
        self._evaluated = False


def lazy(func: Callable[..., T]) -> Lazy[T]:
    """Create a :class:`Lazy` from ``func``."""
    return Lazy(func)
