"""
Utility functions for hoshi.

Provides small helpers used across modules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def omit_none(mapping: Mapping[K, V | None]) -> dict[K, V]:
    """
    Copy a mapping without its ``None`` values.

    Args:
        mapping: Mapping to filter

    Returns:
        New dict; the input is left untouched
    """
    return {key: value for key, value in mapping.items() if value is not None}


def should_exclude(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """
    Check whether any item matches ``predicate``.

    Args:
        items: Items to test
        predicate: Returns True for items that trigger exclusion

    Returns:
        True if at least one item matched; False for no items
    """
    return any(predicate(item) for item in items)


def assert_is_exception(value: Any) -> None:
    """
    Ensure ``value`` is an exception instance.

    Raises:
        TypeError: If it is not
    """
    if not isinstance(value, BaseException):
        raise TypeError(f"Value was not an exception: {value!r}")
