"""
Rust-style ``Option`` type.

An :class:`Option` either holds a value (the Some variant) or nothing
(the None variant). Instances are created with :func:`some` and
:func:`none` only, and cannot be modified afterwards.

The variant is stored as an explicit tag, so ``some(None)`` is a Some
variant that holds ``None``.

Example:
    from hoshi.types import none, some

    meaning_of_life = some(42)
    nil = none()

    nil.inspect(print)
    # the callable is never called

    meaning_of_life.inspect(lambda value: print(f"value is {value}"))
    # prints 'value is 42'
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar

from hoshi.types.errors import UnwrapOnNoneError

T = TypeVar("T")
U = TypeVar("U")


class OptionVariant(Enum):
    """Variants of an :class:`Option`."""

    SOME = "some"
    NONE = "none"


class Option(Generic[T]):
    """
    A value that may be absent.

    Do not instantiate directly; use :func:`some` or :func:`none`.
    """

    __slots__ = ("_variant", "_value")

    _variant: OptionVariant
    _value: T | None

    def __init__(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError("Option cannot be constructed directly, use some() or none()")

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Option is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Option is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return _make, (self._variant, self._value)

    @property
    def variant(self) -> OptionVariant:
        """Which variant this option is."""
        return self._variant

    def is_some(self) -> bool:
        """Return True if this option holds a value."""
        return self._variant is OptionVariant.SOME

    def is_none(self) -> bool:
        """Return True if this option holds nothing."""
        return self._variant is OptionVariant.NONE

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """
        Map ``Option[T]`` to ``Option[U]`` by applying ``fn`` to a contained value.

        A None variant maps to a new None variant and ``fn`` is not called.

        Args:
            fn: Function converting ``T`` to ``U``

        Returns:
            New option holding ``fn(value)``, or a None variant
        """
        if self.is_some():
            return some(fn(self._value))  # type: ignore[arg-type]

        return none()

    def inspect(self, fn: Callable[[T], Any]) -> Option[T]:
        """
        Call ``fn`` with the contained value, if any.

        Example:
            x = some(4).inspect(print).map(lambda v: v * 3).unwrap()

        Args:
            fn: Callable to inspect the value with

        Returns:
            This option, for chaining
        """
        if self.is_some():
            fn(self._value)  # type: ignore[arg-type]

        return self

    def unwrap(self) -> T:
        """
        Return the contained value.

        Raises:
            UnwrapOnNoneError: If this is a None variant
        """
        if self.is_none():
            raise UnwrapOnNoneError()

        return self._value  # type: ignore[return-value]

    def expect(self, message: str) -> T:
        """
        Return the contained value, failing with ``message`` otherwise.

        Args:
            message: Error message used when this is a None variant

        Raises:
            UnwrapOnNoneError: If this is a None variant
        """
        if self.is_none():
            raise UnwrapOnNoneError(message)

        return self._value  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._variant is other._variant and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._variant, self._value))

    def __repr__(self) -> str:
        if self.is_some():
            return f"some({self._value!r})"
        return "none()"


def _make(variant: OptionVariant, value: Any) -> Option[Any]:
    option = object.__new__(Option)
    object.__setattr__(option, "_variant", variant)
    object.__setattr__(option, "_value", value)
    return option


def some(value: T) -> Option[T]:
    """
    Create a Some variant holding ``value``.

    Args:
        value: The value to contain
    """
    return _make(OptionVariant.SOME, value)


def none() -> Option[Any]:
    """Create a None variant."""
    return _make(OptionVariant.NONE, None)
