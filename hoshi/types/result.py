"""
Rust-style ``Result`` type.

A :class:`Result` is either a success (the Ok variant, holding a value)
or a failure (the Err variant, holding an error). Instances are created
with :func:`ok` and :func:`err`, or by wrapping code that may raise with
:func:`tri` and :func:`tri_async`. They cannot be modified afterwards.

Example:
    from pathlib import Path

    from hoshi.types import tri

    contents = tri(lambda: Path("/tmp/source.txt").read_text(), lambda e: str(e))
    contents.inspect_err(lambda message: print(f"could not read: {message}"))
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar

from hoshi.types.errors import UnwrapErrOnOkError, UnwrapOnErrError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultVariant(Enum):
    """Variants of a :class:`Result`."""

    OK = "ok"
    ERR = "err"


class Result(Generic[T, E]):
    """
    Outcome of an operation that may fail.

    Do not instantiate directly; use :func:`ok` or :func:`err`.
    """

    __slots__ = ("_variant", "_payload")

    _variant: ResultVariant
    _payload: T | E

    def __init__(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError("Result cannot be constructed directly, use ok() or err()")

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Result is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Result is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return _make, (self._variant, self._payload)

    @property
    def variant(self) -> ResultVariant:
        """Which variant this result is."""
        return self._variant

    def is_ok(self) -> bool:
        """Return True if this is a successful result."""
        return self._variant is ResultVariant.OK

    def is_err(self) -> bool:
        """Return True if this is a failed result."""
        return self._variant is ResultVariant.ERR

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """
        Map ``Result[T, E]`` to ``Result[U, E]`` by applying ``fn`` to an Ok value.

        An Err variant is carried over unchanged and ``fn`` is not called.
        Use :meth:`map_err` for the opposite.

        Example:
            ok(42).map(lambda value: value * 2)  # ok(84)

        Args:
            fn: Function converting ``T`` to ``U``

        Returns:
            New result with the mapped value, or the same error
        """
        if self.is_err():
            return err(self._payload)  # type: ignore[arg-type]

        return ok(fn(self._payload))  # type: ignore[arg-type]

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """
        Map ``Result[T, E]`` to ``Result[T, F]`` by applying ``fn`` to an Err value.

        Example:
            err(ValueError("weow")).map_err(str)  # err('weow')

        Args:
            fn: Function converting ``E`` to ``F``

        Returns:
            New result with the mapped error, or the same value
        """
        if self.is_ok():
            return ok(self._payload)  # type: ignore[arg-type]

        return err(fn(self._payload))  # type: ignore[arg-type]

    def inspect(self, fn: Callable[[T], Any]) -> Result[T, E]:
        """
        Call ``fn`` with the Ok value, if any.

        Args:
            fn: Callable to inspect the value with

        Returns:
            This result, for chaining
        """
        if self.is_ok():
            fn(self._payload)  # type: ignore[arg-type]

        return self

    def inspect_err(self, fn: Callable[[E], Any]) -> Result[T, E]:
        """
        Call ``fn`` with the Err value, if any.

        Args:
            fn: Callable to inspect the error with

        Returns:
            This result, for chaining
        """
        if self.is_err():
            fn(self._payload)  # type: ignore[arg-type]

        return self

    def unwrap(self) -> T:
        """
        Return the Ok value.

        Raises:
            UnwrapOnErrError: If this is an Err variant. The message holds
                the stringified error; exceptions are chained as the cause.
        """
        if self.is_err():
            raise UnwrapOnErrError(self._payload) from _cause(self._payload)

        return self._payload  # type: ignore[return-value]

    def unwrap_err(self) -> E:
        """
        Return the Err value.

        Raises:
            UnwrapErrOnOkError: If this is an Ok variant
        """
        if self.is_ok():
            raise UnwrapErrOnOkError(self._payload)

        return self._payload  # type: ignore[return-value]

    def expect(self, message: str) -> T:
        """
        Return the Ok value, failing with ``"{message}: {error}"`` otherwise.

        Args:
            message: Prefix of the error message

        Raises:
            UnwrapOnErrError: If this is an Err variant
        """
        if self.is_err():
            raise UnwrapOnErrError(self._payload, message) from _cause(self._payload)

        return self._payload  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._variant is other._variant and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._variant, self._payload))

    def __repr__(self) -> str:
        return f"{self._variant.value}({self._payload!r})"


def _cause(payload: Any) -> BaseException | None:
    return payload if isinstance(payload, BaseException) else None


def _make(variant: ResultVariant, payload: Any) -> Result[Any, Any]:
    result = object.__new__(Result)
    object.__setattr__(result, "_variant", variant)
    object.__setattr__(result, "_payload", payload)
    return result


def ok(value: T) -> Result[T, Any]:
    """
    Create an Ok variant.

    Args:
        value: The value to contain
    """
    return _make(ResultVariant.OK, value)


def err(error: E) -> Result[Any, E]:
    """
    Create an Err variant.

    Args:
        error: The error to contain
    """
    return _make(ResultVariant.ERR, error)


def _identity(exc: Exception) -> Any:
    return exc


def tri(
    fn: Callable[[], T],
    map_error: Callable[[Exception], E] | None = None,
) -> Result[T, E]:
    """
    Run ``fn`` and capture its outcome as a :class:`Result`.

    Use :func:`tri_async` for coroutines.

    Args:
        fn: Callable producing a ``T``
        map_error: Converts a raised exception to ``E`` (defaults to
            keeping the exception itself)

    Returns:
        ``ok(fn())``, or ``err(map_error(exception))`` if ``fn`` raised
    """
    on_error = map_error or _identity
    try:
        value = fn()
    except Exception as exc:
        return err(on_error(exc))

    return ok(value)


async def tri_async(
    fn: Callable[[], Awaitable[T]],
    map_error: Callable[[Exception], E] | None = None,
) -> Result[T, E]:
    """
    Await ``fn()`` and capture its outcome as a :class:`Result`.

    Use :func:`tri` for synchronous callables. Cancellation is not
    captured and propagates as usual.

    Example:
        contents = await tri_async(lambda: client.fetch(url), str)
        # => Result[bytes, str]

    Args:
        fn: Callable returning an awaitable of ``T``
        map_error: Converts a raised exception to ``E`` (defaults to
            keeping the exception itself)

    Returns:
        ``ok(value)``, or ``err(map_error(exception))`` if awaiting failed
    """
    on_error = map_error or _identity
    try:
        value = await fn()
    except Exception as exc:
        return err(on_error(exc))

    return ok(value)
