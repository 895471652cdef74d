"""
Event bus for in-process publish/subscribe.

Provides:
- Ordered listener registration per event name
- One-shot listeners that unsubscribe themselves
- A configurable cap on listeners per event
- Fail-stop and isolated (error collecting) emit modes

Example:
    from hoshi.events import EventBus

    bus: EventBus[str] = EventBus()
    bus.on("ready", lambda name: print(f"{name} is ready"))
    bus.emit("ready", "worker-1")
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from hoshi.config import get_settings
from hoshi.exceptions import HoshiError
from hoshi.logging_config import get_logger

logger = get_logger(__name__)

# Listener type: any callable, invoked with the emitted arguments
Listener = Callable[..., Any]

K = TypeVar("K", bound=Hashable)

UNLIMITED_LISTENERS = -1


class ListenerLimitExceededError(HoshiError):
    """Raised when registering a listener would exceed the listener cap."""

    def __init__(self, event: Hashable, limit: int):
        self.event = event
        self.limit = limit
        super().__init__(
            f"Reached the maximum amount of listeners ({limit}) "
            f"to append on event [{event}]"
        )


class _OnceListener:
    """Adapter that runs ``listener`` a single time, then unsubscribes itself."""

    __slots__ = ("bus", "event", "listener", "fired")

    def __init__(self, bus: EventBus, event: Hashable, listener: Listener):
        self.bus = bus
        self.event = event
        self.listener = listener
        self.fired = False

    def __call__(self, *args: Any) -> None:
        # Re-entrant emits see this adapter in their snapshot too
        if self.fired:
            return
        self.fired = True
        try:
            self.listener(*args)
        finally:
            self.bus.remove_listener(self.event, self)

    def __repr__(self) -> str:
        return f"<once {self.listener!r}>"


def _same_listener(registered: Listener, listener: Listener) -> bool:
    # Bound methods are rebuilt on each attribute access, so they compare by ==
    if inspect.ismethod(listener):
        return registered == listener
    return registered is listener


def is_event_emitter_like(obj: object) -> bool:
    """
    Check whether ``obj`` quacks like an event emitter.

    An emitter-like object is an instance (not a class) exposing callable
    ``add_listener``, ``emit``, ``once`` and ``on`` attributes.

    Args:
        obj: Any object

    Returns:
        True if every required method is present and callable
    """
    if isinstance(obj, type):
        return False

    return all(
        callable(getattr(obj, name, None))
        for name in ("add_listener", "emit", "once", "on")
    )


class EventBus(Generic[K]):
    """
    Registry mapping event names to ordered lists of listeners.

    Listeners run synchronously, in registration order, on the thread
    that calls :meth:`emit`. Exceptions raised by a listener propagate
    to the caller of :meth:`emit` and skip the listeners after it; use
    :meth:`emit_collect` to run every listener regardless.

    Events that had listeners keep their (possibly empty) entry until
    :meth:`remove_all_listeners` is called, so they still count towards
    :meth:`size`.

    The bus is not thread-safe; share it across threads only with
    external locking.

    Example:
        bus = EventBus()
        bus.once("shutdown", cleanup)
        bus.emit("shutdown")  # cleanup runs
        bus.emit("shutdown")  # nothing runs
    """

    def __init__(self, max_listeners: int | None = None):
        """
        Initialize event bus.

        Args:
            max_listeners: Maximum listeners per event, ``-1`` for no cap.
                Defaults to the ``max_listeners`` setting (250).
        """
        if max_listeners is None:
            max_listeners = get_settings().max_listeners

        self._listeners: dict[K, list[Listener]] = {}
        self._max_listeners = max_listeners

    # -------------------------------------------------------------------------
    # Subscription
    # -------------------------------------------------------------------------

    @property
    def max_listeners(self) -> int:
        """Current listener cap (``-1`` means unlimited)."""
        return self._max_listeners

    def set_max_listeners(self, count: int) -> EventBus[K]:
        """
        Set the maximum number of listeners allowed per event.

        Use ``-1`` to disable the cap. Already registered listeners are
        kept even if they exceed the new cap.

        Args:
            count: Listener cap

        Returns:
            This bus, for chaining
        """
        self._max_listeners = count
        logger.debug("max_listeners_set", count=count)
        return self

    def on(self, event: K, listener: Listener) -> EventBus[K]:
        """
        Append a listener to the event's listener list.

        Args:
            event: Event name
            listener: Callable invoked with the emitted arguments

        Returns:
            This bus, for chaining

        Raises:
            ListenerLimitExceededError: If the event already holds
                ``max_listeners`` listeners
        """
        listeners = self._listeners.get(event, [])
        if (
            self._max_listeners != UNLIMITED_LISTENERS
            and len(listeners) >= self._max_listeners
        ):
            logger.warning(
                "listener_limit_reached",
                event_name=str(event),
                limit=self._max_listeners,
            )
            raise ListenerLimitExceededError(event, self._max_listeners)

        listeners.append(listener)
        self._listeners[event] = listeners
        return self

    def add_listener(self, event: K, listener: Listener) -> EventBus[K]:
        """Alias of :meth:`on`."""
        return self.on(event, listener)

    def once(self, event: K, listener: Listener) -> EventBus[K]:
        """
        Register a listener that runs on the next emit only.

        The listener is unsubscribed right after it runs (also when it
        raises). If the event is never emitted it stays registered.

        Args:
            event: Event name
            listener: Callable invoked with the emitted arguments

        Returns:
            This bus, for chaining

        Raises:
            ListenerLimitExceededError: If the event is at its cap
        """
        return self.on(event, _OnceListener(self, event, listener))

    def remove_listener(self, event: K, listener: Listener) -> bool:
        """
        Remove the first registration of ``listener`` from an event.

        Listeners are matched by identity, except bound methods, which
        match when they wrap the same function and instance. A pending :meth:`once` registration can be removed by passing the
        original listener.

        Args:
            event: Event name
            listener: Listener that was registered

        Returns:
            True if a listener was removed
        """
        listeners = self._listeners.get(event)
        if not listeners:
            return False

        for index, registered in enumerate(listeners):
            if _same_listener(registered, listener) or (
                isinstance(registered, _OnceListener)
                and _same_listener(registered.listener, listener)
            ):
                del listeners[index]
                return True

        return False

    def remove_all_listeners(self) -> EventBus[K]:
        """
        Remove every listener of every event.

        Returns:
            This bus, for chaining
        """
        self._listeners = {}
        logger.debug("listeners_cleared")
        return self

    # -------------------------------------------------------------------------
    # Emitting
    # -------------------------------------------------------------------------

    def emit(self, event: K, *args: Any) -> bool:
        """
        Call every listener of ``event`` in registration order.

        Listeners registered or removed while the emit is running take
        effect on the next emit. An exception raised by a listener
        propagates and the remaining listeners are skipped.

        Args:
            event: Event name
            *args: Arguments passed to each listener

        Returns:
            True if the event had at least one listener
        """
        listeners = self._listeners.get(event)
        if not listeners:
            return False

        for listener in list(listeners):
            listener(*args)

        return True

    def emit_collect(self, event: K, *args: Any) -> list[Exception]:
        """
        Call every listener of ``event``, isolating listener failures.

        Unlike :meth:`emit`, a failing listener does not stop the ones
        after it. Failures are logged and returned.

        Args:
            event: Event name
            *args: Arguments passed to each listener

        Returns:
            Exceptions raised by listeners, in the order they occurred
        """
        errors: list[Exception] = []
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(*args)
            except Exception as e:
                logger.exception(
                    "event_listener_error",
                    event_name=str(event),
                    listener=getattr(listener, "__name__", repr(listener)),
                )
                errors.append(e)

        return errors

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def size(self, event: K | None = None) -> int:
        """
        Count registered events or listeners.

        Args:
            event: Event name, or None to count events

        Returns:
            Number of listeners of ``event``, or the number of known
            events when ``event`` is None
        """
        if event is not None:
            return len(self._listeners.get(event, []))

        return len(self._listeners)

    def listeners(self, event: K) -> list[Listener]:
        """Return a copy of the listeners registered for ``event``."""
        return list(self._listeners.get(event, []))

    def event_names(self) -> list[K]:
        """Return known event names in the order they were first used."""
        return list(self._listeners)

    def __repr__(self) -> str:
        return f"<EventBus events={len(self._listeners)} max_listeners={self._max_listeners}>"
