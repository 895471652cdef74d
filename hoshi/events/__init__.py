"""
Event module.

Provides an in-process event bus for decoupled communication between components.
"""

from hoshi.events.bus import (
    UNLIMITED_LISTENERS,
    EventBus,
    Listener,
    ListenerLimitExceededError,
    is_event_emitter_like,
)

__all__ = [
    "UNLIMITED_LISTENERS",
    "EventBus",
    "Listener",
    "ListenerLimitExceededError",
    "is_event_emitter_like",
]
