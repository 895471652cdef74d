"""
Stopwatch for measuring how long a piece of code takes.

Example:
    from hoshi.stopwatch import Stopwatch

    took = Stopwatch.measure(lambda: sum(range(1_000_000)))
    print(f"summing took {took}")  # e.g. 'summing took 21.4ms'
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from typing import Any


def format_duration(seconds: float) -> str:
    """
    Format a duration using the largest fitting unit of s, ms and µs.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (e.g. "1.5s", "12.3ms", "250.0µs")
    """
    millis = seconds * 1000
    if millis >= 1000:
        return f"{seconds:.1f}s"
    if millis >= 1:
        return f"{millis:.1f}ms"
    return f"{millis * 1000:.1f}µs"


class Stopwatch:
    """Measures elapsed wall-clock time between :meth:`start` and :meth:`stop`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._start_time: float | None = None
        self._end_time: float | None = None

    @classmethod
    def create_started(cls, clock: Callable[[], float] = time.perf_counter) -> Stopwatch:
        """Create a stopwatch that is already running."""
        stopwatch = cls(clock)
        stopwatch.start()
        return stopwatch

    @classmethod
    def measure(cls, func: Callable[[], Any]) -> str:
        """Run ``func`` and return how long it took, formatted."""
        stopwatch = cls.create_started()
        func()
        return stopwatch.stop()  # type: ignore[return-value]

    @classmethod
    async def measure_async(cls, func: Callable[[], Awaitable[Any]]) -> str:
        """Await ``func()`` and return how long it took, formatted."""
        stopwatch = cls.create_started()
        await func()
        return stopwatch.stop()  # type: ignore[return-value]

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._end_time is None

    @property
    def elapsed(self) -> float:
        """Elapsed seconds; keeps counting while the stopwatch runs."""
        if self._start_time is None:
            return 0.0
        end = self._end_time if self._end_time is not None else self._clock()
        return end - self._start_time

    def start(self) -> None:
        """Start the stopwatch. Does nothing if it was already started."""
        if self._start_time is not None:
            return
        self._start_time = self._clock()

    def stop(self) -> str | None:
        """
        Stop the stopwatch.

        Returns:
            Formatted elapsed time, or None if it was never started
        """
        if self._start_time is None:
            return None
        if self._end_time is None:
            self._end_time = self._clock()
        return format_duration(self.elapsed)

    def reset(self) -> None:
        self._start_time = None
        self._end_time = None

    def __enter__(self) -> Stopwatch:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
