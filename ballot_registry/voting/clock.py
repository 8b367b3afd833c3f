"""Time sources for deadline checks.

The core never reads the wall clock directly; every operation that compares
against a ballot's end time takes a :class:`Clock`. Timestamps are integer
epoch seconds.
"""
from __future__ import annotations

import time
from threading import Lock
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current time as integer epoch seconds."""


class SystemClock:
    """Wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to; used by tests and simulations."""

    def __init__(self, start: int = 0) -> None:
        self._now = start
        self._lock = Lock()

    def now(self) -> int:
        with self._lock:
            return self._now

    def advance(self, seconds: int) -> int:
        if seconds < 0:
            raise ValueError("clock cannot move backwards")
        with self._lock:
            self._now += seconds
            return self._now

    def set(self, timestamp: int) -> None:
        with self._lock:
            if timestamp < self._now:
                raise ValueError("clock cannot move backwards")
            self._now = timestamp


__all__ = ["Clock", "ManualClock", "SystemClock"]
