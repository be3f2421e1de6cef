"""Ledger clocks supplying non-decreasing timestamps."""

import threading
import time
from typing import Protocol


class Clock(Protocol):
    """Source of ledger timestamps in whole seconds."""

    def now(self) -> int:
        ...


class SystemClock:
    """Wall clock that never goes backwards.

    Readings are clamped to the last value returned, so a system clock
    adjustment can stall timestamps but never reorder them.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(self._last, int(time.time()))
            return self._last


class ManualClock:
    """Clock advanced explicitly, for tests and scenarios."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"Clock cannot start before 0, got {start}")
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int = 1) -> int:
        """Move the clock forward and return the new reading."""
        if seconds < 0:
            raise ValueError(f"Clock cannot move backwards ({seconds}s)")
        self._now += seconds
        return self._now

    def set(self, timestamp: int) -> None:
        if timestamp < self._now:
            raise ValueError(f"Clock cannot move from {self._now} back to {timestamp}")
        self._now = timestamp
