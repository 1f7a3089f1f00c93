"""
Time sources for record timestamps.

Timestamps are integer nanoseconds since the UNIX epoch.  The system
clock never goes backwards from the point of view of the record store:
if the wall clock is adjusted, the last issued value is repeated until
real time catches up.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        ...


class SystemClock:
    """Wall-clock time, clamped to be nondecreasing."""

    def __init__(self) -> None:
        self._last = 0

    def now(self) -> int:
        current = time.time_ns()
        if current < self._last:
            current = self._last
        self._last = current
        return current


class ManualClock:
    """Clock advanced explicitly by the caller.

    Each call to :meth:`now` returns the current value and then moves it
    forward by ``step`` so that consecutive records get distinct
    timestamps.  Used by tests.
    """

    def __init__(self, start: int = 1_000, step: int = 1) -> None:
        self.current = start
        self.step = step

    def now(self) -> int:
        value = self.current
        self.current += self.step
        return value

    def advance(self, delta: int) -> None:
        self.current += delta
