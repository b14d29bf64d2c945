"""Wall-clock timers measured in seconds."""

from __future__ import annotations

import time
from collections.abc import Callable


class ElapsedTimer:
    """Measures the seconds passed since creation or the last restart."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        """Seconds since the timer was started."""
        return self._clock() - self._start

    def restart(self) -> float:
        """Start counting again from now and return the time that had elapsed."""
        now = self._clock()
        elapsed = now - self._start
        self._start = now
        return elapsed