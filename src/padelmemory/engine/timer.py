from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class SessionTimer:
    """Single-player stopwatch.

    Elapsed time is derived from the clock rather than accumulated per frame,
    so it stays correct when the window is paused or the loop stalls.
    """

    def __init__(self, clock: Clock = monotonic_ms) -> None:
        self._clock = clock
        self._started_at: int | None = None
        self._final_ms: int = 0
        self.running = False

    def start(self) -> None:
        self._started_at = self._clock()
        self._final_ms = 0
        self.running = True

    def stop(self, at_ms: int | None = None) -> int:
        """Freeze the timer and return the final elapsed time.

        `at_ms` pins the stop to a clock reading earlier than now, e.g. the
        instant a deferred resolution was due.
        """
        if not self.running or self._started_at is None:
            return self._final_ms
        now = self._clock() if at_ms is None else min(at_ms, self._clock())
        self._final_ms = max(0, now - self._started_at)
        self.running = False
        return self._final_ms

    def cancel(self) -> None:
        self._started_at = None
        self._final_ms = 0
        self.running = False

    @property
    def elapsed_ms(self) -> int:
        if self.running and self._started_at is not None:
            return max(0, self._clock() - self._started_at)
        return self._final_ms
