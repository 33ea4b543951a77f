"""Frame timing: elapsed time since start and the delta between frames."""

from __future__ import annotations

import time
from typing import Callable


class Time:
    """Tracks elapsed time and the time between consecutive updates.

    ``counter`` returns a monotonically increasing tick count and
    ``frequency`` is the number of ticks per second.
    """

    def __init__(
        self,
        counter: Callable[[], int] = time.perf_counter_ns,
        frequency: float = 1_000_000_000,
    ) -> None:
        if frequency <= 0:
            raise ValueError("Counter frequency must be positive")
        self._counter = counter
        self._frequency = float(frequency)
        self._start = counter()
        self._now = self._start
        self._last = 0
        self._delta_ms = 0.0

    def _to_ms(self, ticks: float) -> float:
        return ticks / self._frequency * 1000.0

    def elapsed_ms(self) -> float:
        """Milliseconds since this clock was created."""
        return self._to_ms(self._counter() - self._start)

    def delta_ms(self) -> float:
        """Milliseconds between the last two updates."""
        return self._delta_ms

    def delta_seconds(self) -> float:
        """Seconds between the last two updates."""
        return self._delta_ms / 1000.0

    def update(self) -> None:
        """Record the current time and recompute the frame delta."""
        self._last = self._now
        self._now = self._counter()
        self._delta_ms = self._to_ms(self._now - self._last)