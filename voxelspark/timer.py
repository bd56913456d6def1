"""High-resolution elapsed-time measurement."""

from __future__ import annotations

import time


class Timer:
    """Measures seconds since creation or the last reset."""

    def __init__(self) -> None:
        self._start = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds elapsed since the last reset."""
        return time.perf_counter() - self._start