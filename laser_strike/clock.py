"""
Time sources for spawn timing
"""

from __future__ import annotations

import time


class MonotonicClock:
    """Wall clock in seconds"""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to (tests, headless environments)"""

    def __init__(self, start: float = 0.0):
        self._t = float(start)

    def now(self) -> float:
        return self._t

    def advance(self, seconds: float) -> float:
        self._t += seconds
        return self._t
