"""
Fixed-cadence tick driver for hosts without their own frame callback
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .clock import MonotonicClock

log = logging.getLogger(__name__)


class FrameScheduler:
    """Calls engine.tick() at `fps` until stopped or the engine is destroyed"""

    def __init__(self, engine, fps: float = 60, clock=None,
                 sleep: Callable[[float], None] = time.sleep):
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.engine = engine
        self.frame_time = 1.0 / fps
        self.clock = clock or MonotonicClock()
        self.sleep = sleep
        self.ticks = 0
        self._stopped = False

    def stop(self):
        self._stopped = True

    @property
    def stopped(self) -> bool:
        return self._stopped

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Drive ticks; returns the number of ticks run by this call"""
        self._stopped = False
        ran = 0
        next_frame = self.clock.now()
        while not self._stopped:
            if max_ticks is not None and ran >= max_ticks:
                break
            if not self.engine.tick():
                log.debug("Engine destroyed, scheduler stopping")
                break
            ran += 1
            self.ticks += 1

            next_frame += self.frame_time
            delay = next_frame - self.clock.now()
            if delay > 0:
                self.sleep(delay)
            else:
                # running behind, don't try to catch up
                next_frame = self.clock.now()
        return ran
