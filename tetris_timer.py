
"""Repeating timers pumped from the host loop.

The scheduler has no thread of its own: the game loop calls advance(dt)
once per frame and due callbacks run inline, on the same thread that
handles input. Gravity works the same way as a fixed-timestep accumulator,
so no locking is needed.
"""
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, interval_ms: float, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.acc = 0.0
        self.active = True

    def cancel(self):
        self.active = False


class Scheduler:
    def __init__(self):
        self._handles: List[TimerHandle] = []

    def schedule_repeating(self, interval_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        h = TimerHandle(interval_ms, callback)
        self._handles.append(h)
        logger.debug("scheduled repeating timer every %.1f ms", interval_ms)
        return h

    def advance(self, dt_ms: float):
        """Move the clock forward, firing each live handle once per elapsed interval."""
        for h in list(self._handles):
            if not h.active: continue
            h.acc += dt_ms
            while h.active and h.acc >= h.interval_ms:
                h.acc -= h.interval_ms
                h.callback()
        self._handles = [h for h in self._handles if h.active]

    def cancel_all(self):
        for h in self._handles: h.cancel()
        self._handles = []
        logger.debug("cancelled all timers")

    @property
    def pending(self) -> int:
        return sum(1 for h in self._handles if h.active)
