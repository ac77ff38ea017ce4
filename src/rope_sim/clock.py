# MIT License (see LICENSE)
"""
Frame clock: converts host timestamps into elapsed seconds.

A host animation loop typically looks like:

    clock = FrameClock(max_dt=1/20)
    while running:
        rope.update(clock.tick())
        renderer.render_rope(rope)

The first tick returns 0.0. Without max_dt a long pause (a backgrounded
window, a debugger break) produces one very large dt, which the rope
integrates as-is and which usually makes the chain explode for a frame.
"""
from __future__ import annotations
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class FrameClock:
    """
    Tracks the timestamp of the previous frame.

    Args:
        max_dt: Optional upper bound for the returned dt, in seconds.
        time_source: Callable returning the current time in seconds.
    """

    def __init__(self, max_dt: float | None = None, time_source: Callable[[], float] = time.perf_counter):
        if max_dt is not None and max_dt <= 0:
            raise ValueError(f"max_dt must be positive, got {max_dt}")
        self.max_dt = max_dt
        self.time_source = time_source
        self._last: float | None = None

    def reset(self) -> None:
        """Forget the previous timestamp; the next tick returns 0.0."""
        self._last = None

    def tick(self, now: float | None = None) -> float:
        """
        Register a frame and return the seconds elapsed since the last one.

        Args:
            now: Current timestamp in seconds. Read from time_source if omitted.

        Returns:
            Elapsed time, >= 0 and <= max_dt when max_dt is set.
        """
        now = float(self.time_source() if now is None else now)
        last, self._last = self._last, now
        if last is None:
            return 0.0

        dt = max(0.0, now - last)
        if self.max_dt is not None and dt > self.max_dt:
            logger.debug(f"Clamping frame dt {dt:.4f}s to {self.max_dt:.4f}s")
            dt = self.max_dt
        return dt
