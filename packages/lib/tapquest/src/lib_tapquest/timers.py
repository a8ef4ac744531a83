"""dt-driven scheduled callbacks owned by a scene."""

from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class Timer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.remaining = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class TimerGroup:
    """Pending timers of one scene, advanced by the scene manager each frame.

    Timers that come due in the same `advance` fire in due order. A timer
    cancelled by an earlier callback in that batch does not fire.
    """

    def __init__(self) -> None:
        self._timers: List[Timer] = []
        self._firing: List[Timer] = []

    def __len__(self) -> int:
        return sum(1 for t in self._timers if t.active)

    def schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        """Run `callback` after `delay` seconds of accumulated update time."""
        if delay < 0:
            raise ValueError("delay must be non-negative")
        timer = Timer(delay, callback)
        self._timers.append(timer)
        return timer

    def advance(self, dt: float) -> None:
        for timer in self._timers:
            timer.remaining -= dt

        due = [t for t in self._timers if t.active and t.remaining <= 0]
        self._timers = [t for t in self._timers if t.active and t.remaining > 0]
        due.sort(key=lambda t: t.remaining)

        self._firing = due
        try:
            for timer in due:
                if not timer.active:
                    continue
                timer.fired = True
                timer.callback()
        finally:
            self._firing = []

    def cancel_all(self) -> None:
        pending = [t for t in self._timers + self._firing if t.active]
        if pending:
            logger.debug("TimerGroup: cancelling %d pending timer(s)", len(pending))
        for timer in pending:
            timer.cancel()
        self._timers = []
