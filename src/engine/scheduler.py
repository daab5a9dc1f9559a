"""
Berra's Casino - Display Scheduling

Deferred presentation callbacks (bankroll rescue, staggered reel stops).
Engines never wait on wall-clock time themselves; they hand callbacks to
a scheduler and carry on.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class DisplayScheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        ...


class ImmediateScheduler:
    """Runs every callback as soon as it is scheduled."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        callback()


@dataclass(order=True)
class _Timer:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """
    Timer queue driven by an external clock.

    Callbacks fire only when ``advance`` moves the clock past their due
    time (or ``run_all`` flushes the queue). Timers due at the same time
    fire in the order they were scheduled.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[_Timer] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to fire."""
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        if delay < 0:
            raise ValueError(f"Delay cannot be negative, got {delay}.")
        heapq.heappush(self._queue, _Timer(self._now + delay, next(self._counter), callback))

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire everything that became due.

        Returns:
            Number of callbacks fired
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds}).")
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            self._now = timer.due
            timer.callback()
            fired += 1
        self._now = target
        return fired

    def run_all(self) -> int:
        """Fire every pending callback, including ones scheduled while flushing."""
        fired = 0
        while self._queue:
            timer = heapq.heappop(self._queue)
            self._now = max(self._now, timer.due)
            timer.callback()
            fired += 1
        return fired

    def clear(self) -> None:
        """Drop all pending callbacks without running them."""
        if self._queue:
            logger.debug("Dropping %d pending display callbacks", len(self._queue))
        self._queue.clear()
