"""Cooperative timer scheduling.

The game core never blocks: clock ticks and presentation delays are
callbacks registered with a Scheduler. Every callback runs on the caller's
single logical timeline, so the core needs no locking.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Handle returned by ``call_later``."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call repeatedly."""


class Scheduler(ABC):
    """Runs callbacks after a delay."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule ``callback`` to run once after ``delay`` seconds.

        Args:
            delay: Delay in seconds (>= 0)
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the callback
        """


class ManualTimer:
    """Timer entry owned by ManualScheduler."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = " cancelled" if self.cancelled else ""
        return f"ManualTimer(deadline={self.deadline}{state})"


class ManualScheduler(Scheduler):
    """Virtual-time scheduler advanced explicitly by the caller.

    Callbacks fire in deadline order; callbacks sharing a deadline fire in
    the order they were scheduled. Timers scheduled by a callback fire in the
    same ``advance`` call if they fall inside the advanced window.
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        timer = ManualTimer(self._now + delay, callback)
        heapq.heappush(self._queue, (timer.deadline, next(self._counter), timer))
        return timer

    def advance(self, seconds: float) -> int:
        """Move virtual time forward, running every due callback.

        Args:
            seconds: Amount of time to advance (>= 0)

        Returns:
            Number of callbacks that ran
        """
        if seconds < 0:
            raise ValueError(f"cannot advance by negative time: {seconds}")
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = deadline
            timer.callback()
            fired += 1
        self._now = target
        return fired

    def pending(self) -> int:
        """Count timers that are scheduled and not cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Initialize scheduler.

        Args:
            loop: Event loop to use. If None, the running loop is looked up
                on every call.
        """
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
