"""Stoppable elapsed-time counter."""

from __future__ import annotations

import logging
from typing import Callable

from memory_game.utils.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0


class Clock:
    """Counts whole seconds while running and reports each tick.

    The clock goes Stopped -> Running -> Stopped. Starting a running clock
    does nothing; stopping a stopped clock does nothing.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_tick: Callable[[int], None] | None = None,
        on_reset: Callable[[], None] | None = None,
        interval: float = TICK_INTERVAL,
    ):
        """Initialize clock.

        Args:
            scheduler: Scheduler that drives the ticks
            on_tick: Called with the cumulative elapsed seconds on every tick
            on_reset: Called when the clock is reset, to clear displayed time
            interval: Seconds between ticks
        """
        self.scheduler = scheduler
        self.interval = interval
        self._on_tick = on_tick
        self._on_reset = on_reset
        self._handle: TimerHandle | None = None
        self._elapsed = 0
        self._run = 0  # Bumped on every start so ticks of a stopped run are dropped

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    def start(self) -> None:
        """Start ticking from zero. No-op if already running."""
        if self.running:
            return
        self._elapsed = 0
        self._run += 1
        self._schedule_tick()
        logger.debug("Clock started")

    def stop(self) -> None:
        """Stop ticking and drop the pending tick. Idempotent."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.debug(f"Clock stopped at {self._elapsed}s")

    def reset(self) -> None:
        """Stop the clock and zero the displayed time."""
        self.stop()
        self._elapsed = 0
        if self._on_reset:
            self._on_reset()

    def _schedule_tick(self) -> None:
        run = self._run
        self._handle = self.scheduler.call_later(self.interval, lambda: self._tick(run))

    def _tick(self, run: int) -> None:
        if run != self._run or self._handle is None:
            return
        self._elapsed += 1
        # Reschedule first so a tick listener may stop the clock
        self._schedule_tick()
        if self._on_tick:
            self._on_tick(self._elapsed)
