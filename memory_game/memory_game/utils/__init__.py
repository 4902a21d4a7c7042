"""Utilities: logging setup, text display and scheduling."""

from .logger import GameDisplay, setup_logging
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TimerHandle

__all__ = [
    "AsyncioScheduler",
    "GameDisplay",
    "ManualScheduler",
    "Scheduler",
    "TimerHandle",
    "setup_logging",
]
