"""Game logging module."""

from .formatters import format_card, format_deck, format_stars, format_time
from .game_logger import GameLogger

__all__ = [
    "GameLogger",
    "format_card",
    "format_deck",
    "format_stars",
    "format_time",
]
