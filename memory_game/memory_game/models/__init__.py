"""Game models."""

from .card import Card, Symbol
from .game_state import DEFAULT_MAX_STARS, GamePhase, GameStats, Outcome

__all__ = [
    "Card",
    "Symbol",
    "DEFAULT_MAX_STARS",
    "GamePhase",
    "GameStats",
    "Outcome",
]
