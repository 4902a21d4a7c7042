"""Game logic."""

from .clock import Clock
from .controller import GameController
from .deck import Deck, build_deck, shuffle, validate_symbols
from .errors import GameError, InvalidConfig, PreconditionViolation
from .match_engine import STAR_THRESHOLDS, MatchEngine, star_rating
from .selection import SelectionArbiter

__all__ = [
    "Clock",
    "Deck",
    "GameController",
    "GameError",
    "InvalidConfig",
    "MatchEngine",
    "PreconditionViolation",
    "SelectionArbiter",
    "STAR_THRESHOLDS",
    "build_deck",
    "shuffle",
    "star_rating",
    "validate_symbols",
]
