"""Pair adjudication, move counting and star rating."""

from typing import Iterable, Sequence

from memory_game.models.card import Card
from memory_game.models.game_state import DEFAULT_MAX_STARS, GameStats, Outcome

from .errors import PreconditionViolation

# Highest move count that still keeps each star, best first.
# With three stars: <=11 -> 3, 12-16 -> 2, 17-20 -> 1, >20 -> 0
STAR_THRESHOLDS = (11, 16, 20)


def star_rating(moves: int, max_stars: int = DEFAULT_MAX_STARS) -> int:
    """Compute the star rating for a move count.

    The rating loses one star for each threshold the move count exceeds and
    is clamped to ``[0, max_stars]``. It is a step function of ``moves``, so
    it never rises while moves grow.
    """
    if moves < 0:
        raise ValueError(f"moves must be non-negative, got {moves}")
    lost = sum(1 for limit in STAR_THRESHOLDS if moves > limit)
    return max(0, max_stars - lost)


class MatchEngine:
    """Compares pairs and keeps the stats consistent with the move count."""

    def __init__(self, max_stars: int = DEFAULT_MAX_STARS):
        self.max_stars = max_stars

    def adjudicate(self, pair: Sequence[Card]) -> Outcome:
        """Compare two cards by symbol.

        Args:
            pair: Exactly two cards

        Returns:
            Outcome.MATCH or Outcome.NO_MATCH

        Raises:
            PreconditionViolation: If ``pair`` does not hold two cards
        """
        if len(pair) != 2:
            raise PreconditionViolation(f"expected 2 cards, got {len(pair)}")
        first, second = pair
        return Outcome.MATCH if first.symbol == second.symbol else Outcome.NO_MATCH

    def record_move(self, stats: GameStats) -> GameStats:
        """Count one completed pair and recompute the star rating.

        Returns:
            Updated copy of ``stats``
        """
        moves = stats.moves + 1
        return stats.model_copy(
            update={"moves": moves, "star_rating": star_rating(moves, self.max_stars)}
        )

    def check_game_over(self, cards: Iterable[Card]) -> bool:
        """Check if every card is matched."""
        return all(c.matched for c in cards)
