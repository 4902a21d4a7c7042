"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_MAX_STARS = 3


class Outcome(str, Enum):
    """Result of a completed pair comparison."""

    MATCH = "match"
    NO_MATCH = "no_match"
    GAME_OVER = "game_over"  # The match that completed the deck


class GamePhase(str, Enum):
    """Controller state machine phases."""

    IDLE = "idle"  # New deck, nothing selected yet
    SELECTING = "selecting"  # 0 or 1 card pending
    ADJUDICATING = "adjudicating"  # 2 cards pending, delay window running
    FINISHED = "finished"  # Every pair matched


class GameStats(BaseModel):
    """Per-game counters shown to the player.

    ``star_rating`` stays within ``[0, max_stars]`` because it is only ever
    set by ``GameStats.initial`` and ``star_rating()``, which clamp to that
    range. The model itself does not know the configured maximum.
    """

    moves: int = Field(default=0, ge=0)
    star_rating: int = Field(default=DEFAULT_MAX_STARS, ge=0)
    elapsed_seconds: int = Field(default=0, ge=0)
    running: bool = False

    @classmethod
    def initial(cls, max_stars: int = DEFAULT_MAX_STARS) -> "GameStats":
        """Create zeroed stats for a fresh game."""
        return cls(star_rating=max_stars)

    def summary(self) -> dict[str, int]:
        """Final figures reported on game over."""
        return {
            "moves": self.moves,
            "star_rating": self.star_rating,
            "elapsed_seconds": self.elapsed_seconds,
        }

    def __str__(self) -> str:
        state = "running" if self.running else "stopped"
        return (
            f"Moves {self.moves}, Stars {self.star_rating}, "
            f"{self.elapsed_seconds}s ({state})"
        )
