"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from memory_game.config import GameLogConfig
from memory_game.models.card import Card
from memory_game.models.game_state import GameStats, Outcome

from .formatters import format_deck


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a session.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, num_cards: int, max_stars: int) -> None:
        """Log session start with the board size."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "cards": num_cards,
            "max_stars": max_stars,
        })

    def log_game_start(self, game_num: int, cards: Sequence[Card]) -> None:
        """Log game start with the shuffled layout.

        Args:
            game_num: Game number within the session.
            cards: Deck in id order.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "layout": format_deck(cards),
        })

    def log_turn(
        self,
        game_num: int,
        pair: Sequence[Card],
        outcome: Outcome,
        stats: GameStats,
    ) -> None:
        """Log one completed pair comparison.

        Args:
            game_num: Game number.
            pair: The two compared cards, in selection order.
            outcome: Result of the comparison.
            stats: Stats after the move was recorded.
        """
        self._write({
            "type": "turn",
            "game": game_num,
            "move": stats.moves,
            "cards": [c.card_id for c in pair],
            "symbols": [c.symbol for c in pair],
            "outcome": outcome.value,
            "stars": stats.star_rating,
            "elapsed": stats.elapsed_seconds,
        })

    def log_game_end(self, game_num: int, stats: GameStats) -> None:
        """Log a completed game."""
        self._write({
            "type": "game_end",
            "game": game_num,
            "moves": stats.moves,
            "stars": stats.star_rating,
            "elapsed": stats.elapsed_seconds,
        })

    def log_restart(self, game_num: int, stats: GameStats) -> None:
        """Log a restart of the given game.

        Args:
            game_num: Game number being abandoned.
            stats: Stats at the moment of the restart.
        """
        self._write({
            "type": "restart",
            "game": game_num,
            "moves": stats.moves,
            "elapsed": stats.elapsed_seconds,
        })

    def log_session_end(self, games_played: int, games_completed: int) -> None:
        """Log session end with totals."""
        self._write({
            "type": "session_end",
            "games_played": games_played,
            "games_completed": games_completed,
        })
