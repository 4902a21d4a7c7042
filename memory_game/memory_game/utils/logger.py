"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING, Sequence, TextIO

from memory_game.logging.formatters import format_card, format_stars, format_time

if TYPE_CHECKING:
    from memory_game.models.card import Card
    from memory_game.models.game_state import GameStats


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Text presentation of the board and stats."""

    def __init__(
        self,
        max_stars: int = 3,
        columns: int = 4,
        out: TextIO | None = None,
    ):
        """Initialize display.

        Args:
            max_stars: Number of stars a perfect game earns
            columns: Cards per board row
            out: Output stream (stdout if not provided)
        """
        self.max_stars = max_stars
        self.columns = columns
        self.out = out or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def print_separator(self) -> None:
        """Print a separator line."""
        self._print("=" * 60)

    def print_help(self) -> None:
        self._print("Enter a card number (or two), 'r' to restart, 'q' to quit.")

    def format_cell(self, card: "Card") -> str:
        """Format one board cell.

        Face-down cards show "[##]", face-up cards "[symbol]" and matched
        cards "(symbol)", each prefixed with the card number.
        """
        face = format_card(card)
        if card.matched:
            return f"{card.card_id:>2}({face})"
        return f"{card.card_id:>2}[{face}]"

    def print_board(self, cards: Sequence["Card"]) -> None:
        """Print the cards in rows."""
        cells = [self.format_cell(c) for c in cards]
        width = max((len(c) for c in cells), default=0)
        for start in range(0, len(cells), self.columns):
            row = cells[start:start + self.columns]
            self._print("  ".join(cell.ljust(width) for cell in row).rstrip())

    def format_stats(self, stats: "GameStats") -> str:
        return (
            f"Moves: {stats.moves}  "
            f"Stars: {format_stars(stats.star_rating, self.max_stars)}  "
            f"Time: {format_time(stats.elapsed_seconds)}"
        )

    def print_stats(self, stats: "GameStats") -> None:
        self._print(self.format_stats(stats))

    def print_match(self, card_ids: Sequence[int]) -> None:
        self._print(f"Match! {' & '.join(str(i) for i in card_ids)}")

    def print_no_match(self, card_ids: Sequence[int]) -> None:
        self._print(f"No match: {' & '.join(str(i) for i in card_ids)}")

    def print_game_over(self, stats: "GameStats") -> None:
        """Print the congratulations summary."""
        self.print_separator()
        self._print("Congratulations! You found every pair.")
        self._print(
            f"  Moves: {stats.moves}\n"
            f"  Stars: {format_stars(stats.star_rating, self.max_stars)} "
            f"({stats.star_rating}/{self.max_stars})\n"
            f"  Time:  {format_time(stats.elapsed_seconds)}"
        )
        self.print_separator()
