"""Formatters for game log and display output."""

from typing import Iterable

from memory_game.models.card import Card

HIDDEN_FACE = "##"


def format_card(card: Card) -> str:
    """Format a card as the player would see it.

    Returns:
        Symbol if the card is face up or matched, "##" otherwise.
    """
    if card.face_up or card.matched:
        return card.symbol
    return HIDDEN_FACE


def format_deck(cards: Iterable[Card]) -> list[str]:
    """List every card's symbol in deck order (face values revealed)."""
    return [c.symbol for c in cards]


def format_time(elapsed_seconds: int) -> str:
    """Format elapsed seconds as MM:SS.

    Examples:
        0 -> "00:00", 75 -> "01:15", 3600 -> "60:00"
    """
    minutes, seconds = divmod(max(0, elapsed_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_stars(star_rating: int, max_stars: int) -> str:
    """Format a rating as filled and empty stars (e.g. "**." for 2 of 3)."""
    filled = max(0, min(star_rating, max_stars))
    return "*" * filled + "." * (max_stars - filled)
