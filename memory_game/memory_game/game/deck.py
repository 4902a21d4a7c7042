"""Deck construction and shuffling."""

from __future__ import annotations

import random
from collections import Counter
from typing import Iterable, Iterator, Sequence, TypeVar

from memory_game.models.card import Card, Symbol

from .errors import InvalidConfig

T = TypeVar("T")

# Every symbol appears exactly this many times in a valid deck
COPIES_PER_SYMBOL = 2


def shuffle(sequence: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of ``sequence``.

    ``random.shuffle`` is a Fisher-Yates shuffle, so every ordering is equally
    likely. The input is left untouched.

    Args:
        sequence: Items to permute
        rng: Random source (module-level random if not provided)

    Returns:
        New list with the same items in random order
    """
    items = list(sequence)
    (rng or random).shuffle(items)
    return items


def validate_symbols(symbols: Iterable[Symbol]) -> Counter[Symbol]:
    """Check that a symbol multiset holds exactly two of each symbol.

    Raises:
        InvalidConfig: If the multiset is empty or any count is not 2
    """
    counts = Counter(symbols)
    if not counts:
        raise InvalidConfig("symbol multiset is empty")

    bad = {s: n for s, n in counts.items() if n != COPIES_PER_SYMBOL}
    if bad:
        detail = ", ".join(f"{s!r} x{n}" for s, n in sorted(bad.items(), key=str))
        raise InvalidConfig(
            f"every symbol must appear exactly {COPIES_PER_SYMBOL} times: {detail}"
        )
    return counts


class Deck:
    """Ordered cards of one game.

    The length is fixed once built. Restarting a game builds a new Deck
    instead of resetting this one.
    """

    def __init__(self, cards: list[Card]):
        self._cards = cards

    @classmethod
    def build(cls, symbols: Iterable[Symbol], rng: random.Random | None = None) -> "Deck":
        """Shuffle the symbols and create face-down cards.

        Card ids are positions in the shuffled order.

        Args:
            symbols: Symbol multiset, two of each symbol
            rng: Random source for the shuffle

        Returns:
            New Deck

        Raises:
            InvalidConfig: If the multiset is malformed
        """
        symbols = list(symbols)
        validate_symbols(symbols)
        return cls([
            Card(card_id=i, symbol=symbol)
            for i, symbol in enumerate(shuffle(symbols, rng))
        ])

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def get(self, card_id: int) -> Card | None:
        """Get a card by id, or None if the id is out of range."""
        if 0 <= card_id < len(self._cards):
            return self._cards[card_id]
        return None

    def symbols(self) -> list[Symbol]:
        """Symbols in deck order."""
        return [c.symbol for c in self._cards]

    def matched_count(self) -> int:
        return sum(1 for c in self._cards if c.matched)

    def __getitem__(self, card_id: int) -> Card:
        return self._cards[card_id]

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(self.symbols()) + "]"


def build_deck(symbols: Iterable[Symbol], rng: random.Random | None = None) -> Deck:
    """Build a shuffled deck from a symbol multiset."""
    return Deck.build(symbols, rng)
