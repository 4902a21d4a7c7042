"""Pending selection arbitration."""

from memory_game.models.card import Card

from .errors import PreconditionViolation

# At most this many cards are face up awaiting comparison
MAX_PENDING = 2


class SelectionArbiter:
    """Holds the ids of face-up cards waiting to be compared."""

    def __init__(self, max_pending: int = MAX_PENDING):
        self.max_pending = max_pending
        self._pending: list[int] = []

    @property
    def pending(self) -> tuple[int, ...]:
        """Pending card ids in selection order."""
        return tuple(self._pending)

    def can_select(self, card: Card) -> bool:
        """Check if the card may be flipped now."""
        return (
            not card.matched
            and not card.face_up
            and len(self._pending) < self.max_pending
        )

    def select(self, card: Card) -> None:
        """Add a card to the pending selection.

        Raises:
            PreconditionViolation: If ``can_select(card)`` is false
        """
        if not self.can_select(card):
            raise PreconditionViolation(
                f"cannot select {card} with {len(self._pending)} pending"
            )
        self._pending.append(card.card_id)

    def is_full(self) -> bool:
        return len(self._pending) == self.max_pending

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
