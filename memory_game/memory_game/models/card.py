"""Card model."""

from pydantic import BaseModel, Field

# Opaque face value of a card. The default deck uses icon names.
Symbol = str


class Card(BaseModel):
    """One deck slot.

    The id is the card's position in the shuffled deck and stays stable for
    the whole game. ``face_up`` and ``matched`` are mutated by the game
    controller only.
    """

    card_id: int = Field(ge=0)
    symbol: Symbol
    face_up: bool = False
    matched: bool = False

    @property
    def is_hidden(self) -> bool:
        """Check if the card is face down and not yet matched."""
        return not self.face_up and not self.matched

    def __str__(self) -> str:
        if self.matched:
            status = "matched"
        elif self.face_up:
            status = "face up"
        else:
            status = "face down"
        return f"Card#{self.card_id}[{self.symbol}] ({status})"
