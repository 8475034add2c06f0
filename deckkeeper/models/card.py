from dataclasses import dataclass
from enum import Enum

from deckkeeper.config import WILDCARD_MARKER


class Suit(str, Enum):
    """The four suits, valued by their foundation names."""

    SPADES = "spades"
    CLUBS = "clubs"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"

    @property
    def letter(self) -> str:
        """Single-letter form used in card codes."""
        return self.value[0].upper()


class Rank(int, Enum):
    """Card ranks, valued 1 (ace) to 13 (king)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def symbol(self) -> str:
        """Rank as written in card codes ("A", "2".."10", "J", "Q", "K")."""
        return _FACE_SYMBOLS.get(self, str(self.value))

    @property
    def label(self) -> str:
        """Human-readable rank used in messages."""
        if self in _FACE_SYMBOLS:
            return self.name.lower()
        return str(self.value)


_FACE_SYMBOLS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single playing card.

    Attributes:
        suit: The card's suit
        rank: The card's rank
        wildcard: True for a placeholder standing in for an unknown card.
            Wildcards count toward deck limits but may repeat.
    """

    suit: Suit
    rank: Rank
    wildcard: bool = False

    @property
    def code(self) -> str:
        """Canonical card code, e.g. "10H" or "QS?"."""
        marker = WILDCARD_MARKER if self.wildcard else ""
        return f"{self.rank.symbol}{self.suit.letter}{marker}"

    @property
    def identity(self) -> str:
        """Identity used for duplicate detection."""
        return self.code

    def __str__(self) -> str:
        return self.code
