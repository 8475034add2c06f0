from dataclasses import dataclass, field

from deckkeeper.config import MAX_TABLEAU_STACKS
from deckkeeper.models.card import Card, Suit


@dataclass
class Stock:
    """
    The draw pile.

    Attributes:
        limit: Maximum number of passes through the stock
        loop: Passes made so far
        pos: Current position in the stack
        stack: Cards in draw order
    """

    limit: int = 0
    loop: int = 0
    pos: int = 0
    stack: list[Card] = field(default_factory=list)


def _empty_slots() -> list[list[Card]]:
    return [[] for _ in range(MAX_TABLEAU_STACKS)]


@dataclass
class Tableau:
    """Seven playing stacks, each with a leading run of facedown cards."""

    stacks: list[list[Card]] = field(default_factory=_empty_slots)
    facedown: list[int] = field(default_factory=lambda: [0] * MAX_TABLEAU_STACKS)

    def card_count(self) -> int:
        """Total cards across all stacks."""
        return sum(len(stack) for stack in self.stacks)


@dataclass
class Game:
    """
    A game of Klondike.

    A Game filled by the importer is only valid once the import returned;
    after any import failure it must be discarded.
    """

    stock: Stock = field(default_factory=Stock)
    tableau: Tableau = field(default_factory=Tableau)
    foundations: dict[Suit, list[Card]] = field(
        default_factory=lambda: {suit: [] for suit in Suit}
    )

    def card_count(self) -> int:
        """Total cards across stock, tableau and foundations."""
        in_foundations = sum(len(pile) for pile in self.foundations.values())
        return len(self.stock.stack) + self.tableau.card_count() + in_foundations

    def all_cards(self) -> list[Card]:
        """Every card in the game: stock, then tableau, then foundations."""
        cards = list(self.stock.stack)
        for stack in self.tableau.stacks:
            cards.extend(stack)
        for suit in Suit:
            cards.extend(self.foundations.get(suit, []))
        return cards
