"""
Card Registry: Deck Integrity Across a Whole Save.

The registry accumulates every card an import accepts and enforces the
shape of a single standard deck:

- no non-wildcard card appears twice
- at most 52 cards in total
- at most 13 cards of any suit
- at most 4 cards of any rank

A registry belongs to exactly one import call. It is never shared.

NOTE: When a card is rejected only for overflowing a limit, its identity
stays recorded. Registering the same code again is then reported as a
duplicate rather than as a second overflow.
"""

from collections import Counter
from dataclasses import dataclass, field

from deckkeeper.config import DECK_SIZE, RANK_COPIES, SUIT_SIZE, WILDCARD_MARKER
from deckkeeper.models.card import Card, Rank, Suit
from deckkeeper.models.failure import CardOverflowError, DuplicateCardError
from deckkeeper.parsers.card_code import parse_card


@dataclass
class CardRegistry:
    """
    Running tally of accepted cards.

    Attributes:
        seen: Identities of accepted non-wildcard cards
        suit_counts: Accepted cards per suit
        rank_counts: Accepted cards per rank
        total: All accepted cards, wildcards included
    """

    seen: set[str] = field(default_factory=set)
    suit_counts: Counter[Suit] = field(default_factory=Counter)
    rank_counts: Counter[Rank] = field(default_factory=Counter)
    total: int = 0

    def add_card(self, code: str) -> Card:
        """
        Parse a card code and register the card.

        Args:
            code: Card code to register

        Returns:
            The parsed Card

        Raises:
            CardParseError: If the code is not a card
            DuplicateCardError: If the card was already registered
            CardOverflowError: If the card breaks one or more deck limits
        """
        card = parse_card(code)

        identity = card.identity
        if WILDCARD_MARKER not in identity:
            if identity in self.seen:
                raise DuplicateCardError(code)
            self.seen.add(identity)

        violations: list[str] = []

        if self.total + 1 > DECK_SIZE:
            violations.append("too many cards")
        else:
            self.total += 1

        if self.suit_counts[card.suit] + 1 > SUIT_SIZE:
            violations.append(f"too many {card.suit.value} cards")
        else:
            self.suit_counts[card.suit] += 1

        if self.rank_counts[card.rank] + 1 > RANK_COPIES:
            violations.append(f"too many {card.rank.label} cards")
        else:
            self.rank_counts[card.rank] += 1

        if violations:
            raise CardOverflowError(code, violations)

        return card

    def add_cards(self, codes: list[str]) -> list[Card]:
        """
        Register codes in order, stopping at the first failure.

        Cards registered before a failure stay registered.
        """
        return [self.add_card(code) for code in codes]

    def is_complete(self) -> bool:
        """True once exactly one full deck has been registered."""
        return self.total == DECK_SIZE
