"""
Parser for card codes.

Card code format:
    <rank><suit>[?]

Examples:
    AS   ace of spades
    10H  ten of hearts (also written TH)
    QD?  wildcard standing in for an unknown card

Codes are case-insensitive and surrounding whitespace is ignored.
"""

import re

from deckkeeper.config import WILDCARD_MARKER
from deckkeeper.models.card import Card, Rank, Suit
from deckkeeper.models.failure import CardParseError

# Pattern: "AS", "10h", "tc", "QD?"
# Groups: (rank, suit, wildcard_marker)
CARD_CODE_PATTERN = re.compile(
    r"^(A|[2-9]|10|T|J|Q|K)([SCHD])(" + re.escape(WILDCARD_MARKER) + r")?$",
    re.IGNORECASE,
)

RANK_SYMBOLS: dict[str, Rank] = {rank.symbol: rank for rank in Rank}
RANK_SYMBOLS["T"] = Rank.TEN

SUIT_LETTERS: dict[str, Suit] = {suit.letter: suit for suit in Suit}


def parse_card(code: str) -> Card:
    """
    Parse a card code into a Card.

    Args:
        code: Card code such as "AS", "10H" or "QD?"

    Returns:
        The parsed Card

    Raises:
        CardParseError: If the code is not a recognizable card
    """
    if not isinstance(code, str):
        raise CardParseError(repr(code), "card codes must be strings")

    text = code.strip()
    if not text:
        raise CardParseError(code, "empty code")

    match = CARD_CODE_PATTERN.match(text)
    if not match:
        raise CardParseError(code, "expected <rank><suit>, e.g. 'AS' or '10H'")

    rank_symbol, suit_letter, marker = match.groups()
    return Card(
        suit=SUIT_LETTERS[suit_letter.upper()],
        rank=RANK_SYMBOLS[rank_symbol.upper()],
        wildcard=marker is not None,
    )


def format_card(card: Card) -> str:
    """Render a Card back to its canonical code."""
    return card.code
