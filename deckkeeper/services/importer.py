"""
Save import service.

Restores a Game from a SaveDocument. This is the single point where a save
is checked as a whole: every card passes through one CardRegistry, and each
zone's shape is checked against the Klondike layout.

INVARIANT: import_save either returns a fully valid Game or raises.
A Game passed in and left behind by a failed import must be discarded.
"""

import logging
from pathlib import Path

from deckkeeper.config import (
    DECK_SIZE,
    FOUNDATION_ORDER,
    MAX_FACEDOWN_CARDS,
    MAX_TABLEAU_STACKS,
)
from deckkeeper.models.card import Card, Suit
from deckkeeper.models.failure import (
    IncompleteDeckError,
    StructuralError,
    SuitMismatchError,
    UnrecognizedFoundationError,
)
from deckkeeper.models.game import Game, Stock, Tableau
from deckkeeper.models.save_document import SaveDocument, StockData, TableauData
from deckkeeper.parsers.save_file import load_save_file
from deckkeeper.services.registry import CardRegistry

logger = logging.getLogger(__name__)


def import_save(save: SaveDocument, game: Game | None = None) -> Game:
    """
    Restore a game from a decoded save.

    Args:
        save: The decoded save document
        game: Game to fill in place. A new Game is created if omitted.

    Returns:
        The populated Game

    Raises:
        SaveImportError: The first problem found. Nothing is aggregated.
    """
    if game is None:
        game = Game()
    else:
        # Zones the save leaves out must not keep cards from an earlier game
        game.stock = Stock()
        game.tableau = Tableau()
        game.foundations = {suit: [] for suit in Suit}

    registry = CardRegistry()

    _import_stock(save.stock, game, registry)
    _import_tableau(save.tableau, game, registry)
    _import_foundations(save.foundations, game, registry)

    if not registry.is_complete():
        raise IncompleteDeckError(registry.total, DECK_SIZE)

    logger.info(
        "Restored game: %d stock, %d tableau, %d foundation cards",
        len(game.stock.stack),
        game.tableau.card_count(),
        sum(len(pile) for pile in game.foundations.values()),
    )
    return game


def load_game(path: str | Path) -> Game:
    """Read, decode and import a save file in one step."""
    return import_save(load_save_file(path))


def _import_stock(stock: StockData, game: Game, registry: CardRegistry) -> None:
    # Scalars are trusted as saved
    game.stock.limit = stock.limit
    game.stock.loop = stock.loop
    game.stock.pos = stock.pos
    game.stock.stack = registry.add_cards(stock.stack)
    logger.debug("Stock: %d cards", len(game.stock.stack))


def _import_tableau(tableau: TableauData, game: Game, registry: CardRegistry) -> None:
    size = len(tableau.stacks)
    if size > MAX_TABLEAU_STACKS:
        raise StructuralError(
            f"Number of stacks in tableau exceeds max of {MAX_TABLEAU_STACKS} "
            f"with {size} stacks."
        )
    if len(tableau.facedown) != size:
        raise StructuralError(
            "tableau.stacks and tableau.facedown lengths do not match.",
            detail=f"{size} stacks; {len(tableau.facedown)} facedown counts",
        )

    facedown_total = 0
    for i, codes in enumerate(tableau.stacks):
        facedown = tableau.facedown[i]
        if facedown < 0:
            raise StructuralError(
                f"Tableau {i} is invalid: facedown count {facedown} is negative."
            )
        if facedown >= len(codes):
            raise StructuralError(
                f"Tableau {i} is invalid: Top card must not be facedown: "
                f"{len(codes)} cards; {facedown} facedown."
            )
        game.tableau.stacks[i] = registry.add_cards(codes)
        game.tableau.facedown[i] = facedown
        facedown_total += facedown

    # Checked only once every stack is registered
    if facedown_total > MAX_FACEDOWN_CARDS:
        raise StructuralError(
            f"Facedown cards exceed max of {MAX_FACEDOWN_CARDS} with {facedown_total} cards."
        )
    logger.debug("Tableau: %d stacks, %d facedown", size, facedown_total)


def _import_foundations(
    foundations: dict[str, list[str]], game: Game, registry: CardRegistry
) -> None:
    for key in foundations:
        if key not in FOUNDATION_ORDER:
            raise UnrecognizedFoundationError(key)

    # Fixed order keeps errors and output independent of input key order
    for key in FOUNDATION_ORDER:
        if key not in foundations:
            continue
        suit = Suit(key)
        pile: list[Card] = []
        for j, code in enumerate(foundations[key]):
            card = registry.add_card(code)
            if card.suit != suit:
                raise SuitMismatchError(key, code, j)
            pile.append(card)
        game.foundations[suit] = pile
        logger.debug("Foundation %s: %d cards", key, len(pile))
