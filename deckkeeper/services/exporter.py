"""
Save export service.

Turns a Game back into a SaveDocument. A document exported from a game
that came out of import_save imports back to an equal game.
"""

from deckkeeper.models.card import Suit
from deckkeeper.models.game import Game
from deckkeeper.models.save_document import SaveDocument, StockData, TableauData
from deckkeeper.parsers.card_code import format_card


def export_save(game: Game) -> SaveDocument:
    """
    Build a SaveDocument from a Game.

    Empty foundations and trailing empty tableau slots are left out of
    the document.
    """
    stock = StockData(
        limit=game.stock.limit,
        loop=game.stock.loop,
        pos=game.stock.pos,
        stack=[format_card(card) for card in game.stock.stack],
    )
    # Slots past the last non-empty stack were never part of the save
    used = len(game.tableau.stacks)
    while used and not game.tableau.stacks[used - 1]:
        used -= 1
    tableau = TableauData(
        stacks=[[format_card(card) for card in stack] for stack in game.tableau.stacks[:used]],
        facedown=game.tableau.facedown[:used],
    )
    foundations = {
        suit.value: [format_card(card) for card in game.foundations[suit]]
        for suit in Suit
        if game.foundations.get(suit)
    }
    return SaveDocument(stock=stock, tableau=tableau, foundations=foundations)
