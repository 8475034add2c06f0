from deckkeeper.models.card import Card, Rank, Suit
from deckkeeper.models.failure import (
    CardOverflowError,
    CardParseError,
    DuplicateCardError,
    FailureDetail,
    FailureKind,
    IncompleteDeckError,
    KnownError,
    SaveDecodeError,
    SaveImportError,
    StructuralError,
    SuitMismatchError,
    UnrecognizedFoundationError,
    UnsupportedSaveFormatError,
)
from deckkeeper.models.game import Game, Stock, Tableau
from deckkeeper.models.save_document import SaveDocument, StockData, TableauData

__all__ = [
    "Card",
    "CardOverflowError",
    "CardParseError",
    "DuplicateCardError",
    "FailureDetail",
    "FailureKind",
    "Game",
    "IncompleteDeckError",
    "KnownError",
    "Rank",
    "SaveDecodeError",
    "SaveDocument",
    "SaveImportError",
    "Stock",
    "StockData",
    "StructuralError",
    "Suit",
    "SuitMismatchError",
    "Tableau",
    "TableauData",
    "UnrecognizedFoundationError",
    "UnsupportedSaveFormatError",
]
