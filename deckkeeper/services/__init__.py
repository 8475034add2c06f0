"""
DeckKeeper services.

Restoring and exporting saved games.
"""

from deckkeeper.services.exporter import export_save
from deckkeeper.services.importer import import_save, load_game
from deckkeeper.services.registry import CardRegistry

__all__ = [
    "CardRegistry",
    "export_save",
    "import_save",
    "load_game",
]
