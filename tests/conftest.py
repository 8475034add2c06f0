from pathlib import Path
from typing import Any

import pytest

from deckkeeper.models.save_document import SaveDocument

RANK_SYMBOLS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
SUIT_LETTERS = ["S", "C", "H", "D"]


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample save files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def deck_codes() -> list[str]:
    """All 52 card codes, spades first, ace to king within each suit."""
    return [rank + suit for suit in SUIT_LETTERS for rank in RANK_SYMBOLS]


@pytest.fixture
def deal_data(deck_codes: list[str]) -> dict[str, Any]:
    """
    Raw save data for a fresh Klondike deal.

    24 cards in stock, tableau stacks of 1..7 cards with 0..6 facedown.
    """
    stacks: list[list[str]] = []
    start = 24
    for size in range(1, 8):
        stacks.append(deck_codes[start : start + size])
        start += size
    return {
        "Stock": {"Limit": 3, "Loop": 0, "Pos": 0, "Stack": deck_codes[:24]},
        "Tableau": {"Stacks": stacks, "Facedown": list(range(7))},
        "Foundations": {},
    }


@pytest.fixture
def deal_save(deal_data: dict[str, Any]) -> SaveDocument:
    """The fresh deal as a SaveDocument."""
    return SaveDocument.model_validate(deal_data)
