import pytest

from deckkeeper.models.card import Card, Rank, Suit
from deckkeeper.models.failure import (
    CardOverflowError,
    FailureKind,
    IncompleteDeckError,
    SuitMismatchError,
    UnsupportedSaveFormatError,
)
from deckkeeper.models.game import Game
from deckkeeper.models.save_document import SaveDocument


class TestCard:
    def test_card_code(self) -> None:
        assert Card(suit=Suit.HEARTS, rank=Rank.TEN).code == "10H"
        assert Card(suit=Suit.SPADES, rank=Rank.KING).code == "KS"

    def test_wildcard_identity_has_marker(self) -> None:
        card = Card(suit=Suit.CLUBS, rank=Rank.TWO, wildcard=True)
        assert card.identity == "2C?"

    def test_card_immutable(self) -> None:
        card = Card(suit=Suit.CLUBS, rank=Rank.TWO)
        with pytest.raises(AttributeError):
            card.rank = Rank.THREE  # type: ignore[misc]

    def test_rank_labels(self) -> None:
        assert Rank.ACE.label == "ace"
        assert Rank.SEVEN.label == "7"
        assert Rank.QUEEN.label == "queen"


class TestGame:
    def test_new_game_is_empty(self) -> None:
        game = Game()
        assert game.card_count() == 0
        assert len(game.tableau.stacks) == 7
        assert game.tableau.facedown == [0] * 7
        assert set(game.foundations) == set(Suit)

    def test_tableau_slots_are_independent(self) -> None:
        game = Game()
        game.tableau.stacks[0].append(Card(suit=Suit.SPADES, rank=Rank.ACE))
        assert game.tableau.stacks[1] == []

    def test_all_cards_order(self) -> None:
        game = Game()
        ace = Card(suit=Suit.SPADES, rank=Rank.ACE)
        two = Card(suit=Suit.SPADES, rank=Rank.TWO)
        three = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        game.stock.stack = [ace]
        game.tableau.stacks[3] = [two]
        game.foundations[Suit.HEARTS] = [three]
        assert game.all_cards() == [ace, two, three]
        assert game.card_count() == 3


class TestSaveDocument:
    def test_capitalized_and_lowercase_keys_match(self) -> None:
        upper = SaveDocument.model_validate(
            {
                "Stock": {"Limit": 3, "Stack": ["AS"]},
                "Tableau": {"Stacks": [["2S"]], "Facedown": [0]},
            }
        )
        lower = SaveDocument.model_validate(
            {
                "stock": {"limit": 3, "stack": ["AS"]},
                "tableau": {"stacks": [["2S"]], "facedown": [0]},
            }
        )
        assert upper == lower

    def test_missing_sections_default_empty(self) -> None:
        save = SaveDocument.model_validate({})
        assert save.stock.stack == []
        assert save.stock.limit == 0
        assert save.tableau.stacks == []
        assert save.foundations == {}

    def test_dump_uses_capitalized_keys(self) -> None:
        dumped = SaveDocument().model_dump(by_alias=True)
        assert set(dumped) == {"Stock", "Tableau", "Foundations"}
        assert set(dumped["Stock"]) == {"Limit", "Loop", "Pos", "Stack"}


class TestFailures:
    def test_overflow_joins_violations(self) -> None:
        error = CardOverflowError("KS?", ["too many cards", "too many spades cards"])
        assert str(error) == "Cannot add 'KS?': too many cards, too many spades cards."
        assert error.violations == ("too many cards", "too many spades cards")

    def test_suit_mismatch_message(self) -> None:
        error = SuitMismatchError("hearts", "2C", 0)
        assert str(error) == "Suit mismatch in hearts foundation: 2C at index 0"

    def test_to_detail(self) -> None:
        detail = IncompleteDeckError(51, 52).to_detail()
        assert detail.kind == FailureKind.INCOMPLETE_DECK
        assert "51" in detail.message

    def test_unsupported_format_without_extension(self) -> None:
        error = UnsupportedSaveFormatError("savegame", "")
        assert error.kind == FailureKind.UNSUPPORTED_FORMAT
        assert "(none)" in error.message
