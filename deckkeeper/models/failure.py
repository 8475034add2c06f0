"""
Failure Classification: Every Rejected Save Is Explained.

This module defines the error hierarchy raised while reading and restoring
a saved game. Every failure carries a FailureKind so callers (and the
check_save job) can report it without parsing messages.

INVARIANT: A failed import never yields a usable Game.

Error families:
- SaveDecodeError: the file could not be turned into a SaveDocument
- SaveImportError: the SaveDocument does not describe one valid deal

The first error aborts the whole import. Nothing is aggregated across
steps; a single card overflowing several limits at once is the only case
where reasons are joined into one message.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Decoding failures
    DECODE_FAILED = "decode_failed"
    UNSUPPORTED_FORMAT = "unsupported_format"

    # Card-level failures
    INVALID_CARD_CODE = "invalid_card_code"
    DUPLICATE_CARD = "duplicate_card"
    CARD_OVERFLOW = "card_overflow"

    # Zone-level failures
    STRUCTURE_INVALID = "structure_invalid"
    UNRECOGNIZED_FOUNDATION = "unrecognized_foundation"
    SUIT_MISMATCH = "suit_mismatch"

    # Deck-level failures
    INCOMPLETE_DECK = "incomplete_deck"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


# =============================================================================
# DECODING
# =============================================================================


class SaveDecodeError(KnownError):
    """Raised when a save file cannot be decoded into a SaveDocument."""

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        kind: FailureKind = FailureKind.DECODE_FAILED,
    ):
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion="Check that the file is a complete JSON or TOML save.",
        )


class UnsupportedSaveFormatError(SaveDecodeError):
    """
    Raised when a save file's extension is not a known format.

    The file is never read as an empty document: an unknown format is a
    hard failure, not a deck with zero cards.
    """

    def __init__(self, path: str, extension: str):
        self.path = path
        self.extension = extension
        shown = extension or "(none)"
        super().__init__(
            message=f"Unsupported save format '{shown}' for {path}. Use .json or .toml.",
            kind=FailureKind.UNSUPPORTED_FORMAT,
        )


# =============================================================================
# IMPORT
# =============================================================================


class SaveImportError(KnownError):
    """Base class for saves that decode but do not describe a valid deal."""


class CardParseError(SaveImportError):
    """Raised when a card code is not a recognizable card."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_CARD_CODE,
            message=f"Invalid card code '{code}': {reason}.",
        )


class DuplicateCardError(SaveImportError):
    """Raised when the same non-wildcard card is registered twice."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(
            kind=FailureKind.DUPLICATE_CARD,
            message=f"Found duplicate card '{code}'.",
        )


class CardOverflowError(SaveImportError):
    """
    Raised when a card would push the deck past its limits.

    A single card can overflow the total, its suit and its rank at once;
    every violation is kept in `violations` and joined into the message.
    """

    def __init__(self, code: str, violations: list[str]):
        self.code = code
        self.violations = tuple(violations)
        super().__init__(
            kind=FailureKind.CARD_OVERFLOW,
            message=f"Cannot add '{code}': " + ", ".join(violations) + ".",
        )


class StructuralError(SaveImportError):
    """Raised when a zone's shape breaks the rules of a Klondike layout."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.STRUCTURE_INVALID,
            message=message,
            detail=detail,
        )


class UnrecognizedFoundationError(SaveImportError):
    """Raised when a foundation key is not one of the four suit names."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            kind=FailureKind.UNRECOGNIZED_FOUNDATION,
            message=f"Unrecognized foundation name: {key}",
            suggestion="Foundations must be keyed spades, clubs, hearts or diamonds.",
        )


class SuitMismatchError(SaveImportError):
    """Raised when a foundation holds a card of another suit."""

    def __init__(self, key: str, code: str, index: int):
        self.key = key
        self.code = code
        self.index = index
        super().__init__(
            kind=FailureKind.SUIT_MISMATCH,
            message=f"Suit mismatch in {key} foundation: {code} at index {index}",
        )


class IncompleteDeckError(SaveImportError):
    """Raised when the restored game does not hold exactly one deck."""

    def __init__(self, total: int, required: int):
        self.total = total
        self.required = required
        super().__init__(
            kind=FailureKind.INCOMPLETE_DECK,
            message=f"Found {total} cards. Game requires {required} total cards.",
        )
