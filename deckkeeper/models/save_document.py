"""
SaveDocument: The Decoded, Format-Agnostic Save.

A SaveDocument is what a JSON or TOML save file decodes to. It checks
only value types; whether the cards form a valid deal is decided by the
importer, never here.

Keys are written capitalized (Stock, Limit, Stacks, ...) and are also
accepted in lowercase.
"""

from pydantic import BaseModel, ConfigDict, Field

# Strict: a string or bool where a number belongs is a decode failure
_SAVE_CONFIG = ConfigDict(alias_generator=str.capitalize, populate_by_name=True, strict=True)


class StockData(BaseModel):
    """Draw pile: trusted scalars plus the card codes in pile order."""

    model_config = _SAVE_CONFIG

    limit: int = 0
    loop: int = 0
    pos: int = 0
    stack: list[str] = Field(default_factory=list)


class TableauData(BaseModel):
    """Tableau stacks with a parallel list of facedown counts."""

    model_config = _SAVE_CONFIG

    stacks: list[list[str]] = Field(default_factory=list)
    facedown: list[int] = Field(default_factory=list)


class SaveDocument(BaseModel):
    """A complete saved game as read from disk."""

    model_config = _SAVE_CONFIG

    stock: StockData = Field(default_factory=StockData)
    tableau: TableauData = Field(default_factory=TableauData)
    foundations: dict[str, list[str]] = Field(default_factory=dict)
