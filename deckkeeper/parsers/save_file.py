"""
Reader for save files.

Supports:
- JSON saves (.json)
- TOML saves (.toml)

The format is chosen from the file extension. Any other extension is
rejected before the file is read; an unknown format never decodes to an
empty document.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from deckkeeper.models.failure import SaveDecodeError, UnsupportedSaveFormatError
from deckkeeper.models.save_document import SaveDocument

logger = logging.getLogger(__name__)

SaveFormat = Literal["json", "toml"]

EXTENSION_FORMATS: dict[str, SaveFormat] = {
    ".json": "json",
    ".toml": "toml",
}


def detect_format(path: str | Path) -> SaveFormat:
    """
    Pick the save format from a file's extension.

    Raises:
        UnsupportedSaveFormatError: If the extension is not .json or .toml
    """
    path = Path(path)
    extension = path.suffix.lower()
    fmt = EXTENSION_FORMATS.get(extension)
    if fmt is None:
        raise UnsupportedSaveFormatError(str(path), path.suffix)
    return fmt


def decode_save(contents: str | bytes, fmt: SaveFormat) -> SaveDocument:
    """
    Decode raw save contents into a SaveDocument.

    Args:
        contents: File contents
        fmt: "json" or "toml"

    Returns:
        The decoded SaveDocument. Only value types are checked here.

    Raises:
        SaveDecodeError: If the contents are malformed or mistyped
    """
    if isinstance(contents, bytes):
        try:
            contents = contents.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SaveDecodeError("Save file is not valid UTF-8.", detail=str(e)) from e

    raw: Any
    if fmt == "json":
        try:
            raw = json.loads(contents)
        except json.JSONDecodeError as e:
            raise SaveDecodeError("Save file is not valid JSON.", detail=str(e)) from e
    elif fmt == "toml":
        try:
            raw = tomllib.loads(contents)
        except tomllib.TOMLDecodeError as e:
            raise SaveDecodeError("Save file is not valid TOML.", detail=str(e)) from e
    else:
        raise SaveDecodeError(f"Unknown save format: {fmt}")

    if not isinstance(raw, dict):
        raise SaveDecodeError(
            "Save file must contain a table of sections.",
            detail=f"Top-level value is {type(raw).__name__}",
        )

    try:
        return SaveDocument.model_validate(raw)
    except ValidationError as e:
        raise SaveDecodeError("Save file has invalid values.", detail=str(e)) from e


def load_save_file(path: str | Path) -> SaveDocument:
    """
    Read and decode a save file.

    Args:
        path: Path to a .json or .toml save

    Returns:
        The decoded SaveDocument

    Raises:
        UnsupportedSaveFormatError: If the extension is not recognized
        SaveDecodeError: If the contents cannot be decoded
        OSError: If the file cannot be read
    """
    path = Path(path)
    fmt = detect_format(path)
    contents = path.read_bytes()
    logger.debug("Read %d bytes of %s from %s", len(contents), fmt, path)
    return decode_save(contents, fmt)
