from deckkeeper.parsers.card_code import format_card, parse_card
from deckkeeper.parsers.save_file import decode_save, detect_format, load_save_file

__all__ = [
    "decode_save",
    "detect_format",
    "format_card",
    "load_save_file",
    "parse_card",
]
