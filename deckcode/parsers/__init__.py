from deckcode.parsers.deck_list import (
    DeckListParseError,
    format_deck_list,
    parse_deck_list,
)

__all__ = [
    "DeckListParseError",
    "format_deck_list",
    "parse_deck_list",
]
