"""
deckcode: compact, versioned deck codes.

Turns a deck of (item, count) entries into a short base-32 code and back.
"""

from deckcode.codec.errors import (
    DeckCodeError,
    ItemCodeLengthMismatchError,
    MalformedItemCodeError,
    MalformedTokenError,
    TruncatedInputError,
    UnexpectedCardCountError,
    UnexpectedCardNumberError,
    UnknownFactionError,
    UnknownFormatError,
    UnknownSetError,
    UnknownVersionError,
    VarintOverflowError,
)
from deckcode.codec.transcoder import decode, encode
from deckcode.models import Deck, Entry, ItemCode

__all__ = [
    "Deck",
    "DeckCodeError",
    "Entry",
    "ItemCode",
    "ItemCodeLengthMismatchError",
    "MalformedItemCodeError",
    "MalformedTokenError",
    "TruncatedInputError",
    "UnexpectedCardCountError",
    "UnexpectedCardNumberError",
    "UnknownFactionError",
    "UnknownFormatError",
    "UnknownSetError",
    "UnknownVersionError",
    "VarintOverflowError",
    "decode",
    "encode",
]
