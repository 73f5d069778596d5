"""
Deck code transcoder.

Wire layout before base-32 wrapping:

    [format << 4 | version]
    [count=3 section] [count=2 section] [count=1 section]

Each section is varint(group count) followed by, per group:

    varint(items in group) varint(set) varint(faction wire code) varint(number)*

Encode picks the lowest version that knows every faction in the deck.
Decode fails on the first inconsistency; nothing is returned partially.
"""

import logging
from collections.abc import Iterable

from deckcode.codec.errors import (
    UnexpectedCardNumberError,
    UnknownFormatError,
    UnknownSetError,
    UnknownVersionError,
)
from deckcode.codec.grouping import COUNT_BUCKETS, ItemGroup, build_groups, partition_by_count
from deckcode.codec.registry import (
    FORMAT,
    MAX_CARD_NUMBER,
    MAX_KNOWN_SET,
    MAX_KNOWN_VERSION,
    numeric_to_text,
    required_version,
    text_to_numeric,
)
from deckcode.codec.varint import ByteReader, unwrap_token, wrap_token, write_varint
from deckcode.config import settings
from deckcode.models.item_code import Deck, Entry, ItemCode

logger = logging.getLogger(__name__)


def encode(deck: Iterable[Entry]) -> str:
    """
    Encode a deck as a deck code.

    Input order does not matter: the same entries always give the same code.

    Args:
        deck: Entries to encode, counts 1-3

    Returns:
        Unpadded base-32 deck code

    Raises:
        UnexpectedCardCountError: If a count is not 1, 2 or 3
        UnknownFactionError: If a faction is not registered
        UnknownSetError: If a set exceeds the highest known set
        ItemCodeLengthMismatchError: If an item does not render as SSFFNNN
    """
    entries = list(deck)
    buckets = partition_by_count(entries)
    version = required_version(entry.item.faction for entry in entries)

    out = bytearray([FORMAT << 4 | version])
    for count in COUNT_BUCKETS:
        _write_groups(out, build_groups(buckets[count]))

    logger.debug(
        "Encoded deck: entries=%d, version=%d, bytes=%d",
        len(entries),
        version,
        len(out),
    )
    return wrap_token(bytes(out))


def _write_groups(out: bytearray, groups: list[ItemGroup]) -> None:
    write_varint(out, len(groups))

    for group in groups:
        if group.set > MAX_KNOWN_SET:
            raise UnknownSetError(group.set)
        faction_id = text_to_numeric(group.faction)

        write_varint(out, len(group))
        write_varint(out, group.set)
        write_varint(out, faction_id)
        for number in group.numbers:
            write_varint(out, number)


def decode(token: str, *, strict_format: bool | None = None) -> Deck:
    """
    Decode a deck code.

    Entries come back bucket by bucket (threes, twos, ones) in wire order,
    not in the order the deck was originally given to encode.

    Args:
        token: Base-32 deck code, padding optional
        strict_format: Reject unknown format nibbles. None uses settings.

    Returns:
        Decoded entries

    Raises:
        MalformedTokenError: If the token is not valid base-32
        TruncatedInputError: If the data ends early
        VarintOverflowError: If a varint exceeds 64 bits
        UnknownFormatError: If strict and the format nibble is unknown
        UnknownVersionError: If the version is newer than any known
        UnknownSetError: If a set exceeds the highest known set
        UnknownFactionError: If a faction wire code is not registered
        UnexpectedCardNumberError: If an item number exceeds the maximum
    """
    if strict_format is None:
        strict_format = settings.strict_format

    reader = ByteReader(unwrap_token(token))

    header = reader.read_byte()
    format_id = header >> 4
    version = header & 0x0F

    if format_id != FORMAT:
        if strict_format:
            raise UnknownFormatError(format_id)
        logger.warning("Decoding deck code with unrecognised format %d", format_id)

    if version > MAX_KNOWN_VERSION:
        raise UnknownVersionError(version)

    deck: Deck = []
    for count in COUNT_BUCKETS:
        group_count = reader.read_varint()
        for _ in range(group_count):
            deck.extend(Entry(item=item, count=count) for item in _read_group(reader))

    if reader.remaining:
        logger.debug("Ignoring %d trailing bytes in deck code", reader.remaining)

    logger.debug(
        "Decoded deck: entries=%d, version=%d, bytes=%d",
        len(deck),
        version,
        len(reader.data),
    )
    return deck


def _read_group(reader: ByteReader) -> list[ItemCode]:
    size = reader.read_varint()

    set_number = reader.read_varint()
    if set_number > MAX_KNOWN_SET:
        raise UnknownSetError(set_number)

    faction = numeric_to_text(reader.read_varint())

    items: list[ItemCode] = []
    for _ in range(size):
        number = reader.read_varint()
        if number > MAX_CARD_NUMBER:
            raise UnexpectedCardNumberError(number)
        items.append(ItemCode(set=set_number, faction=faction, number=number))

    return items
