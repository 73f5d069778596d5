"""
Item and entry value types.

An item is identified by (set, faction, number) and has a canonical
7-character text form, SSFFNNN: zero-padded set, two-letter faction code,
zero-padded number. For example 01FR040.

These are plain values. Range and registry checks happen in the codec, so an
ItemCode can hold a faction or number the codec will refuse.
"""

import re
from dataclasses import dataclass

from deckcode.codec.errors import ItemCodeLengthMismatchError, MalformedItemCodeError
from deckcode.codec.registry import ITEM_CODE_LENGTH

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class ItemCode:
    """
    Structured identifier for one collectible item.

    Attributes:
        set: Set number (0-9 in the current format)
        faction: Two-letter faction code (e.g., "DE", "FR")
        number: Item number within the set and faction (0-999)
    """

    set: int
    faction: str
    number: int

    def __str__(self) -> str:
        return f"{self.set:02d}{self.faction}{self.number:03d}"

    @property
    def group_key(self) -> tuple[int, str]:
        """The (set, faction) pair shared by items encoded together."""
        return (self.set, self.faction)

    @classmethod
    def parse(cls, text: str) -> "ItemCode":
        """
        Parse a canonical SSFFNNN string.

        Raises:
            ItemCodeLengthMismatchError: If text is not 7 characters
            MalformedItemCodeError: If set or number are not digits
        """
        if len(text) != ITEM_CODE_LENGTH:
            raise ItemCodeLengthMismatchError(text)

        set_part, faction, number_part = text[:2], text[2:4], text[4:]
        if not (_DIGITS.fullmatch(set_part) and _DIGITS.fullmatch(number_part)):
            raise MalformedItemCodeError(text)

        return cls(set=int(set_part), faction=faction, number=int(number_part))


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One line of a deck: an item and how many copies.

    Attributes:
        item: The item identifier
        count: Number of copies (1, 2 or 3 to be encodable)
    """

    item: ItemCode
    count: int

    @classmethod
    def of(cls, code: str, count: int) -> "Entry":
        """Entry from a canonical item code string."""
        return cls(item=ItemCode.parse(code), count=count)


# Unordered multiset of entries. Decode returns a list in wire order.
Deck = list[Entry]
