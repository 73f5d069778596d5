"""
Parser for plain deck list text.

Deck list format:
    <count>:<item code>

Example:
    3:01FR040
    2:02BW012

Blank lines and lines starting with '#' are skipped. Counts are not range
checked here; the encoder decides what it can express.
"""

import re

from deckcode.codec.errors import ItemCodeLengthMismatchError
from deckcode.models.item_code import Deck, Entry, ItemCode

# Pattern: "3:01FR040"
# Groups: (count, item_code)
DECK_LIST_PATTERN = re.compile(r"^(\d+):(\S+)$")

COMMENT_PREFIX = "#"


class DeckListParseError(Exception):
    """Raised when a deck list line cannot be read as an entry."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


def parse_deck_list(text: str) -> Deck:
    """
    Parse deck list text into entries.

    Args:
        text: Deck list, one entry per line

    Returns:
        Entries in line order. Empty list if input is empty/whitespace.

    Raises:
        DeckListParseError: On the first line that is not an entry
    """
    deck: Deck = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        match = DECK_LIST_PATTERN.match(line)
        if not match:
            raise DeckListParseError(line_number, line, "expected <count>:<item code>")

        count, code = match.groups()
        try:
            item = ItemCode.parse(code)
        except ItemCodeLengthMismatchError as e:
            raise DeckListParseError(line_number, line, e.reason) from e

        deck.append(Entry(item=item, count=int(count)))

    return deck


def format_deck_list(deck: Deck) -> str:
    """Deck list text for entries, one line each in the given order."""
    return "\n".join(f"{entry.count}:{entry.item}" for entry in deck)
