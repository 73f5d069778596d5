"""
Faction registry and format constants.

The faction table is fixed data shipped with the codec. It maps each
two-letter faction code to the numeric code written on the wire and to the
first format version able to express it.

INVARIANTS:
- The table is built once at import and never mutated
- Wire codes 8 and 11 are unassigned and must never resolve
"""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from deckcode.codec.errors import UnknownFactionError

# =============================================================================
# FORMAT CONSTANTS
# =============================================================================

FORMAT = 1
INITIAL_VERSION = 1
MAX_KNOWN_VERSION = 5

MAX_KNOWN_SET = 9
MAX_CARD_NUMBER = 999

ITEM_CODE_LENGTH = 7


@dataclass(frozen=True, slots=True)
class FactionInfo:
    """
    One row of the faction table.

    Attributes:
        code: Two-letter faction code (e.g., "DE", "FR")
        wire_id: Numeric code written into deck codes
        min_version: Lowest format version that knows this faction
    """

    code: str
    wire_id: int
    min_version: int


_FACTIONS: tuple[FactionInfo, ...] = (
    FactionInfo("DE", 0, 1),
    FactionInfo("FR", 1, 1),
    FactionInfo("IO", 2, 1),
    FactionInfo("NX", 3, 1),
    FactionInfo("PZ", 4, 1),
    FactionInfo("SI", 5, 1),
    FactionInfo("BW", 6, 2),
    FactionInfo("SH", 7, 3),
    FactionInfo("MT", 9, 2),
    FactionInfo("BC", 10, 4),
    FactionInfo("RU", 12, 5),
)

_BY_CODE = MappingProxyType({info.code: info for info in _FACTIONS})
_BY_WIRE_ID = MappingProxyType({info.wire_id: info for info in _FACTIONS})


def text_to_numeric(code: str) -> int:
    """Wire code for a two-letter faction code."""
    try:
        return _BY_CODE[code].wire_id
    except KeyError:
        raise UnknownFactionError(code) from None


def numeric_to_text(wire_id: int) -> str:
    """Two-letter faction code for a wire code."""
    try:
        return _BY_WIRE_ID[wire_id].code
    except KeyError:
        raise UnknownFactionError(wire_id) from None


def min_version(code: str) -> int:
    """Lowest format version that can express the given faction."""
    try:
        return _BY_CODE[code].min_version
    except KeyError:
        raise UnknownFactionError(code) from None


def required_version(codes: Iterable[str]) -> int:
    """
    Lowest format version that can express every faction given.

    Args:
        codes: Two-letter faction codes (duplicates allowed)

    Returns:
        INITIAL_VERSION for no factions, otherwise the highest min_version

    Raises:
        UnknownFactionError: If any code is not registered
    """
    return max((min_version(code) for code in codes), default=INITIAL_VERSION)


def known_factions() -> tuple[str, ...]:
    """All registered faction codes, in wire-code order."""
    return tuple(info.code for info in _FACTIONS)
