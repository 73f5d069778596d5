"""
Deck code error hierarchy.

Every failure of encode or decode is one of these. Errors are raised at the
point of detection and propagate unchanged: there is no partial result and
no fallback value.
"""


class DeckCodeError(Exception):
    """
    Base exception for all deck code failures.

    Catch this to handle any encode/decode failure uniformly.
    """


class MalformedTokenError(DeckCodeError):
    """Raised when a token is not valid unpadded base-32 text."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        safe_token = repr(token[:50]) if len(token) > 50 else repr(token)
        super().__init__(f"Malformed deck code {safe_token}: {reason}")


class TruncatedInputError(DeckCodeError):
    """Raised when the byte buffer ends in the middle of a value."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"Deck code truncated at byte {offset}")


class VarintOverflowError(DeckCodeError):
    """Raised when a varint does not fit in 64 unsigned bits."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"Varint starting at byte {offset} overflows 64 bits")


class UnknownFormatError(DeckCodeError):
    """Raised in strict mode when the format nibble is not recognised."""

    def __init__(self, format_id: int) -> None:
        self.format_id = format_id
        super().__init__(f"Unknown deck code format: {format_id}")


class UnknownVersionError(DeckCodeError):
    """Raised when the version nibble is newer than any known version."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unknown deck code version: {version}")


class UnknownSetError(DeckCodeError):
    """Raised when a set number exceeds the highest known set."""

    def __init__(self, set_number: int) -> None:
        self.set_number = set_number
        super().__init__(f"Unknown set: {set_number}")


class UnknownFactionError(DeckCodeError):
    """Raised when a faction code (textual or numeric) is not registered."""

    def __init__(self, faction: str | int) -> None:
        self.faction = faction
        super().__init__(f"Unknown faction: {faction!r}")


class UnexpectedCardCountError(DeckCodeError):
    """Raised when an entry's count is outside the encodable buckets."""

    def __init__(self, item_code: str, count: int) -> None:
        self.item_code = item_code
        self.count = count
        super().__init__(f"Unexpected count {count} for '{item_code}': must be 1, 2 or 3")


class UnexpectedCardNumberError(DeckCodeError):
    """Raised when a decoded item number exceeds the highest known number."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Unexpected card number: {number}")


class ItemCodeLengthMismatchError(DeckCodeError):
    """Raised when a canonical item code is not exactly 7 characters."""

    def __init__(self, item_code: str, reason: str = "must be 7 characters") -> None:
        self.item_code = item_code
        self.reason = reason
        super().__init__(f"Invalid item code {item_code!r}: {reason}")


class MalformedItemCodeError(ItemCodeLengthMismatchError):
    """Raised when a 7-character item code has non-numeric set or number."""

    def __init__(self, item_code: str) -> None:
        super().__init__(item_code, "set and number must be digits")
