"""
Varint framing and the base-32 text envelope.

Integers are written little-endian, 7 payload bits per byte, with the high
bit set on every byte except the last. The finished byte buffer is rendered
as RFC 4648 base-32 with the trailing padding stripped.
"""

import base64
import binascii
import re

from deckcode.codec.errors import MalformedTokenError, TruncatedInputError, VarintOverflowError

# A uint64 never needs more than 10 varint bytes
MAX_VARINT_LEN = 10

_BASE32_PATTERN = re.compile(r"[A-Z2-7]*")


def write_varint(out: bytearray, value: int) -> None:
    """
    Append the varint encoding of value to out.

    Range limits belong to the caller; only negative values are refused.
    """
    if value < 0:
        raise ValueError(f"varint value must be non-negative, got {value}")

    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)


class ByteReader:
    """
    Forward-only cursor over a byte buffer.

    Attributes:
        data: The buffer being read
        offset: Index of the next unread byte
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self.data) - self.offset

    def read_byte(self) -> int:
        if self.offset >= len(self.data):
            raise TruncatedInputError(self.offset)
        byte = self.data[self.offset]
        self.offset += 1
        return byte

    def read_varint(self) -> int:
        """
        Read one varint and advance past it.

        Raises:
            TruncatedInputError: If the buffer ends before the last byte
            VarintOverflowError: If the value does not fit in 64 bits
        """
        start = self.offset
        value = 0
        shift = 0

        for index in range(MAX_VARINT_LEN):
            byte = self.read_byte()
            if byte < 0x80:
                # The tenth byte holds only the top bit of a uint64
                if index == MAX_VARINT_LEN - 1 and byte > 1:
                    raise VarintOverflowError(start)
                return value | byte << shift
            value |= (byte & 0x7F) << shift
            shift += 7

        raise VarintOverflowError(start)


def wrap_token(data: bytes) -> str:
    """Base-32 text for data, without padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def unwrap_token(token: str) -> bytes:
    """
    Bytes behind a base-32 token.

    Padding is optional, but when present it must fill the token out to a
    multiple of 8 characters. Only the uppercase RFC 4648 alphabet is
    accepted.

    Raises:
        MalformedTokenError: On characters outside the alphabet, partial
            padding or an impossible length
    """
    body = token.rstrip("=")
    padding = len(token) - len(body)
    if padding and padding != -len(body) % 8:
        raise MalformedTokenError(token, "padding does not complete a multiple of 8 characters")

    if not _BASE32_PATTERN.fullmatch(body):
        raise MalformedTokenError(token, "contains characters outside the base-32 alphabet")

    padded = body + "=" * (-len(body) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error as e:
        raise MalformedTokenError(token, str(e)) from e
