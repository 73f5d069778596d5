"""Tests for item and entry value types."""

import dataclasses

import pytest

from deckcode.codec.errors import ItemCodeLengthMismatchError, MalformedItemCodeError
from deckcode.models import Entry, ItemCode


class TestItemCode:
    def test_canonical_string(self) -> None:
        assert str(ItemCode(set=1, faction="FR", number=40)) == "01FR040"

    def test_canonical_string_pads_zeroes(self) -> None:
        assert str(ItemCode(set=0, faction="DE", number=0)) == "00DE000"

    def test_parse(self) -> None:
        code = ItemCode.parse("09RU999")

        assert code == ItemCode(set=9, faction="RU", number=999)
        assert code.group_key == (9, "RU")

    def test_parse_does_not_check_registry(self) -> None:
        assert ItemCode.parse("01ZZ001").faction == "ZZ"

    @pytest.mark.parametrize("text", ["", "01FR04", "01FR0400", "1FR040"])
    def test_parse_wrong_length(self, text: str) -> None:
        with pytest.raises(ItemCodeLengthMismatchError) as exc_info:
            ItemCode.parse(text)

        assert exc_info.value.item_code == text

    @pytest.mark.parametrize("text", ["0AFR040", "01FR04X", "-1FR040", "01FR+40"])
    def test_parse_non_digits(self, text: str) -> None:
        with pytest.raises(MalformedItemCodeError):
            ItemCode.parse(text)

    def test_malformed_is_a_length_mismatch(self) -> None:
        """Callers catching the length error also catch malformed digits."""
        assert issubclass(MalformedItemCodeError, ItemCodeLengthMismatchError)

    def test_frozen(self) -> None:
        code = ItemCode(set=1, faction="FR", number=40)

        with pytest.raises(dataclasses.FrozenInstanceError):
            code.number = 41  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({ItemCode.parse("01FR040"), ItemCode(1, "FR", 40)}) == 1


class TestEntry:
    def test_of(self) -> None:
        entry = Entry.of("01FR040", 3)

        assert entry.item == ItemCode(set=1, faction="FR", number=40)
        assert entry.count == 3

    def test_of_invalid_code(self) -> None:
        with pytest.raises(ItemCodeLengthMismatchError):
            Entry.of("FR040", 3)
