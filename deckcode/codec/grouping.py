"""
Grouping pipeline for one count bucket.

Entries are split by count, each bucket is sorted by canonical item code,
consecutive items sharing (set, faction) are coalesced into a group, and
groups are then ordered by ascending size. The final sort is stable, so
groups of equal size keep their code order.

Every step is a pure function over sequences.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby

from deckcode.codec.errors import UnexpectedCardCountError
from deckcode.models.item_code import Entry, ItemCode

# Wire order of the count buckets
COUNT_BUCKETS: tuple[int, ...] = (3, 2, 1)


@dataclass(frozen=True, slots=True)
class ItemGroup:
    """
    Items of one bucket sharing a set and faction.

    Attributes:
        set: Shared set number
        faction: Shared two-letter faction code
        numbers: Item numbers in canonical code order
    """

    set: int
    faction: str
    numbers: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.numbers)


def canonical_code(item: ItemCode) -> str:
    """
    Canonical string for an item, checked to be well formed.

    Raises:
        ItemCodeLengthMismatchError: If the rendered code is not SSFFNNN
    """
    code = str(item)
    ItemCode.parse(code)
    return code


def partition_by_count(deck: Iterable[Entry]) -> dict[int, list[ItemCode]]:
    """
    Split entries into count buckets.

    Returns:
        Mapping of count (3, 2, 1) to the items with that count, in input order

    Raises:
        UnexpectedCardCountError: If any count is not the int 1, 2 or 3
    """
    buckets: dict[int, list[ItemCode]] = {count: [] for count in COUNT_BUCKETS}

    for entry in deck:
        # Only plain ints are counts; True and 3.0 would hash onto buckets
        bucket = buckets.get(entry.count) if type(entry.count) is int else None
        if bucket is None:
            raise UnexpectedCardCountError(str(entry.item), entry.count)
        bucket.append(entry.item)

    return buckets


def sort_by_code(items: Iterable[ItemCode]) -> list[ItemCode]:
    """Items in ascending canonical code order."""
    return sorted(items, key=canonical_code)


def coalesce_groups(sorted_items: Sequence[ItemCode]) -> list[ItemGroup]:
    """
    Coalesce runs of items sharing (set, faction) into groups.

    Args:
        sorted_items: Items already in canonical code order

    Returns:
        One group per run, in input order
    """
    return [
        ItemGroup(set=set_number, faction=faction, numbers=tuple(item.number for item in run))
        for (set_number, faction), run in groupby(sorted_items, key=lambda item: item.group_key)
    ]


def sort_groups_by_size(groups: Iterable[ItemGroup]) -> list[ItemGroup]:
    """Groups in ascending size; equal sizes keep their relative order."""
    return sorted(groups, key=len)


def build_groups(items: Iterable[ItemCode]) -> list[ItemGroup]:
    """Full pipeline for one bucket: sort, coalesce, order by size."""
    return sort_groups_by_size(coalesce_groups(sort_by_code(items)))
