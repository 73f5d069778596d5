from deckcode.models.item_code import Deck, Entry, ItemCode

__all__ = [
    "Deck",
    "Entry",
    "ItemCode",
]
