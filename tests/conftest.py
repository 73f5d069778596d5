from pathlib import Path

import pytest

from deckcode.models import Deck
from deckcode.parsers import parse_deck_list

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_deck_list() -> str:
    """Sample deck list text covering every format version."""
    return (FIXTURES_DIR / "sample_deck.txt").read_text()


@pytest.fixture
def sample_deck(sample_deck_list: str) -> Deck:
    """The sample deck list, parsed."""
    return parse_deck_list(sample_deck_list)
