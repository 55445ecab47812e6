from typing import Callable, List

import pytest

from war_game.card import Card, Rank, Suit

RANK_LABELS = {str(rank): rank for rank in Rank}
SUIT_LABELS = {"H": Suit.HEARTS, "D": Suit.DIAMONDS, "S": Suit.SPADES, "C": Suit.CLUBS}


def parse_card(label: str) -> Card:
    """Parse a short label such as 'KH', '10S' or '2D'."""
    return Card(RANK_LABELS[label[:-1]], SUIT_LABELS[label[-1]])


@pytest.fixture
def make_cards() -> Callable[[str], List[Card]]:
    """Factory turning 'KH 4H 2S' into a list of cards, top card first."""

    def _factory(labels: str) -> List[Card]:
        return [parse_card(label) for label in labels.split()]

    return _factory
