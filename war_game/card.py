"""
Card module for the War card game.
Defines Card, Suit, Rank and the single rank comparison used in battles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """Card suits. Declaration order is the canonical deck order."""
    HEARTS = "♥"
    DIAMONDS = "♦"
    SPADES = "♠"
    CLUBS = "♣"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks with proper ordering (2 lowest, Ace highest)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self):
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


class Outcome(Enum):
    """Result of a battle, seen from the first card's side."""
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.rank.name}, {self.suit.name})"

    def battle(self, opponent: 'Card') -> Outcome:
        """Compare against an opponent card. Suit never matters."""
        return compare(self, opponent)


def compare(a: Card, b: Card) -> Outcome:
    """
    Compare two cards by rank only.

    Args:
        a: Card whose perspective the outcome is reported from
        b: Card it is compared against

    Returns:
        Outcome.WIN if a outranks b, Outcome.LOSE if b outranks a,
        Outcome.TIE on equal ranks regardless of suit
    """
    if a.rank == b.rank:
        return Outcome.TIE
    return Outcome.WIN if a.rank.value > b.rank.value else Outcome.LOSE


def create_deck() -> List[Card]:
    """Create a standard 52-card deck, rank-major then suit-minor."""
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank, suit))
    return deck
