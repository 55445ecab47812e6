"""
Deck module for the War card game.
Handles deck creation, shuffling, drawing from the top and returning to the bottom.
"""

from collections import deque
from typing import Iterable, Iterator, List, Optional, Tuple
from .card import Card, create_deck


class EmptyDeckError(IndexError):
    """Raised when a card is drawn from a deck that has none left."""


class Deck:
    """Ordered pile of cards: draws come off the top, winnings go to the bottom."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards = deque(cards or ())

    @classmethod
    def build_full(cls) -> 'Deck':
        """Build an unshuffled 52-card deck in canonical order."""
        return cls(create_deck())

    @classmethod
    def new_shuffled(cls, rng) -> 'Deck':
        """Build a full deck and shuffle it once with the given random source."""
        deck = cls.build_full()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng):
        """
        Shuffle in place with Fisher-Yates.

        Args:
            rng: Random source exposing randint(a, b) inclusive,
                such as random.Random(seed)
        """
        cards = list(self._cards)
        n = len(cards)
        for i in range(n - 1):
            r = rng.randint(i, n - 1)
            cards[i], cards[r] = cards[r], cards[i]
        self._cards = deque(cards)

    def draw_top(self) -> Card:
        """
        Remove and return the top card.

        Raises:
            EmptyDeckError: If the deck has no cards
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.popleft()

    def draw_many(self, count: int) -> List[Card]:
        """
        Draw several cards from the top, in draw order.

        Raises:
            ValueError: If count is negative
            EmptyDeckError: If fewer than count cards remain (nothing is drawn)
        """
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {count}")
        if len(self._cards) < count:
            raise EmptyDeckError(f"Not enough cards in deck. Need {count}, have {len(self._cards)}")
        return [self._cards.popleft() for _ in range(count)]

    def peek_top(self) -> Card:
        """Return the top card without removing it."""
        if not self._cards:
            raise EmptyDeckError("Cannot peek at an empty deck")
        return self._cards[0]

    def append_bottom(self, card: Card):
        """Add a card to the bottom of the deck."""
        self._cards.append(card)

    def extend_bottom(self, cards: Iterable[Card]):
        """Add cards to the bottom, first card ending up highest."""
        self._cards.extend(cards)

    def size(self) -> int:
        """Return number of cards in the deck."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self._cards) == 0

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the deck, top card first."""
        return tuple(self._cards)

    def __len__(self):
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __repr__(self):
        return f"Deck({len(self._cards)} cards)"
