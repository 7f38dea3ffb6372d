"""Player hand model."""

import random
from collections import deque
from typing import Iterable, Iterator

from .card import Card


class Hand:
    """Ordered cards owned by one player.

    The front of the hand is the next card to be played. Won piles are
    shuffled before they go to the back, which keeps two nearly identical
    hands from replaying the same wars forever.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize hand.

        Args:
            cards: Initial cards, front first.
            rng: Random source used to shuffle collected piles.
        """
        self._cards: deque[Card] = deque(cards or ())
        self._rng = rng or random.Random()

    def draw(self) -> Card | None:
        """Remove and return the front card (None if the hand is empty)."""
        if not self._cards:
            return None
        return self._cards.popleft()

    def collect(self, cards: Iterable[Card]) -> None:
        """Shuffle a won pile and put it at the back of the hand."""
        pile = list(cards)
        self._rng.shuffle(pile)
        self._cards.extend(pile)

    def size(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get cards as a list, front first."""
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return "\n".join(
            c.describe() for c in sorted(self._cards, key=lambda c: (c.strength(), c.suit))
        )

    def __repr__(self) -> str:
        return f"Hand({list(self._cards)!r})"
