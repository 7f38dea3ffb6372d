"""Deck model."""

import logging
import random

from .card import Card, create_full_deck
from .hand import Hand

logger = logging.getLogger(__name__)

DECK_SIZE = 52
HAND_SIZE = DECK_SIZE // 2


class InvalidStateError(RuntimeError):
    """Raised when a deck is used in a state that does not allow it."""


class Deck:
    """Standard 52-card deck.

    A deck is dealt once. After deal() its cards belong to the two hands
    and the deck is empty.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize deck.

        Args:
            rng: Random source for shuffling. Also handed to dealt hands.
        """
        self._rng = rng or random.Random()
        self._cards: list[Card] = create_full_deck()

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the current card order."""
        return tuple(self._cards)

    def shuffle(self) -> "Deck":
        """Shuffle the cards in place.

        Returns:
            The deck itself, for chaining.
        """
        self._rng.shuffle(self._cards)
        return self

    def deal(self) -> tuple[Hand, Hand]:
        """Split the deck into two halves.

        Returns:
            (hand1, hand2): first and last 26 cards, order preserved.

        Raises:
            InvalidStateError: If the deck does not hold exactly 52 cards.
        """
        if len(self._cards) != DECK_SIZE:
            raise InvalidStateError(
                f"Cannot deal a deck of {len(self._cards)} cards (expected {DECK_SIZE})"
            )

        hand1 = Hand(self._cards[:HAND_SIZE], rng=self._rng)
        hand2 = Hand(self._cards[HAND_SIZE:], rng=self._rng)
        self._cards = []
        logger.debug(f"Dealt {HAND_SIZE} cards to each hand")
        return hand1, hand2

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
