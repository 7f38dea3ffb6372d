"""Card model and War ordering."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (canonical deck generation order)."""

    DIAMONDS = 0
    CLUBS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank.

    Value is the printed number of the card, so the Ace is 1.
    Strength order in War: 2 < 3 < ... < K < A
    """

    ACE = 1
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


class Ordering(IntEnum):
    """Result of comparing two cards."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# Face cards get a name, everything else prints its number
RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

SUIT_NAMES = {
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}

ACE_STRENGTH = 14


class Card(BaseModel, frozen=True):
    """Single playing card."""

    suit: Suit
    rank: Rank

    def strength(self) -> int:
        """Get card strength for comparison.

        Returns:
            Strength value. Higher is stronger, the Ace counts as 14.
        """
        if self.rank == Rank.ACE:
            return ACE_STRENGTH
        return int(self.rank)

    def compare(self, other: "Card") -> Ordering:
        """Compare two cards by War ordering.

        The Ace beats every other rank and ties with another Ace.
        Suits never break a tie.

        Args:
            other: Card to compare against.

        Returns:
            Ordering of this card relative to other.
        """
        mine, theirs = self.strength(), other.strength()
        if mine > theirs:
            return Ordering.GREATER
        if mine < theirs:
            return Ordering.LESS
        return Ordering.EQUAL

    def describe(self) -> str:
        """Human readable label, e.g. "Jack of Spades"."""
        rank_name = RANK_NAMES.get(self.rank, str(int(self.rank)))
        return f"{rank_name} of {SUIT_NAMES[self.suit]}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"


def create_full_deck() -> list[Card]:
    """Create the 52 canonical cards, suit-major and rank-minor."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
