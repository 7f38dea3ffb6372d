"""Tests for Hand."""

import random

from war_game.models.card import Card, Rank, Suit
from war_game.models.hand import Hand


def spades(*ranks: Rank) -> list[Card]:
    return [Card(suit=Suit.SPADES, rank=r) for r in ranks]


class TestHand:
    """Tests for Hand class."""

    def test_empty_hand(self):
        """Test empty hand."""
        hand = Hand()
        assert hand.is_empty()
        assert hand.size() == 0
        assert len(hand) == 0

    def test_draw_from_front(self):
        """Test that draw returns cards front first."""
        hand = Hand(spades(Rank.TWO, Rank.THREE))

        assert hand.draw() == Card(suit=Suit.SPADES, rank=Rank.TWO)
        assert hand.draw() == Card(suit=Suit.SPADES, rank=Rank.THREE)

    def test_draw_empty_returns_none(self):
        """Test that an empty hand signals with None."""
        hand = Hand(spades(Rank.ACE))
        hand.draw()

        assert hand.draw() is None
        assert hand.draw() is None
        assert hand.is_empty()

    def test_collect_appends_to_back(self):
        """Test that collected cards go behind the existing ones."""
        hand = Hand(spades(Rank.TWO), rng=random.Random(1))
        pile = spades(Rank.FIVE, Rank.SIX, Rank.SEVEN)

        hand.collect(pile)

        cards = hand.to_list()
        assert cards[0] == Card(suit=Suit.SPADES, rank=Rank.TWO)
        assert set(cards[1:]) == set(pile)
        assert hand.size() == 4

    def test_collect_shuffles_with_rng(self):
        """Test that the pile is shuffled with the hand's random source."""
        pile = [Card(suit=s, rank=r) for s in Suit for r in (Rank.TWO, Rank.NINE, Rank.KING)]
        expected = list(pile)
        random.Random(42).shuffle(expected)

        hand = Hand(rng=random.Random(42))
        hand.collect(pile)

        assert hand.to_list() == expected

    def test_collect_does_not_modify_pile(self):
        """Test that the caller's list is left untouched."""
        pile = spades(Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
        original = list(pile)

        Hand(rng=random.Random(0)).collect(pile)

        assert pile == original

    def test_contains(self):
        """Test membership."""
        hand = Hand(spades(Rank.ACE))
        assert Card(suit=Suit.SPADES, rank=Rank.ACE) in hand
        assert Card(suit=Suit.HEARTS, rank=Rank.ACE) not in hand

    def test_to_list_is_copy(self):
        """Test that to_list does not expose the internal sequence."""
        hand = Hand(spades(Rank.ACE, Rank.KING))
        cards = hand.to_list()
        cards.clear()

        assert hand.size() == 2

    def test_str_sorted_ace_high(self):
        """Test pretty printing sorts by War strength."""
        hand = Hand(
            [
                Card(suit=Suit.SPADES, rank=Rank.ACE),
                Card(suit=Suit.HEARTS, rank=Rank.TWO),
                Card(suit=Suit.CLUBS, rank=Rank.KING),
            ]
        )

        assert str(hand) == "2 of Hearts\nKing of Clubs\nAce of Spades"
