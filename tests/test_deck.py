"""Tests for Deck."""

import random
from collections import Counter

import pytest

from war_game.models.card import Suit, create_full_deck
from war_game.models.deck import Deck, InvalidStateError


class TestDeck:
    """Tests for Deck class."""

    def test_new_deck_complete(self):
        """Test that a new deck holds the 52 canonical cards."""
        deck = Deck()

        assert len(deck) == 52
        assert set(deck.cards) == set(create_full_deck())

    def test_new_deck_suits(self):
        """Test that each suit appears exactly 13 times."""
        counts = Counter(c.suit for c in Deck().cards)
        assert counts == {suit: 13 for suit in Suit}

    def test_shuffle_returns_self(self):
        """Test that shuffle can be chained."""
        deck = Deck(random.Random(0))
        assert deck.shuffle() is deck

    def test_shuffle_keeps_cards(self):
        """Test that shuffle only reorders."""
        deck = Deck(random.Random(1)).shuffle()

        assert len(deck) == 52
        assert set(deck.cards) == set(create_full_deck())
        assert list(deck.cards) != create_full_deck()

    def test_shuffle_seeded(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck(random.Random(99)).shuffle()
        deck2 = Deck(random.Random(99)).shuffle()

        assert deck1.cards == deck2.cards


class TestDeal:
    """Tests for Deck.deal."""

    @pytest.mark.parametrize("seed", range(10))
    def test_deal_conserves_cards(self, seed):
        """Test that dealing yields two disjoint halves of 26."""
        hand1, hand2 = Deck(random.Random(seed)).shuffle().deal()

        cards1, cards2 = set(hand1.to_list()), set(hand2.to_list())
        assert hand1.size() == 26
        assert hand2.size() == 26
        assert cards1.isdisjoint(cards2)
        assert cards1 | cards2 == set(create_full_deck())

    def test_deal_preserves_order(self):
        """Test that halves keep the deck order."""
        deck = Deck(random.Random(5)).shuffle()
        order = list(deck.cards)

        hand1, hand2 = deck.deal()

        assert hand1.to_list() == order[:26]
        assert hand2.to_list() == order[26:]

    def test_deal_consumes_deck(self):
        """Test that a dealt deck is empty and cannot be dealt again."""
        deck = Deck()
        deck.deal()

        assert len(deck) == 0
        with pytest.raises(InvalidStateError):
            deck.deal()
