"""Formatters for game log output."""

from typing import Iterable

from war_game.models.card import Card, Rank, Suit
from war_game.models.hand import Hand

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format, or None for a failed draw.

    Returns:
        Formatted string (e.g., "SA" for Ace of Spades, "-" for no card).
    """
    if card is None:
        return "-"
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(hand1: Hand, hand2: Hand) -> dict[str, str]:
    """Format both players' hands to dict keyed by player number."""
    return {"1": format_cards(hand1.to_list()), "2": format_cards(hand2.to_list())}
