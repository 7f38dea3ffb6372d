"""Game models."""

from .card import Card, Ordering, Rank, Suit, create_full_deck
from .deck import Deck, InvalidStateError
from .game_state import GameState, GameStatus, TurnResult
from .hand import Hand

__all__ = [
    "Card",
    "Ordering",
    "Rank",
    "Suit",
    "create_full_deck",
    "Deck",
    "InvalidStateError",
    "Hand",
    "GameState",
    "GameStatus",
    "TurnResult",
]
