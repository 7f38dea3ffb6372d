"""Game engine for War."""

from __future__ import annotations

import logging
import random

from war_game.logging import GameLogger
from war_game.models.card import Card, Ordering
from war_game.models.deck import Deck, InvalidStateError
from war_game.models.game_state import GameState, GameStatus, TurnResult
from war_game.models.hand import Hand

from .announcer import Announcer

logger = logging.getLogger(__name__)

# Cards each player adds to the pile when a war starts
WAR_CARDS = 3


class WarGame:
    """A single game of War between two players."""

    def __init__(
        self,
        announcer: Announcer,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
        game_number: int = 1,
        hands: tuple[Hand, Hand] | None = None,
    ):
        """Initialize game.

        A fresh deck is shuffled and dealt unless hands are given.

        Args:
            announcer: Receives every game event
            rng: Random source for the deck and the hands
            game_logger: GameLogger instance for detailed logging
            game_number: Number of this game within a session
            hands: Prepared (hand1, hand2) to play with instead of dealing
        """
        self.announcer = announcer
        self.rng = rng or random.Random()
        self.game_logger = game_logger

        if hands is None:
            hands = Deck(self.rng).shuffle().deal()
        self.hand1, self.hand2 = hands

        self.state = GameState(game_number=game_number)
        self._pile: list[Card] = []
        self._total_cards = self.hand1.size() + self.hand2.size()

    @classmethod
    def from_hands(
        cls,
        hand1: Hand,
        hand2: Hand,
        announcer: Announcer,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ) -> WarGame:
        """Create a game from prepared hands instead of a shuffled deck."""
        return cls(announcer, rng=rng, game_logger=game_logger, hands=(hand1, hand2))

    @property
    def status(self) -> GameStatus:
        """Current game status."""
        return self.state.status

    @property
    def pile(self) -> tuple[Card, ...]:
        """Cards on the table during a turn (empty between turns)."""
        return tuple(self._pile)

    @property
    def total_cards(self) -> int:
        """Number of cards in the game, constant for its whole life."""
        return self._total_cards

    def card_count(self) -> int:
        """Get number of cards currently held in both hands."""
        return self.hand1.size() + self.hand2.size()

    def run(self) -> GameStatus:
        """Play turns until one hand is empty.

        Returns:
            Terminal game status
        """
        logger.info(f"Starting game {self.state.game_number}")
        if self.game_logger:
            self.game_logger.log_game_start(self.state.game_number, self.hand1, self.hand2)

        while not self._check_game_over():
            self.play_turn()

        logger.info(
            f"Game {self.state.game_number} finished: {self.state.status.name} "
            f"after {self.state.turn_number} turns ({self.state.war_count} wars)"
        )
        if self.game_logger:
            self.game_logger.log_game_end(self.state)

        return self.state.status

    def play_turn(self) -> TurnResult:
        """Play one turn, including any wars it triggers.

        Returns:
            TurnResult describing who won which cards

        Raises:
            InvalidStateError: If the game is already over.
        """
        if self.state.status.is_terminal:
            raise InvalidStateError(f"Game {self.state.game_number} is already over")

        self.state.turn_number += 1
        self._pile = []

        self.announcer.increment()
        levels = 1

        card1 = self.hand1.draw()
        card2 = self.hand2.draw()
        self._pile.extend(c for c in (card1, card2) if c is not None)
        self._announce_play(1, card1)
        self._announce_play(2, card2)

        war_depth = 0
        out_of_cards: int | None = None

        if card1 is None:
            out_of_cards = 1
        elif card2 is None:
            out_of_cards = 2
        else:
            ordering = card1.compare(card2)
            while ordering == Ordering.EQUAL:
                war_depth += 1
                self.announcer.announce("Draw: Each player draws three cards")
                logger.debug(
                    f"War round {war_depth} in turn {self.state.turn_number} "
                    f"(pile {len(self._pile)})"
                )
                if self.game_logger:
                    self.game_logger.log_war(
                        self.state.game_number,
                        self.state.turn_number,
                        war_depth,
                        len(self._pile),
                    )

                self.announcer.increment()
                levels += 1

                last1, last2, out_of_cards = self._draw_war_cards()
                if out_of_cards is not None:
                    break
                ordering = last1.compare(last2)

        if out_of_cards is not None:
            winner = 2 if out_of_cards == 1 else 1
        else:
            winner = 1 if ordering == Ordering.GREATER else 2

        result = TurnResult(
            winner=winner,
            pile=list(self._pile),
            war_depth=war_depth,
            out_of_cards=out_of_cards,
        )

        self.announcer.announce(f"Player {winner} wins hand")
        winning_hand = self.hand1 if winner == 1 else self.hand2
        winning_hand.collect(self._pile)
        self._pile = []

        for _ in range(levels):
            self.announcer.decrement()

        self.state.record_turn(result)
        logger.debug(
            f"Turn {self.state.turn_number}: player {winner} won {result.pile_size} cards "
            f"({self.hand1.size()} vs {self.hand2.size()})"
        )
        if self.game_logger:
            self.game_logger.log_turn(
                self.state.game_number,
                self.state.turn_number,
                (card1, card2),
                result,
                self.hand1,
                self.hand2,
            )

        return result

    def _draw_war_cards(self) -> tuple[Card | None, Card | None, int | None]:
        """Each player adds WAR_CARDS cards to the pile, alternating.

        Returns:
            (last1, last2, out_of_cards): the last card each player drew, and
            the player whose hand ran dry first (None if both drew all cards).
        """
        last: dict[int, Card | None] = {1: None, 2: None}
        for _ in range(WAR_CARDS):
            for player, hand in ((1, self.hand1), (2, self.hand2)):
                card = hand.draw()
                if card is None:
                    self._announce_play(player, None)
                    return last[1], last[2], player
                self._pile.append(card)
                self._announce_play(player, card)
                last[player] = card
        return last[1], last[2], None

    def _announce_play(self, player: int, card: Card | None) -> None:
        """Report a played card, or that the player had none."""
        if card is None:
            self.announcer.announce(f"Player {player} is out of cards")
        else:
            self.announcer.announce(f"Player {player}: {card.describe()}")

    def _check_game_over(self) -> bool:
        """Check for an empty hand and set the terminal status.

        Player 2 wins if both hands are empty.
        """
        if self.hand1.is_empty():
            self.state.status = GameStatus.PLAYER2_WINS
        elif self.hand2.is_empty():
            self.state.status = GameStatus.PLAYER1_WINS
        else:
            return False

        self.announcer.announce(f"Player {self.state.status.winner} Wins!")
        return True
