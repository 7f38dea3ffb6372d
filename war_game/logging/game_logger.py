"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from war_game.models.card import Card
from war_game.models.game_state import GameState, GameStatus, TurnResult
from war_game.models.hand import Hand

from .formatters import format_card, format_cards, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "war_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, num_games: int, seed: int | None) -> None:
        """Log session start.

        Args:
            num_games: Number of games planned.
            seed: Seed of the session random source (None if unseeded).
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "num_games": num_games,
            "seed": seed,
        })

    def log_game_start(self, game_num: int, hand1: Hand, hand2: Hand) -> None:
        """Log game start with the dealt hands, front card first."""
        self._write({
            "type": "game_start",
            "game": game_num,
            "hands": format_hands(hand1, hand2),
        })

    def log_war(
        self,
        game_num: int,
        turn_num: int,
        depth: int,
        pile_size: int,
    ) -> None:
        """Log the start of a war round.

        Args:
            game_num: Game number.
            turn_num: Turn number within the game.
            depth: War round within the turn (1 for the first war).
            pile_size: Cards on the pile when the war started.
        """
        self._write({
            "type": "war",
            "game": game_num,
            "turn": turn_num,
            "depth": depth,
            "pile_size": pile_size,
        })

    def log_turn(
        self,
        game_num: int,
        turn_num: int,
        played: tuple[Card | None, Card | None],
        result: TurnResult,
        hand1: Hand,
        hand2: Hand,
    ) -> None:
        """Log a resolved turn.

        Args:
            game_num: Game number.
            turn_num: Turn number within the game.
            played: Cards that opened the turn for player 1 and player 2.
            result: Turn outcome.
            hand1: Player 1 hand after the pile was collected.
            hand2: Player 2 hand after the pile was collected.
        """
        record: dict[str, Any] = {
            "type": "turn",
            "game": game_num,
            "turn": turn_num,
            "played": [format_card(played[0]), format_card(played[1])],
            "winner": result.winner,
            "pile": format_cards(result.pile),
            "war_depth": result.war_depth,
            "hand_sizes": {"1": hand1.size(), "2": hand2.size()},
        }
        if result.out_of_cards is not None:
            record["out_of_cards"] = result.out_of_cards
        self._write(record)

    def log_game_end(self, state: GameState) -> None:
        """Log game end with results."""
        self._write({
            "type": "game_end",
            "game": state.game_number,
            "status": state.status.value,
            "winner": state.status.winner,
            "turns": state.turn_number,
            "wars": state.war_count,
            "longest_war": state.longest_war,
        })

    def log_session_end(self, total_games: int, tally: dict[GameStatus, int]) -> None:
        """Log session end with win tallies.

        Args:
            total_games: Total number of games played.
            tally: Dict mapping terminal status to number of games.
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "tally": {status.value: count for status, count in tally.items()},
        })
