"""Logging utilities and session display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from war_game.models.game_state import GameState, GameStatus


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class SessionDisplay:
    """Display session progress to stdout."""

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, game_number: int, num_games: int) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number}/{num_games}")
        self.print_separator()

    def print_game_end(self, state: "GameState") -> None:
        """Print game result."""
        print(
            f"\nGame {state.game_number}: Player {state.status.winner} wins "
            f"after {state.turn_number} turns "
            f"({state.war_count} wars, longest {state.longest_war})"
        )

    def print_final_results(self, tally: dict["GameStatus", int]) -> None:
        """Print final session results."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        total = sum(tally.values())
        for status, count in tally.items():
            share = count / total * 100 if total else 0.0
            print(f"  Player {status.winner}: {count} wins ({share:.1f}%)")
