"""Game state models."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel

from .card import Card


class GameStatus(str, Enum):
    """Game progress state."""

    IN_PROGRESS = "in_progress"
    PLAYER1_WINS = "player1_wins"  # Terminal
    PLAYER2_WINS = "player2_wins"  # Terminal

    @property
    def is_terminal(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> int | None:
        """Winning player number (None while in progress)."""
        if self == GameStatus.PLAYER1_WINS:
            return 1
        if self == GameStatus.PLAYER2_WINS:
            return 2
        return None


@dataclass
class TurnResult:
    """Outcome of a single turn."""

    winner: int  # 1 or 2
    pile: list[Card] = field(default_factory=list)  # Cards awarded to the winner
    war_depth: int = 0  # Number of war rounds played this turn
    out_of_cards: int | None = None  # Player who ran dry mid-turn

    @property
    def pile_size(self) -> int:
        """Number of cards won."""
        return len(self.pile)


class GameState(BaseModel):
    """Overall game state."""

    game_number: int = 1
    status: GameStatus = GameStatus.IN_PROGRESS

    # Progress counters
    turn_number: int = 0
    war_count: int = 0  # War rounds played across all turns
    longest_war: int = 0  # Deepest escalation in a single turn

    def record_turn(self, result: TurnResult) -> None:
        """Update counters after a resolved turn."""
        self.war_count += result.war_depth
        self.longest_war = max(self.longest_war, result.war_depth)

    def __str__(self) -> str:
        parts = [f"Game {self.game_number}, Turn {self.turn_number}"]
        if self.status.is_terminal:
            parts.append(f"[{self.status.name}]")
        if self.war_count:
            parts.append(f"wars={self.war_count}")
        return " ".join(parts)
