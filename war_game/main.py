"""Main entry point for the War simulator."""

import argparse
import logging
import random
import sys
from pathlib import Path

from war_game.config import Config, load_config
from war_game.game.announcer import Announcer, ConsoleAnnouncer, QuietAnnouncer
from war_game.game.engine import WarGame
from war_game.logging import GameLogConfig, GameLogger
from war_game.models.game_state import GameStatus
from war_game.utils.logger import SessionDisplay, setup_logging

logger = logging.getLogger(__name__)


def play_session(
    config: Config,
    announcer: Announcer,
    game_logger: GameLogger | None = None,
    display: SessionDisplay | None = None,
) -> dict[GameStatus, int]:
    """Play the configured number of games.

    All games share one random source seeded from the config, so a seeded
    session is reproducible.

    Args:
        config: Session configuration
        announcer: Receives every game event
        game_logger: GameLogger instance for detailed logging
        display: Prints per-game progress if given

    Returns:
        Dict of terminal status -> number of games
    """
    num_games = config.game.num_games
    rng = random.Random(config.game.seed)
    tally = {GameStatus.PLAYER1_WINS: 0, GameStatus.PLAYER2_WINS: 0}

    if game_logger:
        game_logger.log_session_start(num_games, config.game.seed)

    for game_num in range(1, num_games + 1):
        if display:
            display.print_game_start(game_num, num_games)

        game = WarGame(announcer, rng=rng, game_logger=game_logger, game_number=game_num)
        status = game.run()
        tally[status] += 1

        if display:
            display.print_game_end(game.state)

    if game_logger:
        game_logger.log_session_end(num_games, tally)

    return tally


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="War card game simulator")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print turn-by-turn announcements",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Path of the JSONL game log file",
    )

    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.num_games:
        config.game.num_games = args.num_games
    if args.seed is not None:
        config.game.seed = args.seed
    if args.quiet:
        config.logging.quiet = True
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    setup_logging(config.logging.level)

    announcer: Announcer = QuietAnnouncer() if config.logging.quiet else ConsoleAnnouncer()
    display = SessionDisplay()

    try:
        with GameLogger(config.game_log) as game_logger:
            tally = play_session(config, announcer, game_logger, display)
        display.print_final_results(tally)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Simulation error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
