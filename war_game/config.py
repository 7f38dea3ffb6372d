"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from war_game.logging.game_logger import GameLogConfig


class GameConfig(BaseModel):
    """Game configuration."""

    num_games: int = 1
    seed: int | None = None  # None for an unseeded random source


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    quiet: bool = False  # Suppress turn-by-turn announcements


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
