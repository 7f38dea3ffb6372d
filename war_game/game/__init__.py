"""Game logic."""

from .announcer import Announcer, ConsoleAnnouncer, QuietAnnouncer, RecordingAnnouncer
from .engine import WAR_CARDS, WarGame

__all__ = [
    "Announcer",
    "ConsoleAnnouncer",
    "QuietAnnouncer",
    "RecordingAnnouncer",
    "WAR_CARDS",
    "WarGame",
]
