"""Announcers for War game events.

An announcer receives one-way notifications from the game engine.
It never influences the outcome of a game.
"""

from abc import ABC, abstractmethod


class Announcer(ABC):
    """Abstract base class for game event announcers.

    The engine calls increment() when it enters a turn or a war round and
    decrement() when it leaves it, so implementations can nest output.
    """

    @abstractmethod
    def announce(self, message: str) -> None:
        """Report a game event.

        Args:
            message: Human readable event description
        """
        pass

    @abstractmethod
    def increment(self) -> None:
        """Raise the nesting level for subsequent announcements."""
        pass

    @abstractmethod
    def decrement(self) -> None:
        """Lower the nesting level."""
        pass


class ConsoleAnnouncer(Announcer):
    """Print events to stdout, indented by nesting level."""

    def __init__(self, indent: str = " "):
        self.indent = indent
        self.depth = 0

    def announce(self, message: str) -> None:
        print(f"{self.indent * self.depth}{message}")

    def increment(self) -> None:
        self.depth += 1

    def decrement(self) -> None:
        self.depth = max(0, self.depth - 1)


class QuietAnnouncer(Announcer):
    """Discard all events."""

    def announce(self, message: str) -> None:
        pass

    def increment(self) -> None:
        pass

    def decrement(self) -> None:
        pass


class RecordingAnnouncer(Announcer):
    """Keep every event in memory as (depth, message) pairs."""

    def __init__(self) -> None:
        self.depth = 0
        self.events: list[tuple[int, str]] = []

    @property
    def messages(self) -> list[str]:
        """Recorded messages without depth."""
        return [message for _, message in self.events]

    def announce(self, message: str) -> None:
        self.events.append((self.depth, message))

    def increment(self) -> None:
        self.depth += 1

    def decrement(self) -> None:
        self.depth -= 1

    def clear(self) -> None:
        """Forget recorded events."""
        self.events.clear()
