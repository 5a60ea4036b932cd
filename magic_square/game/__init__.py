"""Interactive play on top of generated puzzles."""

from .session import GameSession

__all__ = ["GameSession"]
