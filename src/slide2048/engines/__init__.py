"""Command sources for a game session: keyboard input or random autoplay."""

from .base import GameEngine
from .autoplay import RANDOM_MOVES, RandomEngine
from .keyboard import KEY_TO_COMMAND, KeyboardEngine, command_for_event

__all__ = [
    "GameEngine",
    "RandomEngine",
    "RANDOM_MOVES",
    "KeyboardEngine",
    "KEY_TO_COMMAND",
    "command_for_event",
]
