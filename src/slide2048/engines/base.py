from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from slide2048.game import Command, Tile


class GameEngine(ABC):
    """Source of commands for a game session."""

    @abstractmethod
    def is_autonomous(self) -> bool:
        """True when commands are produced without external input."""

    @abstractmethod
    def get_next_command(self, board: List[List[Tile]]) -> Command:
        """Return the next command given the current ``[x][y]`` tile view."""
