"""Game module for slide2048.

Exports the core game engine and supporting classes:
- Tile: One board cell with fixed coordinates and a mutable value
- Grid: Board state, directional moves, spawning, terminal check and undo
- UndoStack: Snapshots of prior board values
- Command / GameConfig / SweepMode: Command vocabulary and configuration
- GameSession: Applies engine commands to a grid until the game ends
"""

from .tile import Tile
from .undo import UndoStack
from .rules import Command, DIRECTIONS, GameConfig, SweepMode
from .grid import Grid, MoveResult
from .core import GameSession, Outcome, format_board, print_grid

__all__ = [
    "Tile",
    "UndoStack",
    "Command",
    "DIRECTIONS",
    "GameConfig",
    "SweepMode",
    "Grid",
    "MoveResult",
    "GameSession",
    "Outcome",
    "format_board",
    "print_grid",
]
