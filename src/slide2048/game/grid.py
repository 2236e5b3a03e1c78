from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .rules import Command, GameConfig, SweepMode
from .tile import Tile
from .undo import UndoStack


logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    score_gained: int
    changed: bool
    spawned: bool


class Grid:
    """Square board of tiles with score, step counter and undo.

    Tiles are stored row-major in a flat list, so tile (x, y) always sits at
    index ``x * size + y``. Moves mutate tile values in place; tile objects
    and their coordinates are never replaced.
    """

    def __init__(
        self,
        size: int = 4,
        rng: Optional[random.Random] = None,
        sweep_mode: SweepMode = SweepMode.COMPACT,
        spawn_value: int = 2,
    ) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < 2:
            raise ValueError(f"Grid size must be an integer >= 2, got {size!r}")
        self.size = size
        self.rng = rng or random.Random()
        self.sweep_mode = sweep_mode
        self.spawn_value = spawn_value
        self.tiles: List[Tile] = [Tile(x=i // size, y=i % size) for i in range(size * size)]
        self.undo_stack = UndoStack()
        self.score = 0
        self.steps_count = 0
        self.next_fill()

    @classmethod
    def from_config(cls, config: GameConfig, rng: Optional[random.Random] = None) -> "Grid":
        return cls(
            size=config.size,
            rng=rng or random.Random(config.random_seed),
            sweep_mode=config.sweep_mode,
            spawn_value=config.spawn_value,
        )

    def reset(self) -> None:
        for tile in self.tiles:
            tile.value = 0
        self.undo_stack.clear()
        self.score = 0
        self.steps_count = 0
        self.next_fill()

    # --- Inspection ---

    def tile_at(self, x: int, y: int) -> Tile:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"({x}, {y}) is outside a {self.size}x{self.size} grid")
        return self.tiles[x * self.size + y]

    def empty_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if tile.value == 0]

    def max_tile(self) -> int:
        return max(tile.value for tile in self.tiles)

    def row(self, x: int) -> List[Tile]:
        return self.tiles[x * self.size : (x + 1) * self.size]

    def column(self, y: int) -> List[Tile]:
        return self.tiles[y :: self.size]

    def to_2d(self) -> List[List[Tile]]:
        """Fresh ``[x][y]`` view of the live tiles. Not a copy of the tiles."""
        return [self.row(x) for x in range(self.size)]

    def values(self) -> np.ndarray:
        return np.array([tile.value for tile in self.tiles], dtype=np.int64).reshape(self.size, self.size)

    def load_values(self, rows: Sequence[Sequence[int]] | np.ndarray) -> None:
        """Overwrite every tile value. Score, steps and undo history are kept."""
        arr = np.asarray(rows, dtype=np.int64)
        if arr.shape != (self.size, self.size):
            raise ValueError(f"Expected shape {(self.size, self.size)}, got {arr.shape}")
        if np.any(arr < 0):
            raise ValueError("Tile values must be non-negative")
        for tile, value in zip(self.tiles, arr.reshape(-1)):
            tile.value = int(value)

    def clone(self, with_history: bool = True) -> "Grid":
        """Independent copy. Without history the copy starts with an empty undo stack."""
        new_grid = Grid.__new__(Grid)
        new_grid.size = self.size
        new_grid.rng = random.Random()
        new_grid.rng.setstate(self.rng.getstate())
        new_grid.sweep_mode = self.sweep_mode
        new_grid.spawn_value = self.spawn_value
        new_grid.tiles = [Tile(x=t.x, y=t.y, value=t.value) for t in self.tiles]
        new_grid.undo_stack = self.undo_stack.copy() if with_history else UndoStack()
        new_grid.score = self.score
        new_grid.steps_count = self.steps_count
        return new_grid

    # --- Spawn and terminal state ---

    def next_fill(self) -> bool:
        """Put ``spawn_value`` on a uniformly chosen empty tile.

        Returns False without touching the board when nothing is empty.
        """
        empty = self.empty_tiles()
        if not empty:
            return False
        tile = empty[self.rng.randrange(len(empty))]
        tile.value = self.spawn_value
        logger.debug("Spawned %d at (%d, %d)", tile.value, tile.x, tile.y)
        return True

    def _has_equal_neighbours(self, lines: Iterable[List[Tile]]) -> bool:
        for line in lines:
            for current, following in zip(line, line[1:]):
                if current.value != 0 and current.value == following.value:
                    return True
        return False

    def next_step_available(self) -> bool:
        if any(tile.value == 0 for tile in self.tiles):
            return True
        rows = (self.row(x) for x in range(self.size))
        columns = (self.column(y) for y in range(self.size))
        return self._has_equal_neighbours(rows) or self._has_equal_neighbours(columns)

    # --- Moves ---

    def _lines_for(self, command: Command) -> List[List[Tile]]:
        """Lines in sweep order: index 0 is the edge tiles slide towards."""
        if command in (Command.UP, Command.DOWN):
            lines = [self.column(y) for y in range(self.size)]
        elif command in (Command.LEFT, Command.RIGHT):
            lines = [self.row(x) for x in range(self.size)]
        else:
            raise ValueError(f"{command!r} is not a direction")
        if command in (Command.DOWN, Command.RIGHT):
            lines = [line[::-1] for line in lines]
        return lines

    @staticmethod
    def _sweep_single_pass(line: List[Tile]) -> int:
        gained = 0
        for current, following in zip(line, line[1:]):
            if current.value == following.value or current.value == 0:
                merged = current.value != 0
                current.value += following.value
                following.value = 0
                if merged:
                    gained += current.value
        return gained

    @staticmethod
    def _sweep_compact(line: List[Tile]) -> int:
        gained = 0
        packed = [tile.value for tile in line if tile.value != 0]
        result: List[int] = []
        i = 0
        while i < len(packed):
            if i + 1 < len(packed) and packed[i] == packed[i + 1]:
                merged = packed[i] * 2
                result.append(merged)
                gained += merged
                i += 2
            else:
                result.append(packed[i])
                i += 1
        result += [0] * (len(line) - len(result))
        for tile, value in zip(line, result):
            tile.value = value
        return gained

    def move(self, command: Command) -> MoveResult:
        command = Command(command)
        lines = self._lines_for(command)
        before = self.values()
        self.undo_stack.push(before)
        self.steps_count += 1

        sweep = self._sweep_compact if self.sweep_mode is SweepMode.COMPACT else self._sweep_single_pass
        gained = sum(sweep(line) for line in lines)
        self.score += gained
        changed = not np.array_equal(before, self.values())

        spawned = self.next_fill()
        logger.debug(
            "Move %s: +%d (score %d, step %d, changed=%s)",
            command.name, gained, self.score, self.steps_count, changed,
        )
        return MoveResult(score_gained=gained, changed=changed, spawned=spawned)

    def move_up(self) -> MoveResult:
        return self.move(Command.UP)

    def move_down(self) -> MoveResult:
        return self.move(Command.DOWN)

    def move_left(self) -> MoveResult:
        return self.move(Command.LEFT)

    def move_right(self) -> MoveResult:
        return self.move(Command.RIGHT)

    # --- Undo ---

    def undo(self) -> bool:
        """Restore the board as it was before the last move.

        The score is left as is.
        """
        if self.steps_count < 1 or not self.undo_stack:
            return False
        snapshot = self.undo_stack.pop()
        for tile, value in zip(self.tiles, snapshot.reshape(-1)):
            tile.value = int(value)
        self.steps_count -= 1
        logger.debug("Undo to step %d", self.steps_count)
        return True
