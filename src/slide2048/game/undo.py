from __future__ import annotations

from typing import List

import numpy as np


class UndoStack:
    """LIFO of board value snapshots.

    Every entry is an independent copy, so later moves never leak into a
    stored snapshot. There is no cap: the stack lives as long as the grid.
    """

    def __init__(self) -> None:
        self._snapshots: List[np.ndarray] = []

    def push(self, values: np.ndarray) -> None:
        self._snapshots.append(np.array(values, copy=True))

    def pop(self) -> np.ndarray:
        if not self._snapshots:
            raise IndexError("pop from empty undo stack")
        return self._snapshots.pop()

    def peek(self) -> np.ndarray:
        if not self._snapshots:
            raise IndexError("peek at empty undo stack")
        return self._snapshots[-1].copy()

    def clear(self) -> None:
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def copy(self) -> "UndoStack":
        new_stack = UndoStack()
        for snapshot in self._snapshots:
            new_stack.push(snapshot)
        return new_stack
