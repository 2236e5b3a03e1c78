from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """One board cell.

    ``x`` is the row index and ``y`` the column index. Both are fixed once the
    tile is created; only ``value`` changes during play (0 means empty).
    """

    x: int
    y: int
    value: int = 0

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y
