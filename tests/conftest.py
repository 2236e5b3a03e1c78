from __future__ import annotations

import random

import pytest

from slide2048.game import Grid, SweepMode


# Full boards with no equal neighbours in any row or column.
STUCK_4X4 = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


@pytest.fixture
def make_grid():
    def _make(rows, sweep_mode: SweepMode = SweepMode.COMPACT, seed: int = 0) -> Grid:
        grid = Grid(len(rows), rng=random.Random(seed), sweep_mode=sweep_mode)
        grid.load_values(rows)
        return grid

    return _make


@pytest.fixture
def no_spawn(monkeypatch):
    """Disable spawning on a grid so the post-sweep board can be inspected."""

    def _apply(grid: Grid) -> Grid:
        monkeypatch.setattr(grid, "next_fill", lambda: False)
        return grid

    return _apply
