from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Command(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    UNDO = 4
    BREAK = 5
    NOP = 6

    @property
    def is_direction(self) -> bool:
        return self in DIRECTIONS


DIRECTIONS: Tuple[Command, ...] = (Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT)


class SweepMode(Enum):
    """How a line is swept during a move.

    COMPACT slides every tile to the leading edge and merges each equal pair
    once. SINGLE_PASS walks the N-1 adjacent pairs exactly once in sweep
    order and never rescans, so a line is not necessarily fully packed.
    """

    COMPACT = "compact"
    SINGLE_PASS = "single_pass"


@dataclass
class GameConfig:
    size: int = 4
    random_seed: Optional[int] = None
    sweep_mode: SweepMode = SweepMode.COMPACT
    spawn_value: int = 2
    autoplay_delay: float = 0.3
    autoplay_step_limit: int = 1000
