from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional

from slide2048.game import Command, Tile
from .base import GameEngine


logger = logging.getLogger(__name__)


# Index order used when drawing a random direction.
RANDOM_MOVES = (Command.UP, Command.DOWN, Command.RIGHT, Command.LEFT)


class RandomEngine(GameEngine):
    """Plays a uniformly random direction, pausing ``delay`` seconds per move."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay: float = 0.3,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.delay = float(delay)
        self.sleep = sleep or time.sleep

    def is_autonomous(self) -> bool:
        return True

    def get_next_command(self, board: List[List[Tile]]) -> Command:
        command = RANDOM_MOVES[self.rng.randrange(len(RANDOM_MOVES))]
        if self.delay > 0:
            self.sleep(self.delay)
        logger.debug("Autoplay picked %s", command.name)
        return command
