from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from .grid import Grid
from .rules import Command, GameConfig

if TYPE_CHECKING:
    from slide2048.engines import GameEngine


logger = logging.getLogger(__name__)


class Outcome(Enum):
    RUNNING = "running"
    QUIT = "quit"
    GAME_OVER = "game_over"
    STEP_LIMIT = "step_limit"

    def message(self, step_limit: int = 1000) -> str:
        if self is Outcome.GAME_OVER:
            return "Game over!"
        if self is Outcome.STEP_LIMIT:
            return f"Halt! {step_limit} step limit reached!"
        if self is Outcome.QUIT:
            return "Bye!"
        return ""


class GameSession:
    """Drives one game: asks the engine for commands and applies them.

    Undo is honoured only for engines that are not autonomous. Autonomous
    sessions also stop once the step counter passes ``autoplay_step_limit``.
    """

    def __init__(self, engine: "GameEngine", grid: Optional[Grid] = None, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.engine = engine
        self.grid = grid if grid is not None else Grid.from_config(self.config)
        self.outcome = Outcome.RUNNING

    def apply(self, command: Command) -> Outcome:
        if self.outcome is not Outcome.RUNNING:
            return self.outcome

        if command.is_direction:
            self.grid.move(command)
        elif command == Command.UNDO:
            if not self.engine.is_autonomous():
                self.grid.undo()
            else:
                logger.debug("Ignoring undo from autonomous engine")
        elif command == Command.BREAK:
            self.outcome = Outcome.QUIT
            return self.outcome

        if not self.grid.next_step_available():
            self.outcome = Outcome.GAME_OVER
        elif self.engine.is_autonomous() and self.grid.steps_count > self.config.autoplay_step_limit:
            self.outcome = Outcome.STEP_LIMIT
        return self.outcome

    def step(self) -> Outcome:
        command = self.engine.get_next_command(self.grid.to_2d())
        return self.apply(command)

    def run(self, on_render: Optional[Callable[[Grid], None]] = None) -> Outcome:
        logger.info("Session started on a %dx%d grid", self.grid.size, self.grid.size)
        if on_render is not None:
            on_render(self.grid)
        while True:
            outcome = self.step()
            if outcome is Outcome.QUIT:
                break
            if on_render is not None:
                on_render(self.grid)
            if outcome is not Outcome.RUNNING:
                break
        logger.info(
            "Session ended: %s after %d steps, score %d",
            self.outcome.value, self.grid.steps_count, self.grid.score,
        )
        return self.outcome

    def message(self) -> str:
        return self.outcome.message(self.config.autoplay_step_limit)


def format_board(grid: Grid) -> str:
    lines = [f"Used {grid.steps_count:4} steps, score {grid.score:5}"]
    for row in grid.to_2d():
        lines.append("".join(f"{tile.value:4} " for tile in row))
        lines.append("")
    return "\n".join(lines)


def print_grid(grid: Grid) -> None:
    print(format_board(grid))
