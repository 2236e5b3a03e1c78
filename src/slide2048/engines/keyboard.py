from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import pygame

from slide2048.game import Command, Tile
from .base import GameEngine


logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_q: Command.BREAK,
    pygame.K_u: Command.UNDO,
}


def command_for_event(event: pygame.event.Event) -> Command:
    if event.type == pygame.QUIT:
        return Command.BREAK
    if event.type != pygame.KEYDOWN:
        return Command.NOP
    # Ctrl+Z quits, matching the original key map.
    if event.key == pygame.K_z and getattr(event, "mod", 0) & pygame.KMOD_CTRL:
        return Command.BREAK
    return KEY_TO_COMMAND.get(event.key, Command.NOP)


class KeyboardEngine(GameEngine):
    """Blocks until the player presses a key (or closes the window)."""

    def __init__(self, wait_event: Optional[Callable[[], pygame.event.Event]] = None) -> None:
        self.wait_event = wait_event or pygame.event.wait

    def is_autonomous(self) -> bool:
        return False

    def get_next_command(self, board: List[List[Tile]]) -> Command:
        while True:
            event = self.wait_event()
            if event.type in (pygame.KEYDOWN, pygame.QUIT):
                break
        command = command_for_event(event)
        logger.debug("Key event -> %s", command.name)
        return command
