from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from slide2048.game import Grid


Color = Tuple[int, int, int]

BASE_COLOR: Color = (0, 0, 0)
EMPTY_COLOR: Color = (205, 193, 180)
BACKGROUND_COLOR: Color = (255, 255, 255)

TILE_COLORS: Dict[int, Color] = {
    2: (0, 0, 0),
    4: (128, 128, 128),
    8: (0, 255, 0),
    16: (0, 128, 0),
    32: (255, 0, 255),
    64: (128, 0, 128),
    128: (0, 255, 255),
    256: (0, 128, 128),
    512: (255, 0, 0),
    1024: (128, 0, 0),
    2048: (0, 0, 255),
    4096: (0, 0, 128),
    8192: (255, 255, 0),
    16384: (128, 128, 0),
}


def color_for_value(v: int) -> Color:
    return TILE_COLORS.get(int(v), BASE_COLOR)


def values_to_rgb(values: np.ndarray, cell: int = 12) -> np.ndarray:
    """Paint a value grid as an RGB image, ``cell`` pixels per tile."""
    h, w = values.shape
    img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
    for x in range(h):
        for y in range(w):
            v = int(values[x, y])
            color = EMPTY_COLOR if v == 0 else color_for_value(v)
            img[x * cell : (x + 1) * cell, y * cell : (y + 1) * cell, :] = color
    return img


class Renderer:
    def __init__(self, cell_size: int = 80, margin: int = 20, header: int = 40) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.header = header
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, size: int) -> Tuple[int, int]:
        side = size * self.cell_size + self.margin * 2
        return side, side + self.header * 2

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _grid_surface(self, grid: Grid) -> pygame.Surface:
        font = self._get_font()
        side = grid.size * self.cell_size
        surf = pygame.Surface((side, side))
        surf.fill((187, 173, 160))
        for row in grid.to_2d():
            for tile in row:
                rect = pygame.Rect(
                    tile.y * self.cell_size,
                    tile.x * self.cell_size,
                    self.cell_size - 2,
                    self.cell_size - 2,
                )
                pygame.draw.rect(surf, EMPTY_COLOR, rect)
                if tile.value:
                    text = font.render(str(tile.value), True, color_for_value(tile.value))
                    surf.blit(text, text.get_rect(center=rect.center))
        return surf

    def draw(self, screen: pygame.Surface, grid: Grid, footer: str = "Press q to exit, use arrow keys for game, u to undo") -> None:
        font = self._get_font()
        screen.fill(BACKGROUND_COLOR)
        status = font.render(f"Used {grid.steps_count:4} steps, score {grid.score:5}", True, BASE_COLOR)
        screen.blit(status, (self.margin, self.margin // 2))
        screen.blit(self._grid_surface(grid), (self.margin, self.header))
        hint = font.render(footer, True, BASE_COLOR)
        screen.blit(hint, (self.margin, self.header + grid.size * self.cell_size + self.margin // 2))
        pygame.display.flip()

    def draw_message(self, screen: pygame.Surface, message: str) -> None:
        font = self._get_font()
        text = font.render(message, True, (220, 40, 40))
        rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() - self.header // 2))
        screen.blit(text, rect)
        pygame.display.flip()
