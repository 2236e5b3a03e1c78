"""Pygame front end and tile color table."""

from .renderer import TILE_COLORS, Renderer, color_for_value, values_to_rgb

__all__ = ["TILE_COLORS", "Renderer", "color_for_value", "values_to_rgb"]
