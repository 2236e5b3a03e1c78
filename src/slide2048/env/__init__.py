"""Gymnasium environment for slide2048."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Slide2048-4x4-v0",
    entry_point="slide2048.env.slide_env:SlideEnv",
)

__all__: list[str] = []
