from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from slide2048.engines import RANDOM_MOVES
from slide2048.game import GameConfig, Grid
from slide2048.visualization.renderer import values_to_rgb


def _compute_action_mask(grid: Grid) -> np.ndarray:
    """Directions (in action order) that would change the board."""
    mask = np.zeros((len(RANDOM_MOVES),), dtype=np.bool_)
    for i, command in enumerate(RANDOM_MOVES):
        trial = grid.clone(with_history=False)
        mask[i] = trial.move(command).changed
    return mask


class SlideEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.grid = Grid.from_config(self.config)

        size = self.config.size
        # Actions share the random engine's direction order.
        self.action_space = spaces.Discrete(len(RANDOM_MOVES))
        self.observation_space = spaces.Box(low=0, high=2**31 - 1, shape=(size, size), dtype=np.int64)

    def _get_obs(self) -> np.ndarray:
        return self.grid.values()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.grid.score,
            "steps": self.grid.steps_count,
            "max_tile": self.grid.max_tile(),
            "action_mask": _compute_action_mask(self.grid),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.grid.rng = random.Random(seed)
        self.grid.reset()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        command = RANDOM_MOVES[int(action)]
        result = self.grid.move(command)

        reward = float(result.score_gained)
        terminated = not self.grid.next_step_available()
        truncated = self.grid.steps_count >= self.max_episode_steps

        info = self._get_info()
        info["changed"] = result.changed
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            return values_to_rgb(self.grid.values())
        return None

    def close(self) -> None:
        pass
