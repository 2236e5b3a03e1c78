from __future__ import annotations

import gymnasium as gym
import numpy as np

import slide2048.env  # noqa: F401
from slide2048.engines import RANDOM_MOVES
from slide2048.env.slide_env import SlideEnv, _compute_action_mask
from slide2048.game import GameConfig, UndoStack

from conftest import STUCK_4X4


def test_registered_env_reset_and_step():
    env = gym.make("Slide2048-4x4-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (4, 4)
    assert np.count_nonzero(obs) == 1
    assert info["score"] == 0 and info["steps"] == 0
    assert info["action_mask"].shape == (4,)

    obs, reward, terminated, truncated, info = env.step(0)
    assert info["steps"] == 1
    assert reward == float(info["score"])
    assert not terminated and not truncated
    env.close()


def test_reset_with_seed_is_deterministic():
    a = SlideEnv()
    b = SlideEnv()
    obs_a, _ = a.reset(seed=5)
    obs_b, _ = b.reset(seed=5)
    np.testing.assert_array_equal(obs_a, obs_b)
    for action in (0, 2, 1, 3, 0):
        obs_a, *_ = a.step(action)
        obs_b, *_ = b.step(action)
    np.testing.assert_array_equal(obs_a, obs_b)


def test_reward_is_score_gained():
    env = SlideEnv()
    env.reset(seed=0)
    env.grid.load_values([[2, 2, 4, 4], [0] * 4, [0] * 4, [0] * 4])
    _, reward, _, _, info = env.step(3)  # LEFT
    assert reward == 12.0
    assert info["changed"]


def test_stuck_board_terminates():
    env = SlideEnv()
    env.reset(seed=0)
    env.grid.load_values(STUCK_4X4)
    assert not env._get_info()["action_mask"].any()
    _, reward, terminated, _, info = env.step(0)
    assert terminated
    assert reward == 0.0
    assert not info["changed"]


def test_truncation_after_max_steps():
    env = SlideEnv(config=GameConfig(size=6), max_episode_steps=2)
    env.reset(seed=1)
    *_, truncated, _ = env.step(0)
    assert not truncated
    *_, truncated, _ = env.step(1)
    assert truncated


def test_rgb_render():
    env = SlideEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (48, 48, 3)
    assert img.dtype == np.uint8
    assert SlideEnv().render() is None


def test_action_mask_ignores_move_history(monkeypatch):
    grid = SlideEnv(config=GameConfig(size=16, random_seed=2)).grid
    for i in range(300):
        grid.move(RANDOM_MOVES[i % 4])
    history = len(grid.undo_stack)
    values = grid.values()

    def fail_copy(self):
        raise AssertionError("undo history copied")

    monkeypatch.setattr(UndoStack, "copy", fail_copy)
    mask = _compute_action_mask(grid)
    assert mask.shape == (4,)
    assert len(grid.undo_stack) == history == 300
    assert grid.steps_count == 300
    np.testing.assert_array_equal(grid.values(), values)
