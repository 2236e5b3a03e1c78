from __future__ import annotations

import argparse

import gymnasium as gym
import numpy as np

import slide2048.env  # noqa: F401


def run_random(episodes: int = 5, seed: int | None = None, masked: bool = True) -> list[float]:
    env = gym.make("Slide2048-4x4-v0")
    rng = np.random.default_rng(seed)
    scores: list[float] = []
    obs, info = env.reset(seed=seed)
    for _ in range(episodes):
        total_reward = 0.0
        while True:
            # Prefer directions that change the board when any exist
            valid = np.flatnonzero(info["action_mask"]) if masked else np.array([], dtype=np.int64)
            if valid.size > 0:
                action = int(rng.choice(valid))
            else:
                action = int(env.action_space.sample())
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            if terminated or truncated:
                print(f"Episode score {info['score']}, max tile {info['max_tile']}, steps {info['steps']}")
                scores.append(total_reward)
                obs, info = env.reset()
                break
    env.close()
    print(f"Random agent mean reward: {np.mean(scores):.2f}")
    return scores


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--episodes", type=int, default=5)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--unmasked", action="store_true", help="Sample every direction, including no-op moves")
    return p


def main() -> None:
    args = build_parser().parse_args()
    run_random(args.episodes, args.seed, masked=not args.unmasked)


if __name__ == "__main__":  # pragma: no cover
    main()
