from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

import pygame

from slide2048.engines import GameEngine, KeyboardEngine, RandomEngine
from slide2048.game import GameConfig, GameSession, Grid, SweepMode, print_grid
from .renderer import BASE_COLOR, BACKGROUND_COLOR, Renderer


logger = logging.getLogger(__name__)

MODE_KEYS = {
    pygame.K_1: "human",
    pygame.K_KP1: "human",
    pygame.K_2: "auto",
    pygame.K_KP2: "auto",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the sliding tile puzzle")
    p.add_argument("--size", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--mode", choices=["human", "auto"], default=None,
                   help="Skip the start menu: human (keyboard) or auto (random moves)")
    p.add_argument("--delay", type=float, default=0.3, help="Seconds between autoplay moves")
    p.add_argument("--step-limit", type=int, default=1000, help="Autoplay halts once steps exceed this")
    p.add_argument("--sweep", choices=[m.value for m in SweepMode], default=SweepMode.COMPACT.value)
    p.add_argument("--headless", action="store_true", help="Print the board to stdout (requires --mode auto)")
    p.add_argument("--log-level", default="WARNING")
    return p


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        size=args.size,
        random_seed=args.seed,
        sweep_mode=SweepMode(args.sweep),
        autoplay_delay=args.delay,
        autoplay_step_limit=args.step_limit,
    )


def make_engine(mode: str, config: GameConfig) -> GameEngine:
    if mode == "human":
        return KeyboardEngine()
    # Autoplay draws from its own stream, seeded one past the grid.
    seed = None if config.random_seed is None else config.random_seed + 1
    return RandomEngine(rng=random.Random(seed), delay=config.autoplay_delay)


def select_mode(screen: pygame.Surface) -> Optional[str]:
    font = pygame.font.SysFont(None, 32)
    screen.fill(BACKGROUND_COLOR)
    for i, line in enumerate(["Select mode:", "1. User game", "2. AI game"]):
        screen.blit(font.render(line, True, BASE_COLOR), (20, 20 + i * 36))
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYDOWN and event.key in MODE_KEYS:
            return MODE_KEYS[event.key]


def run_headless(config: GameConfig) -> GameSession:
    session = GameSession(make_engine("auto", config), config=config)
    session.run(on_render=print_grid)
    print(session.message())
    return session


def run(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error(f"--size must be at least 2, got {args.size}")
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = config_from_args(args)
    if args.headless:
        if args.mode != "auto":
            raise SystemExit("--headless requires --mode auto")
        run_headless(config)
        return

    pygame.init()
    try:
        renderer = Renderer()
        grid = Grid.from_config(config)
        screen = pygame.display.set_mode(renderer.window_size(grid.size))
        pygame.display.set_caption("2048")

        mode = args.mode or select_mode(screen)
        if mode is None:
            return
        logger.info("Starting %s game", mode)
        session = GameSession(make_engine(mode, config), grid=grid, config=config)

        def render(g: Grid) -> None:
            # Keep the window responsive while autoplay sleeps between moves.
            if session.engine.is_autonomous():
                pygame.event.pump()
            renderer.draw(screen, g)

        session.run(on_render=render)
        message = session.message()
        print(message)
        renderer.draw_message(screen, message)
        pygame.time.wait(1500)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
