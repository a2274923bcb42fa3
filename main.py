"""Entry point for the Conesight pursuit sandbox."""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

import pygame

from game.config import SimulationConfig
from game.driver import FrameDriver
from game.entities import Bounds
from game.obstacles import all_obstacle_layouts
from game.world import Frame, create_initial_world
from rendering.draw_system import SceneRenderer
from rendering.opengl_context import initialize_gl, resize_viewport
from ui.hud import HudRenderer
from ui.layout import HudLayout

logger = logging.getLogger("conesight")


def build_parser() -> argparse.ArgumentParser:
    layouts = sorted(layout.name for layout in all_obstacle_layouts())
    parser = argparse.ArgumentParser(
        prog="conesight",
        description="Dodge a vision-cone pursuer on a flat 2D playfield.",
    )
    parser.add_argument("--width", type=int, default=SimulationConfig.width)
    parser.add_argument("--height", type=int, default=SimulationConfig.height)
    parser.add_argument("--fps", type=int, default=SimulationConfig.fps)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible AI choices.")
    parser.add_argument("--pursuers", type=int, default=1, help="Number of AI pursuers.")
    parser.add_argument("--layout", choices=layouts, default=SimulationConfig.layout)
    parser.add_argument(
        "--no-wander",
        action="store_true",
        help="Disable the idle random heading changes.",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="FRAMES",
        default=None,
        help="Step FRAMES frames without opening a window, then exit.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SimulationConfig:
    try:
        return SimulationConfig(
            width=args.width,
            height=args.height,
            fps=args.fps,
            pursuers=args.pursuers,
            layout=args.layout,
            wander_chance=0.0 if args.no_wander else SimulationConfig.wander_chance,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))


def run_headless(config: SimulationConfig, frames: int) -> Frame:
    world = create_initial_world(config, random.Random(config.seed))
    driver = FrameDriver(world)
    completed = driver.run(frames)
    frame = world.snapshot()
    logger.info("Ran %d headless frame(s)", completed)
    logger.info("Human %s at (%.1f, %.1f)", frame.human.entity_id, frame.human.x, frame.human.y)
    for pursuer in frame.pursuers:
        logger.info(
            "Pursuer %s at (%.1f, %.1f) facing %s, sees player: %s",
            pursuer.entity.entity_id,
            pursuer.entity.x,
            pursuer.entity.y,
            pursuer.entity.direction.value,
            pursuer.vision.can_see_player,
        )
    return frame


def run_windowed(config: SimulationConfig) -> None:
    pygame.init()
    pygame.display.set_caption("Conesight")
    window_size = (int(config.width), int(config.height))
    pygame.display.set_mode(window_size, pygame.OPENGL | pygame.DOUBLEBUF)
    initialize_gl(window_size)

    world = create_initial_world(config, random.Random(config.seed))
    renderer = SceneRenderer()
    hud_layout = HudLayout(window_size)
    hud = HudRenderer(hud_layout)

    def current_bounds() -> Optional[Bounds]:
        surface = pygame.display.get_surface()
        if surface is None:
            return None
        width, height = surface.get_size()
        if width <= 0 or height <= 0:
            return None
        return Bounds(width=float(width), height=float(height))

    def present(frame: Frame) -> None:
        renderer.draw(frame)
        hud.draw(frame)
        pygame.display.flip()

    driver = FrameDriver(world, bounds_provider=current_bounds, sink=present)
    clock = pygame.time.Clock()
    driver.start()
    try:
        while driver.running:
            clock.tick(config.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    driver.stop()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    driver.stop()
                elif event.type == pygame.KEYDOWN:
                    driver.input.key_down(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    driver.input.key_up(pygame.key.name(event.key))
                elif event.type == pygame.VIDEORESIZE:
                    resize_viewport(event.size)
                    hud_layout.update(event.size)
            if driver.running:
                driver.tick()
    finally:
        driver.stop()
        pygame.quit()


def run(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(parser, args)
    if args.headless is not None:
        run_headless(config, max(0, args.headless))
        return
    run_windowed(config)


if __name__ == "__main__":
    run()
