"""
Space Shooter game application.
"""

from __future__ import annotations

import argparse
import time
from typing import Sequence

import pygame

from space_shooter.config import GameConfig
from space_shooter.driver import FixedStepDriver
from space_shooter.scenes import ShooterScene
from space_shooter.utils import configure_logging, logger, set_screen


class SpaceShooter:
    """
    Window, event pump and frame loop around the shooter scene.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        :param config: Game configuration
        :type config: GameConfig | None
        """
        self.config = config or GameConfig()
        self._carry_on = True
        self._clock = pygame.time.Clock()

        self.scene = ShooterScene(self.config)
        self.driver = FixedStepDriver(self.config.step_seconds, self._step)

        self._screen: pygame.Surface | None = None
        self._canvas: pygame.Surface | None = None

    def _set_screen(self) -> pygame.Surface:
        width, height = self.config.window_size
        logger.debug(f"Setting screen {width}x{height}")

        return set_screen(self.config.title, width, height)

    def _step(self, dt: float):
        self.scene.update(dt)
        self.scene.draw(self._canvas)

    def handle_events(self):
        """
        Handle the window and keyboard events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.debug("Escape pressed, quitting the game")
                self._carry_on = False
            else:
                self.scene.handle_event(event)

    def run(self):
        """
        Run the game until the window is closed
        """
        pygame.init()
        try:
            self._screen = self._set_screen()
            self._canvas = pygame.Surface(self.config.canvas_size)
            self.scene.start()

            logger.info(f"Starting {self.config.title}...")
            while self._carry_on:
                self.handle_events()
                if self.driver.tick(time.perf_counter()):
                    self.scene.renderer.present(self._canvas, self._screen)
                    pygame.display.flip()
                # caps the frame rate, the driver decides how many steps run
                self._clock.tick(self.config.fps * 2)
        finally:
            pygame.quit()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Space Shooter")
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Fixed update rate in steps per second (default: 60)",
    )
    parser.add_argument("--width", type=int, default=None, help="Canvas width")
    parser.add_argument("--height", type=int, default=None, help="Canvas height")
    parser.add_argument(
        "--no-hi-dpi",
        action="store_true",
        help="Do not scale the canvas up 2x",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy spawn positions",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> dict:
    """
    Build the nested settings dictionary for ``GameConfig.from_dict``,
    leaving out anything not given on the command line.
    """
    window = {}
    if args.width is not None:
        window["width"] = args.width
    if args.height is not None:
        window["height"] = args.height
    if args.no_hi_dpi:
        window["hi_dpi"] = False

    settings_data: dict = {"window": window}
    if args.fps is not None:
        settings_data["update_rate"] = {"fps": args.fps}
    if args.seed is not None:
        settings_data["seed"] = args.seed
    return settings_data


def run(argv: Sequence[str] | None = None):
    """
    Main entry point for Space Shooter.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    config = GameConfig.from_dict(settings_from_args(args))
    logger.info(config.to_dict())

    SpaceShooter(config).run()


if __name__ == "__main__":
    run()
