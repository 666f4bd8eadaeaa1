"""
Space Shooter utils
"""

from __future__ import annotations

import logging

import pygame

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("space_shooter")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logging handler once for the application.

    :param level: Level name (``"DEBUG"``) or number
    :type level: str | int
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return min(max(lo, value), hi)


Rect = tuple[float, float, float, float]


def aabb_overlap(a: Rect, b: Rect) -> bool:
    """
    Check if two axis-aligned boxes overlap.

    Boxes are ``(x, y, width, height)`` with ``(x, y)`` the min corner.
    Edges that only touch do not count as an overlap.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    :raise pygame.error: If the display mode cannot be set
    """
    try:
        screen = pygame.display.set_mode((width, height))
    except pygame.error as e:
        logger.error(f"Failed to set display mode {width}x{height}: {e}")
        raise

    pygame.display.set_caption(caption)

    return screen
