"""
Game configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from space_shooter.constants import (
    BACKGROUND_COLOR,
    CANVAS_SIZE,
    FPS,
    HI_DPI_SCALE,
    TITLE,
)

_SECTIONS = {
    "window": ("width", "height", "title", "hi_dpi"),
    "renderer": ("background_color",),
    "update_rate": ("fps",),
}
_TOP_LEVEL = ("seed",)


@dataclass
class GameConfig:
    """
    Tunables for one game session.

    Built from the same nested dictionary shape the app assembles from
    command line arguments::

        {
            "window": {"width": 300, "height": 500, "hi_dpi": True},
            "renderer": {"background_color": (255, 255, 255)},
            "update_rate": {"fps": 60},
            "seed": None,
        }
    """

    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    title: str = TITLE
    hi_dpi: bool = True
    background_color: tuple[int, int, int] = field(
        default_factory=lambda: BACKGROUND_COLOR
    )
    fps: int = FPS
    seed: int | None = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def step_seconds(self) -> float:
        """Length of one fixed update step in seconds."""
        return 1 / self.fps

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def scale(self) -> int:
        return HI_DPI_SCALE if self.hi_dpi else 1

    @property
    def window_size(self) -> tuple[int, int]:
        return self.width * self.scale, self.height * self.scale

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """
        Build a config from a nested settings dictionary.

        :param data: Settings dictionary, every section optional
        :type data: dict[str, Any]

        :return: GameConfig
        :raise ValueError: On unknown sections or keys, or invalid values
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key in _TOP_LEVEL:
                kwargs[key] = value
                continue
            if key not in _SECTIONS:
                raise ValueError(f"Unknown config section: {key!r}")
            for name, item in (value or {}).items():
                if name not in _SECTIONS[key]:
                    raise ValueError(f"Unknown key {name!r} in section {key!r}")
                kwargs[name] = item

        if "background_color" in kwargs:
            kwargs["background_color"] = tuple(kwargs["background_color"])

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "window": {
                "width": self.width,
                "height": self.height,
                "title": self.title,
                "hi_dpi": self.hi_dpi,
            },
            "renderer": {"background_color": self.background_color},
            "update_rate": {"fps": self.fps},
            "seed": self.seed,
        }
