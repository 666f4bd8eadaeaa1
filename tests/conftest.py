import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from space_shooter.config import GameConfig  # noqa: E402
from space_shooter.scenes import ShooterScene  # noqa: E402
from space_shooter.world import World  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def config():
    return GameConfig(hi_dpi=False, seed=1234)


@pytest.fixture
def world(config):
    w = World(config=config)
    w.start()
    return w


@pytest.fixture
def scene(config):
    s = ShooterScene(config)
    s.start()
    return s
