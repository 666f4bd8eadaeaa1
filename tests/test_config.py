import pytest

from space_shooter.app import parse_args, settings_from_args
from space_shooter.config import GameConfig


def test_defaults():
    config = GameConfig()

    assert config.step_seconds == pytest.approx(1 / 60)
    assert config.canvas_size == (300, 500)
    assert config.window_size == (600, 1000)
    assert config.background_color == (255, 255, 255)


def test_without_hi_dpi():
    config = GameConfig(hi_dpi=False)

    assert config.scale == 1
    assert config.window_size == config.canvas_size


def test_from_dict():
    config = GameConfig.from_dict(
        {
            "window": {"width": 400, "height": 600, "hi_dpi": False},
            "renderer": {"background_color": [0, 0, 0]},
            "update_rate": {"fps": 30},
            "seed": 7,
        }
    )

    assert config.canvas_size == (400, 600)
    assert not config.hi_dpi
    assert config.background_color == (0, 0, 0)
    assert config.step_seconds == pytest.approx(1 / 30)
    assert config.seed == 7


def test_to_dict_feeds_from_dict():
    config = GameConfig(width=320, fps=50, seed=3)

    assert GameConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [
        {"audio": {"enable": False}},
        {"window": {"depth": 32}},
        {"window": {"width": 0}},
        {"window": {"height": -5}},
        {"update_rate": {"fps": 0}},
    ],
)
def test_invalid_settings(data):
    with pytest.raises(ValueError):
        GameConfig.from_dict(data)


def test_cli_arguments():
    args = parse_args(["--no-hi-dpi", "--fps", "30", "--seed", "3", "--width", "200"])
    config = GameConfig.from_dict(settings_from_args(args))

    assert config.fps == 30
    assert config.seed == 3
    assert config.width == 200
    assert config.height == 500
    assert not config.hi_dpi
    assert args.log_level == "INFO"


def test_cli_defaults():
    config = GameConfig.from_dict(settings_from_args(parse_args([])))

    assert config == GameConfig()
