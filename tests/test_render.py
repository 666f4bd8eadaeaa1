import pygame
from pygame import Vector2

from space_shooter.entities import Body, Enemy, Projectile
from space_shooter.render import DrawHud, ShooterRenderer

WHITE = pygame.Color(255, 255, 255)


def non_white(surface, rect):
    for x in range(rect.left, rect.right):
        for y in range(rect.top, rect.bottom):
            if surface.get_at((x, y)) != WHITE:
                return True
    return False


def test_frame_draws_bodies(world, config):
    world.entities.add(Enemy(position=Vector2(100, 200)))
    world.entities.add(Projectile(position=Vector2(200, 200)))
    world.entities.add(Body(position=Vector2(50, 300), velocity=Vector2(100, 0)))
    surface = pygame.Surface(config.canvas_size)

    ShooterRenderer(config).draw(surface, world)

    assert non_white(surface, pygame.Rect(145, 395, 11, 11))
    assert non_white(surface, pygame.Rect(95, 195, 11, 11))
    assert non_white(surface, pygame.Rect(198, 195, 5, 11))
    assert non_white(surface, pygame.Rect(50, 300, 11, 1))
    assert surface.get_at((150, 250)) == WHITE


def test_game_over_screen(world, config):
    renderer = ShooterRenderer(config)
    surface = pygame.Surface(config.canvas_size)
    middle = pygame.Rect(100, 230, 100, 20)

    renderer.draw(surface, world)
    assert not non_white(surface, middle)

    world.player.health = 0
    renderer.draw(surface, world)
    assert non_white(surface, middle)


def test_hud_lines(world):
    board = world.scoreboard
    board.enemies_spawned = 8
    board.enemies_hit = 1
    world.time += 12.5
    board.record_step(world.time, player_dead=False)

    assert DrawHud().lines(world) == [
        "loop count 1",
        "Time alive: 12",
        "Enemies Spawned: 8",
        "Score: 42",
        "High Score: 42",
    ]


def test_present_scales_canvas(config):
    canvas = pygame.Surface((300, 500))
    canvas.fill((255, 0, 0))
    screen = pygame.Surface((600, 1000))

    ShooterRenderer(config).present(canvas, screen)

    assert screen.get_at((599, 999)) == pygame.Color(255, 0, 0)
    assert screen.get_at((0, 0)) == pygame.Color(255, 0, 0)
