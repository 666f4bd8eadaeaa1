"""
Space Shooter Scene
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame

from space_shooter.config import GameConfig
from space_shooter.render import ShooterRenderer
from space_shooter.utils import logger
from space_shooter.world import World


@dataclass
class ShooterTickContext:
    """
    State handed to every system for one fixed step
    """

    world: World
    dt: float


class System(Protocol):
    name: str
    order: int

    def step(self, ctx: ShooterTickContext): ...


@dataclass
class InputSystem:
    """
    Poll raw key state into the player's controller.
    """

    name: str = "shooter_input"
    order: int = 10

    def step(self, ctx: ShooterTickContext):
        player = ctx.world.player
        if player is not None and player.input_handler is not None:
            player.input_handler.poll_controller()


@dataclass
class MoveSystem:
    """
    Update every body in table order.
    """

    name: str = "shooter_move"
    order: int = 20

    def step(self, ctx: ShooterTickContext):
        world = ctx.world
        for body in world.entities:
            body.update(ctx.dt, world)


@dataclass
class CollisionSystem:
    name: str = "shooter_collision"
    order: int = 30

    def step(self, ctx: ShooterTickContext):
        world = ctx.world
        hits = world.collision_handler.update(world.entities)
        world.scoreboard.enemies_hit += hits


@dataclass
class PlayerDeathSystem:
    """
    Take a dead player off the table, the world keeps the reference so the
    restart check can still read its controller.
    """

    name: str = "shooter_player_death"
    order: int = 35

    def step(self, ctx: ShooterTickContext):
        world = ctx.world
        player = world.player
        if player is None or not player.is_dead():
            return
        if player in world.entities and not world.entities.is_queued(player.id):
            logger.debug(
                f"Player died, score {world.scoreboard.score}, "
                f"hits {world.scoreboard.enemies_hit}"
            )
            player.remove()


@dataclass
class CleanupSystem:
    name: str = "shooter_cleanup"
    order: int = 40

    def step(self, ctx: ShooterTickContext):
        ctx.world.entities.purge()


@dataclass
class EnemySpawnSystem:
    name: str = "shooter_enemy_spawn"
    order: int = 50

    def step(self, ctx: ShooterTickContext):
        ctx.world.enemy_spawner.update(ctx.dt, ctx.world)


@dataclass
class ProjectileSpawnSystem:
    name: str = "shooter_projectile_spawn"
    order: int = 51

    def step(self, ctx: ShooterTickContext):
        ctx.world.projectile_spawner.update(ctx.dt, ctx.world)


@dataclass
class ScoreSystem:
    name: str = "shooter_score"
    order: int = 60

    def step(self, ctx: ShooterTickContext):
        world = ctx.world
        dead = world.player is None or world.player.is_dead()
        world.scoreboard.record_step(world.time, dead)


@dataclass
class RestartSystem:
    """
    A dead player pressing the action button starts a new game.
    """

    name: str = "shooter_restart"
    order: int = 70

    def step(self, ctx: ShooterTickContext):
        player = ctx.world.player
        if player is None:
            return
        if player.is_dead() and player.controller.action_1:
            logger.debug("Restarting the game")
            ctx.world.start()


def default_systems() -> list[System]:
    return [
        InputSystem(),
        MoveSystem(),
        CollisionSystem(),
        PlayerDeathSystem(),
        CleanupSystem(),
        EnemySpawnSystem(),
        ProjectileSpawnSystem(),
        ScoreSystem(),
        RestartSystem(),
    ]


class ShooterScene:
    """
    Owns the world and runs its systems once per fixed step.
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self.world = World(config=self.config)
        self.systems: list[System] = sorted(
            default_systems(), key=lambda s: s.order
        )
        self.renderer = ShooterRenderer(self.config)

    def start(self):
        self.world.start()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route key events to the current player's input handler."""
        player = self.world.player
        if player is None or player.input_handler is None:
            return False
        return player.input_handler.handle_event(event)

    def update(self, dt: float):
        """
        Advance the world by one fixed step.

        :param dt: Step length in seconds
        :type dt: float
        """
        self.world.time += dt
        ctx = ShooterTickContext(world=self.world, dt=dt)
        for system in self.systems:
            system.step(ctx)

    def draw(self, surface: pygame.Surface):
        self.renderer.draw(surface, self.world)
