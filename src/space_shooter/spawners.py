"""
Timed spawning of enemies and projectiles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from space_shooter.constants import (
    ENEMY_SPAWN_BATCH,
    ENEMY_SPAWN_INTERVAL,
    ENEMY_SPAWN_Y,
    PROJECTILE_COOLDOWN,
    PROJECTILE_OFFSET_Y,
)
from space_shooter.entities import Enemy, Projectile

if TYPE_CHECKING:
    from space_shooter.world import World


class EnemySpawner:
    """
    Emits a batch of enemies above the canvas every ``interval`` seconds.
    """

    def __init__(
        self,
        interval: float = ENEMY_SPAWN_INTERVAL,
        batch: int = ENEMY_SPAWN_BATCH,
    ):
        self.interval = interval
        self.batch = batch
        self.accumulated = 0.0

    def update(self, delta_time: float, world: World) -> list[Enemy]:
        """
        Advance the timer and spawn at most one batch.

        :param delta_time: Seconds since last update
        :type delta_time: float

        :param world: World to spawn into
        :type world: World

        :return: Enemies spawned in this update
        :rtype: list[Enemy]
        """
        self.accumulated += delta_time
        if self.accumulated <= self.interval:
            return []

        spawned = [self._spawn(world) for _ in range(self.batch)]
        self.accumulated -= self.interval
        world.scoreboard.enemies_spawned += len(spawned)
        return spawned

    @staticmethod
    def _spawn(world: World) -> Enemy:
        x = world.rng.randint(1, world.width)
        return world.entities.add(Enemy(position=pygame.Vector2(x, ENEMY_SPAWN_Y)))


class ProjectileSpawner:
    """
    Fires one projectile from the player while the action button is held,
    at most once per ``cooldown`` seconds.
    """

    def __init__(self, cooldown: float = PROJECTILE_COOLDOWN):
        self.cooldown = cooldown
        # ready to fire on the first press
        self.elapsed = 1.0

    def update(self, delta_time: float, world: World) -> Projectile | None:
        self.elapsed += delta_time

        player = world.player
        if player is None or not player.controller.action_1:
            return None
        if self.elapsed <= self.cooldown:
            return None

        x, y = player.position
        projectile = world.entities.add(
            Projectile(position=pygame.Vector2(x, y - PROJECTILE_OFFSET_Y))
        )
        self.elapsed = 0.0
        return projectile
