"""
Space Shooter world
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

import pygame

from space_shooter.collision import CollisionHandler
from space_shooter.config import GameConfig
from space_shooter.constants import PLAYER_START_OFFSET_Y, POINTS_PER_HIT
from space_shooter.entities import EntityTable, Player
from space_shooter.spawners import EnemySpawner, ProjectileSpawner
from space_shooter.utils import logger


@dataclass
class HudSnapshot:
    """
    HUD values as of the last step the player was alive.
    """

    loop_count: int = 0
    time_alive: int = 0
    enemies_spawned: int = 0
    score: int = 0
    high_score: int = 0


@dataclass
class Scoreboard:
    """
    Counters shown on the HUD.

    ``high_score`` survives restarts, everything else is reset by ``reset``.
    The HUD reads ``snapshot``, which stops changing while the player is dead.
    """

    loop_count: int = 0
    enemies_spawned: int = 0
    enemies_hit: int = 0
    score: int = 0
    high_score: int = 0
    new_high_score: bool = False
    life_started_at: float = 0.0
    snapshot: HudSnapshot = field(default_factory=HudSnapshot)

    def reset(self, now: float):
        self.loop_count = 0
        self.enemies_spawned = 0
        self.enemies_hit = 0
        self.score = 0
        self.new_high_score = False
        self.life_started_at = now
        self.snapshot = HudSnapshot(high_score=self.high_score)

    def time_alive(self, now: float) -> float:
        return now - self.life_started_at

    def record_step(self, now: float, player_dead: bool):
        """
        Account for one finished step.

        While the player is dead the life start follows the clock, so the
        next game starts counting time alive from zero, and the HUD snapshot
        keeps the values of the last living step.
        """
        self.loop_count += 1
        if player_dead:
            self.life_started_at = now
            return

        time_alive = self.time_alive(now)
        self.score = math.floor(POINTS_PER_HIT * self.enemies_hit + time_alive)
        if self.high_score < self.score:
            self.high_score = self.score
            self.new_high_score = True

        self.snapshot = HudSnapshot(
            loop_count=self.loop_count,
            time_alive=math.floor(time_alive),
            enemies_spawned=self.enemies_spawned,
            score=self.score,
            high_score=self.high_score,
        )


@dataclass
class World:
    """
    All simulation state of one game session.
    """

    config: GameConfig = field(default_factory=GameConfig)
    entities: EntityTable = field(default_factory=EntityTable)
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    player: Player | None = None
    enemy_spawner: EnemySpawner = field(default_factory=EnemySpawner)
    projectile_spawner: ProjectileSpawner = field(
        default_factory=ProjectileSpawner
    )
    collision_handler: CollisionHandler = field(
        default_factory=CollisionHandler
    )
    rng: random.Random = field(default_factory=random.Random)
    time: float = 0.0  # simulated seconds since the world was created

    def __post_init__(self):
        if self.config.seed is not None:
            self.rng.seed(self.config.seed)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def start(self):
        """
        Start a new game: fresh player, spawners and counters.

        The high score and the running body ids carry over.
        """
        self.entities.clear()
        self.scoreboard.reset(self.time)
        self.player = self.entities.add(
            Player(
                position=pygame.Vector2(
                    self.width / 2, self.height - PLAYER_START_OFFSET_Y
                )
            )
        )
        self.enemy_spawner = EnemySpawner()
        self.projectile_spawner = ProjectileSpawner()
        self.collision_handler = CollisionHandler()
        logger.debug(f"Game started, player id {self.player.id}")
