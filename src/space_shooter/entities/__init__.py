"""
Space Shooter entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

import pygame

from space_shooter.constants import (
    BODY_HEALTH,
    BODY_SIZE,
    ENEMY_CONTACT_DAMAGE,
    ENEMY_SPEED,
    PLAYER_SPEED,
    PROJECTILE_SPEED,
    PROJECTILE_WIDTH,
    TOP_MARGIN,
)
from space_shooter.input import Controller, InputHandler
from space_shooter.utils import aabb_overlap, clamp

if TYPE_CHECKING:
    from space_shooter.world import World


@dataclass
class Size2D:
    width: float = BODY_SIZE[0]
    height: float = BODY_SIZE[1]


@dataclass(eq=False)
class Body:
    """
    Basic physics body in the world. Holds everything needed to be updated,
    drawn, checked for collision and removed.
    """

    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    velocity: pygame.Vector2 = field(default_factory=pygame.Vector2)
    size: Size2D = field(default_factory=Size2D)
    health: float = BODY_HEALTH
    id: int = -1  # assigned by the entity table
    table: EntityTable | None = field(default=None, repr=False)

    @property
    def half_size(self) -> Size2D:
        return Size2D(self.size.width / 2, self.size.height / 2)

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Bounding box as (x, y, width, height), position is the min corner."""
        return (
            self.position.x,
            self.position.y,
            self.size.width,
            self.size.height,
        )

    def is_dead(self) -> bool:
        return self.health <= 0

    def overlaps(self, other: Body) -> bool:
        return aabb_overlap(self.rect, other.rect)

    def update(self, delta_time: float, world: World):
        """
        Move the body along its velocity.

        :param delta_time: Seconds since last update
        :type delta_time: float

        :param world: The world the body lives in
        :type world: World
        """
        self.position += delta_time * self.velocity

    def draw(self, surface: pygame.Surface):
        """
        Draw a green line along the velocity, a tenth of its length.
        """
        x, y = self.position
        pygame.draw.line(
            surface,
            (0, 255, 0),
            (x, y),
            (x + self.velocity.x / 10, y + self.velocity.y / 10),
        )

    def remove(self):
        """
        Mark this body to be removed at the end of the update.
        """
        if self.table is not None:
            self.table.queue_removal(self.id)

    def _clamp_to(self, width: float, height: float, top: float = 0.0):
        self.position.x = clamp(self.position.x, 0, width)
        self.position.y = clamp(self.position.y, top, height)


@dataclass(eq=False)
class Player(Body):
    """
    Player body, driven by its controller.
    """

    controller: Controller = field(default_factory=Controller)
    raw_input: dict[int, bool] = field(default_factory=dict)
    speed: float = PLAYER_SPEED
    input_handler: InputHandler | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.input_handler is None:
            self.input_handler = InputHandler(self)

    def update(self, delta_time: float, world: World):
        self.velocity.x = self.controller.move_x * self.speed
        self.velocity.y = self.controller.move_y * self.speed

        super().update(delta_time, world)

        self._clamp_to(world.width, world.height)

    def draw(self, surface: pygame.Surface):
        """Triangle pointing up, centered on the position."""
        x, y = self.position
        half = self.half_size
        points = [
            (x, y - half.height),
            (x + half.width, y + half.height),
            (x - half.width, y + half.height),
        ]
        pygame.draw.polygon(surface, (0, 0, 0), points, width=1)


@dataclass(eq=False)
class Enemy(Body):
    """
    Enemy body falling towards the bottom of the canvas.
    """

    speed: float = ENEMY_SPEED
    contact_damage: float = ENEMY_CONTACT_DAMAGE

    def update(self, delta_time: float, world: World):
        self.velocity.y = self.speed

        super().update(delta_time, world)

        player = world.player
        if player is not None and not player.is_dead() and self.overlaps(player):
            self.remove()
            player.health -= self.contact_damage

        self._clamp_to(world.width, world.height, top=-TOP_MARGIN)
        if self.position.y == world.height:
            self.remove()

    def draw(self, surface: pygame.Surface):
        """Triangle pointing down, centered on the position."""
        x, y = self.position
        half = self.half_size
        points = [
            (x, y + half.height),
            (x - half.width, y - half.height),
            (x + half.width, y - half.height),
        ]
        pygame.draw.polygon(surface, (255, 0, 0), points, width=1)


@dataclass(eq=False)
class Projectile(Body):
    """
    Projectile fired upwards by the player.
    """

    speed: float = PROJECTILE_SPEED

    def update(self, delta_time: float, world: World):
        self.velocity.y = -self.speed

        super().update(delta_time, world)

        self._clamp_to(world.width, world.height, top=-TOP_MARGIN)
        if self.position.y <= 0:
            self.remove()

    def draw(self, surface: pygame.Surface):
        """Filled blue bar, narrower than the body."""
        x, y = self.position
        rect = pygame.Rect(
            round(x - PROJECTILE_WIDTH / 2),
            round(y - self.half_size.height),
            PROJECTILE_WIDTH,
            round(self.size.height),
        )
        pygame.draw.rect(surface, (0, 0, 255), rect)


class EntityTable:
    """
    Maps body ids to live bodies, in insertion order.

    Bodies are never deleted while the table is being iterated: ``remove()``
    only queues the id and ``purge()`` deletes queued ids at the end of the
    update.
    """

    def __init__(self):
        self._entities: dict[int, Body] = {}
        self._removal_queue: list[int] = []
        self._running_id = 0

    def add(self, body: Body) -> Body:
        """
        Give the body the next running id and insert it.

        :raises ValueError: If the body is already in this table
        """
        if body in self:
            raise ValueError(f"Body {body.id} is already in the table")

        body.id = self._running_id
        body.table = self
        self._running_id += 1
        self._entities[body.id] = body
        return body

    def queue_removal(self, body_id: int):
        self._removal_queue.append(body_id)

    def is_queued(self, body_id: int) -> bool:
        return body_id in self._removal_queue

    def purge(self) -> int:
        """
        Delete every queued body.

        :return: Number of bodies actually removed
        :rtype: int
        """
        removed = 0
        for body_id in self._removal_queue:
            if self._entities.pop(body_id, None) is not None:
                removed += 1
        self._removal_queue = []
        return removed

    def clear(self):
        """Drop every body and pending removal, ids keep counting."""
        self._entities = {}
        self._removal_queue = []

    def values(self):
        return self._entities.values()

    def of_type(self, kind: type) -> list[Body]:
        return [b for b in self._entities.values() if isinstance(b, kind)]

    def __contains__(self, body: object) -> bool:
        return isinstance(body, Body) and self._entities.get(body.id) is body

    def __iter__(self) -> Iterator[Body]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)
