"""
Collision handling between projectiles and enemies.
"""

from __future__ import annotations

from space_shooter.entities import Body, Enemy, EntityTable, Projectile


def is_hit(first: Body, second: Body) -> bool:
    """A projectile (first of the pair) touching an enemy."""
    return isinstance(first, Projectile) and isinstance(second, Enemy)


class CollisionHandler:
    """
    Checks every ordered pair of live bodies for overlap.

    There is no broad phase: each step is O(n^2) over the table in insertion
    order. Hit pairs are only queued for removal, so the table is never
    mutated while it is walked.
    """

    def __init__(self):
        self.hits = 0

    def update(self, entities: EntityTable) -> int:
        """
        Run one collision pass.

        :param entities: Live bodies
        :type entities: EntityTable

        :return: Number of hits in this pass
        :rtype: int
        """
        hits = 0
        for first in entities:
            for second in entities:
                if first.id == second.id:
                    continue
                if not is_hit(first, second):
                    continue
                if first.overlaps(second):
                    first.remove()
                    second.remove()
                    hits += 1

        self.hits += hits
        return hits
