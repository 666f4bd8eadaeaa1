"""Scenes of the game"""

from .shooter import ShooterScene, ShooterTickContext

__all__ = ["ShooterScene", "ShooterTickContext"]
