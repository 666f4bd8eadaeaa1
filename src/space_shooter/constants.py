"""
Constants for the game.
"""

from __future__ import annotations

TITLE = "Space Shooter"

FPS = 60
CANVAS_SIZE = (300, 500)
HI_DPI_SCALE = 2

BACKGROUND_COLOR = (255, 255, 255)

BODY_SIZE = (10, 10)
BODY_HEALTH = 100

PLAYER_SPEED = 250.0
PLAYER_START_OFFSET_Y = 100  # from the bottom edge

ENEMY_SPEED = 270.0
ENEMY_SPAWN_Y = -100
ENEMY_CONTACT_DAMAGE = 25
ENEMY_SPAWN_INTERVAL = 0.1  # seconds
ENEMY_SPAWN_BATCH = 4

PROJECTILE_SPEED = 350.0
PROJECTILE_OFFSET_Y = 14  # above the player
PROJECTILE_COOLDOWN = 0.5  # seconds
PROJECTILE_WIDTH = 4

# bodies may sit this far above the canvas before they are clamped
TOP_MARGIN = 100

POINTS_PER_HIT = 30
