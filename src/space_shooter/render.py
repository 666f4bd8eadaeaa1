"""
Drawing of the world, HUD and game over screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from space_shooter.config import GameConfig

if TYPE_CHECKING:
    from space_shooter.world import World

TEXT_COLOR = (0, 0, 0)
HIGH_SCORE_COLOR = (255, 215, 0)

HUD_FONT_SIZE = 10
TITLE_FONT_SIZE = 30
HINT_FONT_SIZE = 12


class Drawable:
    """
    Something the renderer draws onto the canvas
    """

    def draw(self, surface: pygame.Surface, world: World, fonts: Fonts):
        raise NotImplementedError("Subclasses must implement this method")


class Fonts:
    """
    Lazily created default pygame fonts, cached per size.
    """

    def __init__(self):
        self._cache: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        if size not in self._cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._cache[size] = pygame.font.Font(None, size)
        return self._cache[size]


def blit_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    position: tuple[float, float],
    color=TEXT_COLOR,
    align: str = "left",
):
    """
    Render a line of text anchored at its bottom left, or bottom center
    when ``align`` is ``"center"``.
    """
    image = font.render(text, True, color)
    rect = image.get_rect()
    if align == "center":
        rect.midbottom = (round(position[0]), round(position[1]))
    else:
        rect.bottomleft = (round(position[0]), round(position[1]))
    surface.blit(image, rect)


class DrawBodies(Drawable):
    def draw(self, surface: pygame.Surface, world: World, fonts: Fonts):
        for body in world.entities:
            body.draw(surface)


class DrawHud(Drawable):
    """
    Counters in the top left corner, frozen while the player is dead.
    """

    def lines(self, world: World) -> list[str]:
        hud = world.scoreboard.snapshot
        return [
            f"loop count {hud.loop_count}",
            f"Time alive: {hud.time_alive}",
            f"Enemies Spawned: {hud.enemies_spawned}",
            f"Score: {hud.score}",
            f"High Score: {hud.high_score}",
        ]

    def draw(self, surface: pygame.Surface, world: World, fonts: Fonts):
        font = fonts.get(HUD_FONT_SIZE)
        line_height = font.get_linesize()
        for i, line in enumerate(self.lines(world)):
            blit_text(surface, font, line, (4, 4 + (i + 1) * line_height))


class DrawGameOver(Drawable):
    def draw(self, surface: pygame.Surface, world: World, fonts: Fonts):
        player = world.player
        if player is None or not player.is_dead():
            return

        cx = world.width / 2
        cy = world.height / 2

        blit_text(
            surface,
            fonts.get(TITLE_FONT_SIZE),
            "Game Over",
            (cx, cy),
            align="center",
        )
        blit_text(
            surface,
            fonts.get(HINT_FONT_SIZE),
            "press space to restart",
            (cx, cy + 18),
            align="center",
        )
        if world.scoreboard.new_high_score:
            blit_text(
                surface,
                fonts.get(TITLE_FONT_SIZE),
                "New High Score!",
                (cx, cy - 30),
                color=HIGH_SCORE_COLOR,
                align="center",
            )


class ShooterRenderer:
    """
    Draws one frame of the world onto a canvas sized surface.
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.fonts = Fonts()
        self.draw_ops: list[Drawable] = [DrawBodies(), DrawHud(), DrawGameOver()]

    def draw(self, surface: pygame.Surface, world: World):
        # clears the previous frame
        surface.fill(self.config.background_color)
        for op in self.draw_ops:
            op.draw(surface, world, self.fonts)

    def present(self, canvas: pygame.Surface, screen: pygame.Surface):
        """
        Copy the canvas to the window, scaled up on hi-DPI screens.
        """
        if canvas.get_size() == screen.get_size():
            screen.blit(canvas, (0, 0))
        else:
            pygame.transform.scale(canvas, screen.get_size(), screen)
