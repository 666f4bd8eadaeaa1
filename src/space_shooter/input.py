"""
Keyboard input handling.

Raw key state is collected from keydown/keyup events into the player's
``raw_input`` table. Once per update step the handler turns that table into
the player's normalized controller: buttons are booleans, axes are signed
integers accumulated from every held key, so opposite keys cancel out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from space_shooter.entities import Player


@dataclass
class Controller:
    """
    Per-frame controller state of a player
    """

    move_x: int = 0
    move_y: int = 0
    action_1: bool = False


@dataclass(frozen=True)
class KeyMapping:
    """
    Binds a key code to a controller state
    """

    key: str
    state: str
    mod: int = 0


KeyCodeMappings = dict[str, dict[int, KeyMapping]]


def default_key_mappings() -> KeyCodeMappings:
    return {
        "button": {
            pygame.K_SPACE: KeyMapping("space", "action_1"),
        },
        "axis": {
            pygame.K_d: KeyMapping("right", "move_x", 1),
            pygame.K_a: KeyMapping("left", "move_x", -1),
            pygame.K_w: KeyMapping("up", "move_y", -1),
            pygame.K_s: KeyMapping("down", "move_y", 1),
        },
    }


class InputHandler:
    """
    Updates the controller of the attached player from raw key state.
    """

    def __init__(
        self, player: Player, key_code_mappings: KeyCodeMappings | None = None
    ):
        """
        :param player: Player whose controller is driven
        :type player: Player

        :param key_code_mappings: Replacement button/axis bindings
        :type key_code_mappings: KeyCodeMappings | None
        """
        self.player = player
        self.key_code_mappings = key_code_mappings or default_key_mappings()

    def key_down(self, key_code: int):
        self.player.raw_input[key_code] = True

    def key_up(self, key_code: int):
        self.player.raw_input.pop(key_code, None)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Feed a pygame event into the raw key table.

        :param event: Any pygame event
        :type event: pygame.event.Event

        :return: True if the event was a key event
        :rtype: bool
        """
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
            return True
        return False

    def reset_controller(self):
        controller = self.player.controller

        for mapping in self.key_code_mappings["button"].values():
            setattr(controller, mapping.state, False)

        for mapping in self.key_code_mappings["axis"].values():
            setattr(controller, mapping.state, 0)

    def poll_controller(self):
        """
        Reset the controller, then accumulate every held key into it.
        """
        self.reset_controller()
        controller = self.player.controller
        raw_input = self.player.raw_input

        for key_code, mapping in self.key_code_mappings["button"].items():
            if raw_input.get(key_code) is True:
                setattr(controller, mapping.state, True)

        for key_code, mapping in self.key_code_mappings["axis"].items():
            if raw_input.get(key_code) is True:
                value = getattr(controller, mapping.state)
                setattr(controller, mapping.state, value + mapping.mod)
