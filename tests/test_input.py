import pygame

from space_shooter.entities import Player
from space_shooter.input import Controller, InputHandler, KeyMapping


def poll(player):
    player.input_handler.poll_controller()
    return player.controller


def test_single_axis_key():
    player = Player()
    player.input_handler.key_down(pygame.K_w)

    assert poll(player) == Controller(move_x=0, move_y=-1, action_1=False)


def test_opposite_keys_cancel():
    player = Player()
    handler = player.input_handler
    handler.key_down(pygame.K_a)
    handler.key_down(pygame.K_d)
    handler.key_down(pygame.K_w)
    handler.key_down(pygame.K_s)

    controller = poll(player)
    assert controller.move_x == 0
    assert controller.move_y == 0


def test_controller_is_reset_every_poll():
    player = Player()
    handler = player.input_handler
    handler.key_down(pygame.K_SPACE)
    handler.key_down(pygame.K_d)
    assert poll(player) == Controller(move_x=1, move_y=0, action_1=True)

    handler.key_up(pygame.K_SPACE)
    handler.key_up(pygame.K_d)
    assert poll(player) == Controller()


def test_polling_twice_does_not_double_axes():
    player = Player()
    player.input_handler.key_down(pygame.K_s)

    poll(player)
    assert poll(player).move_y == 1


def test_unbound_keys_are_ignored():
    player = Player()
    player.input_handler.key_down(pygame.K_q)

    assert poll(player) == Controller()
    assert player.raw_input == {pygame.K_q: True}


def test_key_up_without_key_down():
    player = Player()
    player.input_handler.key_up(pygame.K_a)

    assert player.raw_input == {}


def test_handle_event_tracks_key_state():
    player = Player()
    handler = player.input_handler

    assert handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    assert player.raw_input == {pygame.K_d: True}

    assert handler.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_d))
    assert player.raw_input == {}

    assert not handler.handle_event(pygame.event.Event(pygame.MOUSEMOTION))


def test_custom_mappings():
    player = Player()
    handler = InputHandler(
        player,
        {
            "button": {pygame.K_RETURN: KeyMapping("enter", "action_1")},
            "axis": {
                pygame.K_LEFT: KeyMapping("left", "move_x", -1),
                pygame.K_RIGHT: KeyMapping("right", "move_x", 1),
            },
        },
    )
    handler.key_down(pygame.K_LEFT)
    handler.key_down(pygame.K_RETURN)
    handler.key_down(pygame.K_a)
    handler.poll_controller()

    assert player.controller.move_x == -1
    assert player.controller.action_1 is True
