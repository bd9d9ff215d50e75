"""Keyboard input decoding."""

from enum import Enum

import pygame

from qrpg.core.settings import KeyBindings


class InputCommand(str, Enum):
    """Commands a key press can map to."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    EXIT = "exit"
    NONE = "none"


class PlayerAction(str, Enum):
    """Outcome of handling one input."""

    TOOK_TURN = "took_turn"
    DIDNT_TAKE_TURN = "didnt_take_turn"
    EXIT = "exit"


MOVE_DIRECTIONS = {
    InputCommand.MOVE_UP: (0, -1),
    InputCommand.MOVE_DOWN: (0, 1),
    InputCommand.MOVE_LEFT: (-1, 0),
    InputCommand.MOVE_RIGHT: (1, 0),
}


def decode_key(event: pygame.event.Event, keybindings: KeyBindings) -> InputCommand:
    """Decode a pygame event into an input command."""
    if event.type == pygame.QUIT:
        return InputCommand.EXIT
    if event.type != pygame.KEYDOWN:
        return InputCommand.NONE

    key = event.key
    if key == keybindings.fullscreen and getattr(event, "mod", 0) & pygame.KMOD_ALT:
        return InputCommand.TOGGLE_FULLSCREEN
    if key == keybindings.exit:
        return InputCommand.EXIT

    direction = keybindings.get_movement_direction(key)
    for command, command_direction in MOVE_DIRECTIONS.items():
        if direction == command_direction:
            return command
    return InputCommand.NONE
