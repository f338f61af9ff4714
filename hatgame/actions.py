"""Turning keyboard and touch input into a player movement direction."""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum

from hatgame.vec import Vec2

FOLLOW_EPSILON = 5.0


class GameControl(Enum):
    """A movement direction and the keys that trigger it."""

    UP = ("W", "Up")
    DOWN = ("S", "Down")
    LEFT = ("A", "Left")
    RIGHT = ("D", "Right")

    def pressed(self, pressed_keys: Collection[str]) -> bool:
        return any(key in pressed_keys for key in self.value)


def get_movement(control: GameControl, pressed_keys: Collection[str]) -> float:
    return 1.0 if control.pressed(pressed_keys) else 0.0


def player_movement(
    pressed_keys: Collection[str],
    touch_position: Vec2 | None,
    player_position: Vec2,
    is_paused: bool,
) -> Vec2 | None:
    """Unit direction the player wants to move in.

    A touch further than ``FOLLOW_EPSILON`` from the player overrides the
    keyboard. Returns None when there is no movement or input is paused.
    """
    if is_paused:
        return None

    movement = Vec2(
        get_movement(GameControl.RIGHT, pressed_keys)
        - get_movement(GameControl.LEFT, pressed_keys),
        get_movement(GameControl.UP, pressed_keys)
        - get_movement(GameControl.DOWN, pressed_keys),
    )

    if touch_position is not None:
        diff = touch_position - player_position
        if diff.length() > FOLLOW_EPSILON:
            movement = diff.normalize()

    if movement == Vec2.ZERO:
        return None
    return movement.normalize()