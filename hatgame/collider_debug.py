"""Scaling and colouring of the debug sprites drawn over colliders."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from enum import Enum

from hatgame.collider import Collider, Collision, RectShape
from hatgame.vec import Vec3

DEBUG_TEXTURE_SIZE = 128.0

RED = (1.0, 0.0, 0.0, 1.0)
WHITE = (1.0, 1.0, 1.0, 1.0)


class ColliderDebugSpriteState(Enum):
    OFF = "off"
    ON = "on"


def _scale(width: float, height: float, parent_scale: Vec3) -> Vec3:
    return Vec3(
        width / DEBUG_TEXTURE_SIZE / parent_scale.x,
        height / DEBUG_TEXTURE_SIZE / parent_scale.y,
        1.0,
    )


def debug_sprite_scale(collider: Collider, parent_scale: Vec3) -> Vec3:
    """Scale that makes the debug texture cover the collider."""
    shape = collider.shape
    if isinstance(shape, RectShape):
        return _scale(shape.size.x, shape.size.y, parent_scale)
    return _scale(2.0 * shape.radius, 2.0 * shape.radius, parent_scale)


def initial_debug_sprite_scale(collider: Collider, parent_scale: Vec3) -> Vec3:
    """Scale given to a freshly added debug sprite; circles start at half size."""
    shape = collider.shape
    if isinstance(shape, RectShape):
        return _scale(shape.size.x, shape.size.y, parent_scale)
    return _scale(shape.radius, shape.radius, parent_scale)


def debug_sprite_color(
    entity: Hashable, collisions: Iterable[Collision]
) -> tuple[float, float, float, float]:
    """Red while ``entity`` is in any collision, white otherwise."""
    if any(collision.contains(entity) for collision in collisions):
        return RED
    return WHITE