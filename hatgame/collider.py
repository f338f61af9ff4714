"""Collider shapes, overlap tests and grid-based collision detection."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

from hatgame.vec import Vec2, Vec3

SpatialCoord = tuple[int, int]

SPATIAL_GRID_SIZE = 100.0

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class RectShape:
    size: Vec2


@dataclass(frozen=True)
class CircleShape:
    radius: float


def is_between(a: Vec2, b: Vec2, c: Vec2) -> bool:
    """True if ``b`` lies in the axis-aligned box spanned by ``a`` and ``c``."""
    x_down = a.x >= b.x >= c.x
    x_up = c.x >= b.x >= a.x
    y_down = a.y >= b.y >= c.y
    y_up = c.y >= b.y >= a.y
    return (x_down or x_up) and (y_down or y_up)


@dataclass
class Collider:
    """A rectangle or circle centred on its owner's position."""

    shape: RectShape | CircleShape = field(default_factory=lambda: RectShape(Vec2.ZERO))
    spatial_coord: SpatialCoord = (0, 0)
    initialized: bool = False

    @classmethod
    def new_rect(cls, size: Vec2) -> Collider:
        return cls(RectShape(size))

    @classmethod
    def new_circle(cls, radius: float) -> Collider:
        return cls(CircleShape(radius))

    def _half_extent(self) -> Vec2:
        if isinstance(self.shape, RectShape):
            return self.shape.size / 2.0
        return Vec2(self.shape.radius, self.shape.radius)

    def min_point(self, position: Vec2) -> Vec2:
        return position - self._half_extent()

    def max_point(self, position: Vec2) -> Vec2:
        return position + self._half_extent()

    def contains_point(self, my_position: Vec2, point: Vec2) -> bool:
        if math.isnan(point.x) or math.isnan(point.y):
            return False
        if isinstance(self.shape, RectShape):
            half = self.shape.size / 2.0
            return (
                my_position.x - half.x <= point.x <= my_position.x + half.x
                and my_position.y - half.y <= point.y <= my_position.y + half.y
            )
        return my_position.distance(point) <= self.shape.radius

    def is_colliding(self, position: Vec2, other: Collider, other_position: Vec2) -> bool:
        """Overlap test.

        Rectangle pairs count as colliding only when a corner (min or max) of
        ``other`` lies inside this collider.
        """
        mine, theirs = self.shape, other.shape
        if isinstance(mine, RectShape) and isinstance(theirs, RectShape):
            return is_between(
                self.max_point(position),
                other.max_point(other_position),
                self.min_point(position),
            ) or is_between(
                self.max_point(position),
                other.min_point(other_position),
                self.min_point(position),
            )
        if isinstance(mine, RectShape):
            return _rect_circle(mine.size, position, theirs.radius, other_position)
        if isinstance(theirs, RectShape):
            return _rect_circle(theirs.size, other_position, mine.radius, position)
        return position.distance(other_position) < mine.radius + theirs.radius


def _rect_circle(size: Vec2, rect_pos: Vec2, radius: float, circle_pos: Vec2) -> bool:
    bottom_left = rect_pos - size / 2.0
    top_right = rect_pos + size / 2.0
    corners = (
        bottom_left,
        top_right,
        Vec2(bottom_left.x, top_right.y),
        Vec2(top_right.x, bottom_left.y),
    )

    if is_between(top_right, circle_pos, bottom_left):
        return True
    if any(circle_pos.distance(corner) <= radius for corner in corners):
        return True

    within_y = bottom_left.y < circle_pos.y < top_right.y
    within_x = bottom_left.x < circle_pos.x < top_right.x
    if circle_pos.x < rect_pos.x and within_y:
        return bottom_left.x - circle_pos.x <= radius
    if circle_pos.x > rect_pos.x and within_y:
        return circle_pos.x - top_right.x <= radius
    if circle_pos.y > rect_pos.y and within_x:
        return circle_pos.y - top_right.y <= radius
    if circle_pos.y < rect_pos.y and within_x:
        return bottom_left.y - circle_pos.y <= radius
    return False


def _as_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return math.floor(value)


def vec2_to_spatial_coord(translation: Vec2) -> SpatialCoord:
    scaled = translation / SPATIAL_GRID_SIZE
    return (_as_i32(scaled.x), _as_i32(scaled.y))


def vec3_to_spatial_coord(translation: Vec3) -> SpatialCoord:
    return vec2_to_spatial_coord(translation.truncate())


@dataclass(frozen=True)
class Collision:
    entity_a: Hashable
    entity_b: Hashable

    def contains(self, entity: Hashable) -> bool:
        return entity == self.entity_a or entity == self.entity_b


@dataclass
class CollisionReport:
    """Collisions found by one tick, in detection order."""

    started: list[Collision] = field(default_factory=list)
    colliding: list[Collision] = field(default_factory=list)
    ended: list[Collision] = field(default_factory=list)


@dataclass
class CollisionTracker:
    """Finds overlapping colliders each tick using a coarse spatial grid.

    Pairs held in ``previous`` are reported as ended and the set is cleared
    at the end of each tick.
    """

    previous: set[tuple[Hashable, Hashable]] = field(default_factory=set)

    def tick(
        self, colliders: Iterable[tuple[Hashable, Collider, Vec2]]
    ) -> CollisionReport:
        entries = list(colliders)
        grid: dict[SpatialCoord, list[tuple[Hashable, Collider, Vec2]]] = defaultdict(list)

        for entity, collider, position in entries:
            coord = vec2_to_spatial_coord(position)
            grid[coord].append((entity, collider, position))
            collider.spatial_coord = coord
            collider.initialized = True

        report = CollisionReport()
        for entity, collider, position in entries:
            min_x, min_y = vec2_to_spatial_coord(collider.min_point(position))
            max_x, max_y = vec2_to_spatial_coord(collider.max_point(position))
            candidates = [
                candidate
                for x in range(min_x, max_x + 1)
                for y in range(min_y, max_y + 1)
                for candidate in grid.get((x, y), ())
            ]
            for other_entity, other_collider, other_position in candidates:
                if other_entity == entity:
                    continue
                if not collider.is_colliding(position, other_collider, other_position):
                    continue
                collision = Collision(entity, other_entity)
                previously = (entity, other_entity) in self.previous or (
                    other_entity,
                    entity,
                ) in self.previous
                if not previously:
                    report.started.append(collision)
                report.colliding.append(collision)

        report.ended = [Collision(a, b) for a, b in self.previous]
        self.previous = set()
        return report


def debug_scene_colliders() -> list[tuple[Vec3, Collider, bool]]:
    """Bodies of the collision debug scene: (translation, collider, follows mouse)."""
    return [
        (Vec3.ZERO, Collider.new_circle(20.0), True),
        (Vec3(100.0, 0.0, 0.0), Collider.new_circle(50.0), False),
        (Vec3(-100.0, 0.0, 0.0), Collider.new_rect(Vec2(50.0, 50.0)), False),
    ]