import math

from hatgame.collider import (
    CircleShape,
    Collider,
    Collision,
    CollisionTracker,
    RectShape,
    debug_scene_colliders,
    is_between,
    vec2_to_spatial_coord,
    vec3_to_spatial_coord,
)
from hatgame.vec import Vec2, Vec3


def test_default_collider_is_empty_rect():
    collider = Collider()
    assert collider.shape == RectShape(Vec2(0.0, 0.0))
    assert collider.initialized is False


def test_is_between_any_corner_order():
    lo, hi = Vec2(0.0, 0.0), Vec2(10.0, 10.0)
    mid = Vec2(5.0, 5.0)
    assert is_between(hi, mid, lo)
    assert is_between(lo, mid, hi)
    assert is_between(Vec2(0.0, 10.0), mid, Vec2(10.0, 0.0))
    assert not is_between(hi, Vec2(11.0, 5.0), lo)


def test_min_max_points_rect():
    size = Vec2(6.0, 4.0)
    collider = Collider.new_rect(size)
    pos = Vec2(1.0, -2.0)
    assert collider.max_point(pos) - collider.min_point(pos) == size
    assert (collider.max_point(pos) + collider.min_point(pos)) / 2.0 == pos


def test_min_max_points_circle():
    collider = Collider.new_circle(3.0)
    pos = Vec2(1.0, 1.0)
    assert collider.max_point(pos) - pos == Vec2(3.0, 3.0)
    assert pos - collider.min_point(pos) == Vec2(3.0, 3.0)


def test_contains_point():
    rect = Collider.new_rect(Vec2(10.0, 10.0))
    assert rect.contains_point(Vec2.ZERO, Vec2(5.0, 5.0))
    assert not rect.contains_point(Vec2.ZERO, Vec2(5.5, 0.0))
    circle = Collider.new_circle(2.0)
    assert circle.contains_point(Vec2.ZERO, Vec2(2.0, 0.0))
    assert not circle.contains_point(Vec2.ZERO, Vec2(2.0, 0.5))
    assert not rect.contains_point(Vec2.ZERO, Vec2(math.nan, 0.0))


def test_circle_circle_is_strict():
    a = Collider.new_circle(10.0)
    b = Collider.new_circle(10.0)
    assert a.is_colliding(Vec2.ZERO, b, Vec2(15.0, 0.0))
    assert not a.is_colliding(Vec2.ZERO, b, Vec2(20.0, 0.0))


def test_rect_circle_corner_and_sides():
    rect = Collider.new_rect(Vec2(10.0, 10.0))
    circle = Collider.new_circle(2.0)
    assert rect.is_colliding(Vec2.ZERO, circle, Vec2(6.0, 6.0))
    assert not rect.is_colliding(Vec2.ZERO, circle, Vec2(8.0, 8.0))
    assert rect.is_colliding(Vec2.ZERO, circle, Vec2(-7.0, 0.0))
    assert not rect.is_colliding(Vec2.ZERO, circle, Vec2(0.0, 7.5))
    assert rect.is_colliding(Vec2.ZERO, circle, Vec2(1.0, 1.0))


def test_rect_circle_symmetric():
    rect = Collider.new_rect(Vec2(10.0, 10.0))
    circle = Collider.new_circle(2.0)
    for pos in (Vec2(6.0, 6.0), Vec2(8.0, 8.0), Vec2(-7.0, 0.0), Vec2(0.0, -6.5)):
        assert rect.is_colliding(Vec2.ZERO, circle, pos) == circle.is_colliding(
            pos, rect, Vec2.ZERO
        )


def test_rect_rect_checks_other_corners_only():
    big = Collider.new_rect(Vec2(100.0, 100.0))
    small = Collider.new_rect(Vec2(10.0, 10.0))
    assert big.is_colliding(Vec2.ZERO, small, Vec2.ZERO)
    assert not small.is_colliding(Vec2.ZERO, big, Vec2.ZERO)


def test_collision_contains():
    c = Collision("a", "b")
    assert c.contains("a") and c.contains("b")
    assert not c.contains("c")


def test_spatial_coords():
    assert vec2_to_spatial_coord(Vec2(-1.0, 150.0)) == (-1, 1)
    v = Vec3(250.0, -30.0, 9.0)
    assert vec3_to_spatial_coord(v) == vec2_to_spatial_coord(v.truncate())
    assert vec2_to_spatial_coord(Vec2(math.nan, math.nan)) == (0, 0)


def test_tracker_reports_both_orderings():
    a = Collider.new_circle(10.0)
    b = Collider.new_circle(10.0)
    tracker = CollisionTracker()
    report = tracker.tick([("a", a, Vec2.ZERO), ("b", b, Vec2(15.0, 0.0))])
    assert report.colliding == [Collision("a", "b"), Collision("b", "a")]
    assert report.started == report.colliding
    assert report.ended == []
    assert tracker.previous == set()


def test_tracker_updates_collider_grid_state():
    a = Collider.new_circle(10.0)
    CollisionTracker().tick([("a", a, Vec2(250.0, 50.0))])
    assert a.initialized is True
    assert a.spatial_coord == vec2_to_spatial_coord(Vec2(250.0, 50.0))


def test_tracker_across_grid_cells():
    a = Collider.new_circle(10.0)
    b = Collider.new_circle(10.0)
    report = CollisionTracker().tick(
        [("a", a, Vec2(95.0, 0.0)), ("b", b, Vec2(105.0, 0.0))]
    )
    assert Collision("a", "b") in report.colliding
    assert Collision("b", "a") in report.colliding


def test_tracker_no_collision_far_apart():
    a = Collider.new_circle(10.0)
    b = Collider.new_circle(10.0)
    report = CollisionTracker().tick([("a", a, Vec2.ZERO), ("b", b, Vec2(500.0, 0.0))])
    assert report.colliding == []
    assert report.started == []


def test_tracker_previous_pairs_end_and_suppress_start():
    a = Collider.new_circle(10.0)
    b = Collider.new_circle(10.0)
    tracker = CollisionTracker(previous={("a", "b")})
    report = tracker.tick([("a", a, Vec2.ZERO), ("b", b, Vec2(5.0, 0.0))])
    assert report.started == []
    assert len(report.colliding) == 2
    assert report.ended == [Collision("a", "b")]
    assert tracker.previous == set()


def test_debug_scene():
    bodies = debug_scene_colliders()
    assert len(bodies) == 3
    pos, collider, follows = bodies[0]
    assert pos == Vec3.ZERO and follows is True
    assert collider.shape == CircleShape(20.0)
    assert bodies[1][1].shape == CircleShape(50.0)
    assert bodies[2][0] == Vec3(-100.0, 0.0, 0.0)
    assert bodies[2][1].shape == RectShape(Vec2(50.0, 50.0))
    assert [follows for _, _, follows in bodies].count(True) == 1