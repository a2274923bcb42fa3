import math

import pytest

from game.entities import AIEntity, Direction, HumanEntity, VisionState
from game.vision import (
    angle_difference,
    check_vision,
    direction_from_rotation,
    facing_angle,
    is_within_cone,
    normalize_angle,
    signed_angle_delta,
)


def test_target_on_bearing_at_half_distance_is_seen() -> None:
    assert is_within_cone((0.0, 0.0), 0.0, (50.0, 0.0), 90.0, 100.0)


def test_target_directly_behind_is_not_seen() -> None:
    assert not is_within_cone((0.0, 0.0), 0.0, (-50.0, 0.0), 359.0, 100.0)


def test_distance_boundary_is_inclusive() -> None:
    assert is_within_cone((0.0, 0.0), 0.0, (100.0, 0.0), 90.0, 100.0)
    assert not is_within_cone((0.0, 0.0), 0.0, (100.001, 0.0), 90.0, 100.0)


def test_cone_edge_is_inclusive() -> None:
    # Target exactly 45 degrees off a 90 degree cone.
    assert is_within_cone((0.0, 0.0), 0.0, (30.0, 30.0), 90.0, 100.0)
    assert not is_within_cone((0.0, 0.0), 0.0, (30.0, 31.0), 90.0, 100.0)


def test_idle_observer_sees_nothing() -> None:
    assert not is_within_cone((0.0, 0.0), None, (1.0, 0.0), 360.0, 100.0)


def test_facing_wraps_around_zero() -> None:
    facing = normalize_angle(-0.1)
    target = (math.cos(0.1) * 50.0, math.sin(0.1) * 50.0)
    assert is_within_cone((0.0, 0.0), facing, target, 90.0, 100.0)


def test_facing_angles_for_directions() -> None:
    assert facing_angle(Direction.RIGHT) == 0.0
    assert facing_angle(Direction.DOWN) == pytest.approx(math.pi / 2)
    assert facing_angle(Direction.LEFT) == pytest.approx(math.pi)
    assert facing_angle(Direction.UP) == pytest.approx(-math.pi / 2)
    assert facing_angle(Direction.NONE) is None


def test_direction_from_rotation_buckets() -> None:
    assert direction_from_rotation(0.0) == Direction.RIGHT
    assert direction_from_rotation(7 * math.pi / 4 + 0.01) == Direction.RIGHT
    assert direction_from_rotation(math.pi / 2) == Direction.DOWN
    assert direction_from_rotation(math.pi) == Direction.LEFT
    assert direction_from_rotation(3 * math.pi / 2) == Direction.UP
    assert direction_from_rotation(None) == Direction.NONE


def test_angle_helpers() -> None:
    assert signed_angle_delta(0.1, normalize_angle(-0.1)) == pytest.approx(-0.2)
    assert signed_angle_delta(0.0, math.pi / 2) == pytest.approx(math.pi / 2)
    assert angle_difference(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)
    assert 0.0 <= normalize_angle(-1e-18) < 2 * math.pi


def test_check_vision_only_changes_sight() -> None:
    ai = AIEntity(entity_id="ai1", position=(200.0, 200.0), rotation=0.0)
    target = HumanEntity(entity_id="player1", position=(300.0, 200.0))
    vision = VisionState(cone_angle=220.0, vision_distance=160.0)

    updated = check_vision(ai, target, vision)

    assert updated.can_see_player
    assert updated.cone_angle == 220.0
    assert updated.vision_distance == 160.0
    assert not vision.can_see_player


def test_human_observer_without_direction_is_blind() -> None:
    observer = HumanEntity(entity_id="player1", position=(0.0, 0.0))
    target = HumanEntity(entity_id="player2", position=(10.0, 0.0))

    assert not check_vision(observer, target, VisionState(cone_angle=360.0)).can_see_player
