"""Angle, distance and vision-cone helpers for Conesight.

All angles are radians in canvas space: ``x`` grows to the right and ``y``
grows downward, so a facing of ``pi / 2`` points down the screen. Cone
widths are expressed in degrees because that is how they are configured.
"""
from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from .entities import AIEntity, AnyEntity, Direction, VisionState, direction_from_rotation

Vec2 = Tuple[float, float]

_FACING_ANGLES: Dict[Direction, float] = {
    Direction.RIGHT: 0.0,
    Direction.DOWN: math.pi / 2,
    Direction.LEFT: math.pi,
    Direction.UP: -math.pi / 2,
}


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def bearing(origin: Vec2, target: Vec2) -> float:
    """Angle from ``origin`` to ``target`` in ``(-pi, pi]``."""

    return math.atan2(target[1] - origin[1], target[0] - origin[0])


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 2pi)``."""

    wrapped = angle % math.tau
    if wrapped >= math.tau:
        wrapped -= math.tau
    return wrapped


def signed_angle_delta(from_angle: float, to_angle: float) -> float:
    """Shortest signed turn from ``from_angle`` to ``to_angle`` in ``(-pi, pi]``."""

    delta = (to_angle - from_angle) % math.tau
    if delta > math.pi:
        delta -= math.tau
    return delta


def angle_difference(a: float, b: float) -> float:
    """Unsigned angular separation of ``a`` and ``b`` in ``[0, pi]``."""

    diff = abs(a - b) % math.tau
    if diff > math.pi:
        diff = math.tau - diff
    return diff


def facing_angle(direction: Direction) -> Optional[float]:
    """Return the facing angle for a cardinal direction, ``None`` when idle."""

    return _FACING_ANGLES.get(Direction(direction))


def is_within_cone(
    observer_pos: Vec2,
    observer_facing: Optional[float],
    target_pos: Vec2,
    cone_angle_deg: float,
    max_distance: float,
) -> bool:
    """Return ``True`` if ``target_pos`` lies inside the observer's vision cone.

    Both the distance and the half-angle limits are inclusive. An observer
    without a facing (idle) never sees anything.
    """

    if observer_facing is None:
        return False
    if distance(observer_pos, target_pos) > max_distance:
        return False
    diff = angle_difference(bearing(observer_pos, target_pos), observer_facing)
    return diff <= math.radians(cone_angle_deg) / 2.0


def entity_facing(entity: AnyEntity) -> Optional[float]:
    if isinstance(entity, AIEntity):
        return entity.rotation
    return facing_angle(entity.direction)


def check_vision(observer: AnyEntity, target: AnyEntity, vision: VisionState) -> VisionState:
    """Recompute ``can_see_player`` for ``observer`` looking at ``target``."""

    visible = is_within_cone(
        observer.position,
        entity_facing(observer),
        target.position,
        vision.cone_angle,
        vision.vision_distance,
    )
    return vision.with_sight(visible)
