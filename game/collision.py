"""Overlap tests and the no-move-into-solid resolver."""
from __future__ import annotations

import math
from typing import Iterable, Tuple

from .entities import AnyEntity, Box

Vec2 = Tuple[float, float]


def circle_overlaps_box(center: Vec2, radius: float, box: Box) -> bool:
    """Return ``True`` if a circle strictly overlaps ``box``.

    Uses the distance from the circle centre to the closest point of the
    rectangle, so a zero-area box behaves as a single point.
    """

    min_x, min_y, max_x, max_y = box.corners()
    closest_x = max(min_x, min(center[0], max_x))
    closest_y = max(min_y, min(center[1], max_y))
    dx = center[0] - closest_x
    dy = center[1] - closest_y
    return dx * dx + dy * dy < radius * radius


def circles_overlap(a: Vec2, radius_a: float, b: Vec2, radius_b: float) -> bool:
    return math.hypot(b[0] - a[0], b[1] - a[1]) < radius_a + radius_b


def collides(
    position: Vec2,
    mover: AnyEntity,
    obstacles: Iterable[Box],
    others: Iterable[AnyEntity] = (),
) -> bool:
    """Return ``True`` if ``mover`` placed at ``position`` touches any solid."""

    for box in obstacles:
        if circle_overlaps_box(position, mover.size, box):
            return True
    for other in others:
        if other.entity_id == mover.entity_id:
            continue
        if circles_overlap(position, mover.size, other.position, other.size):
            return True
    return False


def resolve(
    proposed_x: float,
    proposed_y: float,
    mover: AnyEntity,
    obstacles: Iterable[Box],
    others: Iterable[AnyEntity] = (),
) -> Vec2:
    """Return the proposal, or the mover's current position if it would collide."""

    proposed = (proposed_x, proposed_y)
    if collides(proposed, mover, obstacles, others):
        return mover.position
    return proposed
