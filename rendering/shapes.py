"""Flat primitive geometry used by the Conesight renderer.

Every builder returns plain ``numpy`` arrays in canvas space so the GL
layer only has to stream vertices.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from game.entities import Bounds, Box, Direction
from game.vision import facing_angle

Vec2 = Tuple[float, float]

CIRCLE_SEGMENTS = 32
GRID_SPACING = 40.0
PULSE_AMPLITUDE = 2.0


@dataclass(frozen=True)
class Polygon:
    """Ordered outline of a convex fan plus the point it fans from."""

    center: np.ndarray
    outline: np.ndarray

    def fan(self) -> np.ndarray:
        """Vertices for a ``GL_TRIANGLE_FAN``: centre first, outline closed."""

        return np.vstack([self.center, self.outline, self.outline[:1]])


def circle_outline(center: Vec2, radius: float, segments: int = CIRCLE_SEGMENTS) -> np.ndarray:
    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    xs = center[0] + np.cos(angles) * radius
    ys = center[1] + np.sin(angles) * radius
    return np.column_stack([xs, ys])


def create_circle(center: Vec2, radius: float, segments: int = CIRCLE_SEGMENTS) -> Polygon:
    return Polygon(
        center=np.array([center], dtype=np.float64),
        outline=circle_outline(center, max(0.0, radius), segments),
    )


def pulsing_radius(size: float, pulse: float) -> float:
    """Avatar radius with the breathing animation applied."""

    return size + math.sin(pulse) * PULSE_AMPLITUDE


def create_cone_wedge(
    center: Vec2,
    facing: float,
    cone_angle_deg: float,
    radius: float,
    segments: int = CIRCLE_SEGMENTS,
) -> Polygon:
    """Build the vision wedge: apex at ``center`` with an arc of ``radius``."""

    half = math.radians(cone_angle_deg) / 2.0
    # Scale arc resolution with its sweep so wide cones stay smooth.
    steps = max(2, int(math.ceil(segments * (2.0 * half) / (2.0 * math.pi))) + 1)
    angles = np.linspace(facing - half, facing + half, steps)
    xs = center[0] + np.cos(angles) * radius
    ys = center[1] + np.sin(angles) * radius
    apex = np.array([center], dtype=np.float64)
    return Polygon(center=apex, outline=np.column_stack([xs, ys]))


def create_box_quad(box: Box) -> np.ndarray:
    min_x, min_y, max_x, max_y = box.corners()
    return np.array(
        [(min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)],
        dtype=np.float64,
    )


def create_grid_lines(bounds: Bounds, spacing: float = GRID_SPACING) -> np.ndarray:
    """Return an ``(n, 2, 2)`` array of line segments covering ``bounds``."""

    xs = np.arange(0.0, bounds.width, spacing)
    ys = np.arange(0.0, bounds.height, spacing)
    vertical = [((x, 0.0), (x, bounds.height)) for x in xs]
    horizontal = [((0.0, y), (bounds.width, y)) for y in ys]
    lines = vertical + horizontal
    if not lines:
        return np.zeros((0, 2, 2), dtype=np.float64)
    return np.array(lines, dtype=np.float64)


def facing_indicator(
    center: Vec2,
    size: float,
    *,
    rotation: Optional[float] = None,
    direction: Direction = Direction.NONE,
) -> Optional[np.ndarray]:
    """Segment from the centre pointing along the facing, ``None`` when idle."""

    angle = rotation if rotation is not None else facing_angle(direction)
    if angle is None:
        return None
    length = size + 10.0
    tip = (center[0] + math.cos(angle) * length, center[1] + math.sin(angle) * length)
    return np.array([center, tip], dtype=np.float64)
