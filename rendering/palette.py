"""Color tables shared by the scene renderer and the HUD legend."""
from __future__ import annotations

from typing import Dict, Tuple

from game.entities import AnyEntity, Direction

RGBA = Tuple[float, float, float, float]

HUMAN_DIRECTION_COLORS: Dict[Direction, RGBA] = {
    Direction.UP: (0.23, 0.51, 0.96, 1.0),
    Direction.DOWN: (0.06, 0.73, 0.51, 1.0),
    Direction.LEFT: (0.96, 0.62, 0.04, 1.0),
    Direction.RIGHT: (0.55, 0.36, 0.96, 1.0),
    Direction.NONE: (0.42, 0.45, 0.5, 1.0),
}

AI_DIRECTION_COLORS: Dict[Direction, RGBA] = {
    Direction.UP: (0.86, 0.15, 0.15, 1.0),
    Direction.DOWN: (0.92, 0.35, 0.05, 1.0),
    Direction.LEFT: (0.75, 0.1, 0.45, 1.0),
    Direction.RIGHT: (0.6, 0.1, 0.1, 1.0),
    Direction.NONE: (0.3, 0.3, 0.3, 1.0),
}

HUMAN_OUTLINE: RGBA = (0.0, 0.0, 0.0, 1.0)
AI_OUTLINE: RGBA = (0.2, 0.2, 0.2, 1.0)
LABEL_COLOR = (255, 255, 255)

CONE_FILL_ALERT: RGBA = (1.0, 0.39, 0.39, 0.2)
CONE_FILL_CALM: RGBA = (0.39, 0.59, 1.0, 0.2)
CONE_STROKE_ALERT: RGBA = (1.0, 0.2, 0.2, 0.5)
CONE_STROKE_CALM: RGBA = (0.2, 0.39, 1.0, 0.5)


def direction_color(direction: Direction, *, is_ai: bool) -> RGBA:
    table = AI_DIRECTION_COLORS if is_ai else HUMAN_DIRECTION_COLORS
    return table[Direction(direction)]


def entity_color(entity: AnyEntity) -> RGBA:
    """Body color for either entity kind, keyed by its facing label."""

    return direction_color(entity.direction, is_ai=entity.kind == "ai")


def cone_colors(can_see_player: bool) -> Tuple[RGBA, RGBA]:
    """Return ``(fill, stroke)`` for a vision wedge."""

    if can_see_player:
        return CONE_FILL_ALERT, CONE_STROKE_ALERT
    return CONE_FILL_CALM, CONE_STROKE_CALM


def to_rgb255(color: RGBA) -> Tuple[int, int, int]:
    return (int(round(color[0] * 255)), int(round(color[1] * 255)), int(round(color[2] * 255)))
