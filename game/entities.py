"""Entity definitions for Conesight."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

Vec2 = Tuple[float, float]
Color = Tuple[float, float, float, float]

HUMAN_PULSE_STEP = 0.1
AI_PULSE_STEP = 0.08
DEFAULT_CONE_ANGLE = 220.0
# Four times the body diameter of a default-sized avatar.
DEFAULT_VISION_DISTANCE = 40.0 * 4


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


def advance_pulse(pulse: float, step: float) -> float:
    """Advance an animation phase, keeping it inside ``[0, 2pi)``."""

    value = (pulse + step) % math.tau
    if value >= math.tau:
        value -= math.tau
    return value


def direction_from_rotation(rotation: Optional[float]) -> Direction:
    """Bucket a rotation in radians into the nearest cardinal label."""

    if rotation is None:
        return Direction.NONE
    angle = rotation % math.tau
    if angle >= 7 * math.pi / 4 or angle < math.pi / 4:
        return Direction.RIGHT
    if angle < 3 * math.pi / 4:
        return Direction.DOWN
    if angle < 5 * math.pi / 4:
        return Direction.LEFT
    return Direction.UP


@dataclass(frozen=True)
class Bounds:
    """Read-only playfield extents in canvas units."""

    width: float
    height: float

    def clamp(self, position: Vec2, margin: float = 0.0) -> Vec2:
        """Clamp ``position`` into ``[margin, dim - margin]`` on both axes."""

        x = max(margin, min(self.width - margin, position[0]))
        y = max(margin, min(self.height - margin, position[1]))
        return (x, y)

    def contains(self, position: Vec2, margin: float = 0.0) -> bool:
        return (
            margin <= position[0] <= self.width - margin
            and margin <= position[1] <= self.height - margin
        )


@dataclass(frozen=True)
class Entity:
    entity_id: str
    position: Vec2
    speed: float = field(default=1.0, kw_only=True)
    size: float = field(default=20.0, kw_only=True)
    pulse: float = field(default=0.0, kw_only=True)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]


@dataclass(frozen=True)
class HumanEntity(Entity):
    """Keyboard-driven avatar with a discrete facing label."""

    direction: Direction = Direction.NONE
    kind: str = field(default="human", init=False)


@dataclass(frozen=True)
class AIEntity(Entity):
    """Autonomous pursuer steering by a continuous rotation in radians.

    ``rotation`` of ``None`` marks an idle pursuer: it neither moves nor sees.
    """

    rotation: Optional[float] = 0.0
    rotation_speed: float = 0.05
    kind: str = field(default="ai", init=False)

    @property
    def idle(self) -> bool:
        return self.rotation is None

    @property
    def direction(self) -> Direction:
        return direction_from_rotation(self.rotation)


AnyEntity = Union[HumanEntity, AIEntity]


@dataclass(frozen=True)
class VisionState:
    """Per-frame perception of a pursuer; only ``can_see_player`` varies."""

    can_see_player: bool = False
    cone_angle: float = DEFAULT_CONE_ANGLE
    vision_distance: float = DEFAULT_VISION_DISTANCE

    def with_sight(self, can_see_player: bool) -> "VisionState":
        if can_see_player == self.can_see_player:
            return self
        return replace(self, can_see_player=can_see_player)


@dataclass(frozen=True)
class Box:
    """Static axis-aligned obstacle described by its centre and extents."""

    x: float
    y: float
    width: float
    height: float
    color: Color = (0.55, 0.42, 0.3, 1.0)
    pulse: float = 0.0

    @property
    def half_extents(self) -> Vec2:
        return (abs(self.width) * 0.5, abs(self.height) * 0.5)

    def corners(self) -> Tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)``."""

        half_w, half_h = self.half_extents
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)
