"""Tunable settings for a Conesight session."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entities import DEFAULT_CONE_ANGLE, DEFAULT_VISION_DISTANCE

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
TARGET_FPS = 60

HUMAN_SPEED = 5.0
HUMAN_SIZE = 20.0
# Slightly slower than the human so the player can escape.
AI_SPEED = 3.0
AI_SIZE = 20.0
AI_ROTATION_SPEED = 0.05

# Roughly 200 ms at the target frame rate.
WANDER_INTERVAL_FRAMES = 12
WANDER_CHANCE = 0.1


@dataclass(frozen=True)
class SimulationConfig:
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    fps: int = TARGET_FPS
    human_speed: float = HUMAN_SPEED
    human_size: float = HUMAN_SIZE
    ai_speed: float = AI_SPEED
    ai_size: float = AI_SIZE
    ai_rotation_speed: float = AI_ROTATION_SPEED
    cone_angle: float = DEFAULT_CONE_ANGLE
    vision_distance: float = DEFAULT_VISION_DISTANCE
    pursuers: int = 1
    layout: str = "crates"
    wander_interval_frames: int = WANDER_INTERVAL_FRAMES
    wander_chance: float = WANDER_CHANCE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "human_speed", "human_size", "ai_speed", "ai_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps!r}")
        if self.pursuers < 1:
            raise ValueError(f"at least one pursuer is required, got {self.pursuers!r}")
        if self.wander_interval_frames < 1:
            raise ValueError("wander_interval_frames must be at least 1")
        if not 0.0 <= self.wander_chance <= 1.0:
            raise ValueError(f"wander_chance must be within [0, 1], got {self.wander_chance!r}")
        if not 0.0 < self.cone_angle <= 360.0:
            raise ValueError(f"cone_angle must be within (0, 360], got {self.cone_angle!r}")
        if self.vision_distance < 0 or self.ai_rotation_speed < 0:
            raise ValueError("vision_distance and ai_rotation_speed cannot be negative")
