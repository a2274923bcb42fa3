"""Pursuer AI for Conesight.

Each frame a pursuer perceives the human through its vision cone, then
either tracks it in place (contact range), turns gradually toward it and
advances, or keeps patrolling along its current heading. Walls reflect the
heading; bumping into a box or another avatar vetoes the move and spins the
pursuer by a random half-turn so it does not keep ramming the same solid.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from .collision import resolve
from .entities import (
    AI_PULSE_STEP,
    AIEntity,
    AnyEntity,
    Bounds,
    Box,
    VisionState,
    advance_pulse,
)
from .vision import bearing, check_vision, distance, normalize_angle, signed_angle_delta

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

DEFAULT_SNAP_THRESHOLD = 0.1


class PursuerAIController:
    """Steps autonomous pursuers using the continuous-rotation model."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        snap_threshold: float = DEFAULT_SNAP_THRESHOLD,
        pulse_step: float = AI_PULSE_STEP,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.snap_threshold = snap_threshold
        self.pulse_step = pulse_step

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def step(
        self,
        ai: AIEntity,
        target: AnyEntity,
        vision: VisionState,
        bounds: Bounds,
        obstacles: Iterable[Box] = (),
        others: Iterable[AnyEntity] = (),
    ) -> Tuple[AIEntity, VisionState]:
        """Advance ``ai`` one frame and return its next state and vision."""

        next_vision = check_vision(ai, target, vision)
        if next_vision.can_see_player != vision.can_see_player:
            logger.debug(
                "%s %s %s",
                ai.entity_id,
                "sighted" if next_vision.can_see_player else "lost",
                target.entity_id,
            )
        pulse = advance_pulse(ai.pulse, self.pulse_step)

        if ai.rotation is None:
            position = bounds.clamp(ai.position, ai.size)
            return replace(ai, position=position, pulse=pulse), next_vision

        rotation = ai.rotation
        if next_vision.can_see_player:
            gap = distance(ai.position, target.position)
            target_bearing = bearing(ai.position, target.position)
            if gap < ai.size + target.size:
                # Contact range: hold position and track the target exactly.
                tracked = replace(
                    ai,
                    position=bounds.clamp(ai.position, ai.size),
                    rotation=normalize_angle(target_bearing),
                    pulse=pulse,
                )
                return tracked, next_vision
            rotation = self._turn_toward(rotation, target_bearing, ai.rotation_speed)

        proposed = (
            ai.x + math.cos(rotation) * ai.speed,
            ai.y + math.sin(rotation) * ai.speed,
        )

        if not bounds.contains(proposed, ai.size):
            rotation = normalize_angle(rotation + math.pi)
            logger.debug("%s bounced off a wall at %.1f, %.1f", ai.entity_id, *proposed)
            proposed = bounds.clamp(proposed, ai.size)

        solids = [target, *others]
        final = resolve(proposed[0], proposed[1], ai, obstacles, solids)
        if final != proposed:
            rotation = normalize_angle(rotation + self._rng.uniform(math.pi / 2, 3 * math.pi / 2))
            logger.debug("%s deflected, new heading %.2f rad", ai.entity_id, rotation)
            final = bounds.clamp(final, ai.size)

        return replace(ai, position=final, rotation=rotation, pulse=pulse), next_vision

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _turn_toward(self, rotation: float, target_bearing: float, rotation_speed: float) -> float:
        delta = signed_angle_delta(rotation, target_bearing)
        if abs(delta) > self.snap_threshold:
            rotation += rotation_speed if delta > 0 else -rotation_speed
        else:
            rotation = target_bearing
        return normalize_angle(rotation)
