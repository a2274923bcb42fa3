"""Keyboard controller for the human avatar."""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping

from .collision import resolve
from .entities import HUMAN_PULSE_STEP, AnyEntity, Bounds, Box, Direction, HumanEntity, advance_pulse


def step_human(
    entity: HumanEntity,
    keys: Mapping[str, bool],
    bounds: Bounds,
    obstacles: Iterable[Box] = (),
    others: Iterable[AnyEntity] = (),
) -> HumanEntity:
    """Return the human's next state for the held ``keys``.

    ``w`` wins over ``s`` and ``a`` wins over ``d``. Horizontal input is
    resolved after vertical input, so a diagonal reports the horizontal
    direction. With no movement key held the previous direction is kept.
    """

    x, y = entity.position
    direction = entity.direction

    if keys.get("w"):
        y -= entity.speed
        direction = Direction.UP
    elif keys.get("s"):
        y += entity.speed
        direction = Direction.DOWN

    if keys.get("a"):
        x -= entity.speed
        direction = Direction.LEFT
    elif keys.get("d"):
        x += entity.speed
        direction = Direction.RIGHT

    x, y = bounds.clamp((x, y), entity.size)
    position = resolve(x, y, entity, obstacles, others)
    if position != (x, y):
        # Blocked: stay put but still clamp a start that began out of bounds.
        position = bounds.clamp(position, entity.size)

    return replace(
        entity,
        position=position,
        direction=direction,
        pulse=advance_pulse(entity.pulse, HUMAN_PULSE_STEP),
    )
