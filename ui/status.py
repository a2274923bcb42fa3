"""Status text and legend rows for the overlay panel."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from game.entities import Direction
from game.world import Frame
from rendering.palette import AI_DIRECTION_COLORS, HUMAN_DIRECTION_COLORS, RGBA

CONTROLS_HINT = "Use WASD keys to move"
DETECTED_TEXT = "PLAYER DETECTED!"
SCANNING_TEXT = "Scanning..."

LEGEND_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def hud_lines(frame: Frame) -> List[str]:
    """Status lines shown in the overlay for ``frame``."""

    lines = [
        CONTROLS_HINT,
        f"Player direction: {frame.human.direction.value.upper()}",
    ]
    many = len(frame.pursuers) > 1
    for pursuer in frame.pursuers:
        prefix = f"AI {pursuer.entity.entity_id}" if many else "AI"
        status = DETECTED_TEXT if pursuer.vision.can_see_player else SCANNING_TEXT
        lines.append(f"{prefix} direction: {pursuer.entity.direction.value.upper()}")
        lines.append(f"{prefix} vision: {status}")
    return lines


def legend_entries() -> List[Tuple[str, Sequence[Tuple[str, RGBA]]]]:
    """Return ``(caption, [(label, color), ...])`` rows for both color tables."""

    return [
        ("Player colors:", [(d.value.upper(), HUMAN_DIRECTION_COLORS[d]) for d in LEGEND_DIRECTIONS]),
        ("AI colors:", [(d.value.upper(), AI_DIRECTION_COLORS[d]) for d in LEGEND_DIRECTIONS]),
    ]
