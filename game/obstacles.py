"""Named static box layouts for the playfield."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .entities import Box


@dataclass(frozen=True)
class ObstacleLayout:
    """Immutable set of boxes designed for an 800x600 playfield."""

    name: str
    description: str
    boxes: Tuple[Box, ...]


_CRATE_COLOR = (0.55, 0.42, 0.3, 1.0)
_PILLAR_COLOR = (0.4, 0.44, 0.5, 1.0)

_LAYOUTS: Dict[str, ObstacleLayout] = {
    "open": ObstacleLayout(
        name="open",
        description="Empty floor; the pursuer only deals with walls.",
        boxes=(),
    ),
    "crates": ObstacleLayout(
        name="crates",
        description="Scattered crates that break line of travel.",
        boxes=(
            Box(x=600.0, y=150.0, width=80.0, height=60.0, color=_CRATE_COLOR, pulse=0.0),
            Box(x=150.0, y=450.0, width=60.0, height=90.0, color=_CRATE_COLOR, pulse=1.2),
            Box(x=560.0, y=430.0, width=100.0, height=50.0, color=_CRATE_COLOR, pulse=2.4),
            Box(x=330.0, y=100.0, width=50.0, height=50.0, color=_CRATE_COLOR, pulse=3.6),
        ),
    ),
    "pillars": ObstacleLayout(
        name="pillars",
        description="Regular grid of narrow pillars.",
        boxes=tuple(
            Box(x=160.0 + 160.0 * col, y=150.0 + 150.0 * row, width=30.0, height=30.0,
                color=_PILLAR_COLOR, pulse=0.5 * (row * 4 + col))
            for row in range(3)
            for col in range(4)
            # Keep the default spawn points clear.
            if (row, col) not in ((1, 1), (0, 0))
        ),
    ),
}


def get_obstacle_layout(name: str) -> ObstacleLayout:
    """Look up a layout by name, raising ``KeyError`` if unknown."""

    if name not in _LAYOUTS:
        raise KeyError(f"Unknown obstacle layout: {name}")
    return _LAYOUTS[name]


def all_obstacle_layouts() -> Iterable[ObstacleLayout]:
    return _LAYOUTS.values()
