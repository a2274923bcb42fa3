import math

import numpy as np
import pytest

from game.entities import AIEntity, Bounds, Box, Direction, HumanEntity
from rendering.palette import (
    AI_DIRECTION_COLORS,
    HUMAN_DIRECTION_COLORS,
    cone_colors,
    direction_color,
    entity_color,
    to_rgb255,
)
from rendering.shapes import (
    create_box_quad,
    create_circle,
    create_cone_wedge,
    create_grid_lines,
    facing_indicator,
    pulsing_radius,
)


def test_circle_vertices_lie_on_radius() -> None:
    circle = create_circle((100.0, 50.0), 20.0, segments=16)

    radii = np.hypot(circle.outline[:, 0] - 100.0, circle.outline[:, 1] - 50.0)
    assert circle.outline.shape == (16, 2)
    assert np.allclose(radii, 20.0)
    fan = circle.fan()
    assert fan.shape == (18, 2)
    assert np.allclose(fan[0], (100.0, 50.0))
    assert np.allclose(fan[1], fan[-1])


def test_cone_wedge_spans_cone_angle() -> None:
    wedge = create_cone_wedge((0.0, 0.0), 0.0, 90.0, 100.0)

    first, last = wedge.outline[0], wedge.outline[-1]
    assert math.atan2(first[1], first[0]) == pytest.approx(-math.pi / 4)
    assert math.atan2(last[1], last[0]) == pytest.approx(math.pi / 4)
    assert np.allclose(np.hypot(wedge.outline[:, 0], wedge.outline[:, 1]), 100.0)


def test_grid_covers_canvas_every_forty_units() -> None:
    lines = create_grid_lines(Bounds(width=800.0, height=600.0))

    assert lines.shape == (20 + 15, 2, 2)
    assert np.allclose(lines[1], ((40.0, 0.0), (40.0, 600.0)))


def test_box_quad_uses_corners() -> None:
    quad = create_box_quad(Box(x=100.0, y=100.0, width=40.0, height=20.0))

    assert quad.tolist() == [[80.0, 90.0], [120.0, 90.0], [120.0, 110.0], [80.0, 110.0]]


def test_facing_indicator() -> None:
    up = facing_indicator((100.0, 100.0), 20.0, direction=Direction.UP)
    assert np.allclose(up, ((100.0, 100.0), (100.0, 70.0)))

    rotated = facing_indicator((0.0, 0.0), 20.0, rotation=math.pi)
    assert np.allclose(rotated[1], (-30.0, 0.0))

    assert facing_indicator((0.0, 0.0), 20.0, direction=Direction.NONE) is None


def test_pulsing_radius_breathes_by_two_units() -> None:
    assert pulsing_radius(20.0, 0.0) == pytest.approx(20.0)
    assert pulsing_radius(20.0, math.pi / 2) == pytest.approx(22.0)


def test_palette_lookups() -> None:
    assert direction_color(Direction.UP, is_ai=True) != direction_color(Direction.UP, is_ai=False)
    alert_fill, _ = cone_colors(True)
    calm_fill, _ = cone_colors(False)
    assert alert_fill != calm_fill
    assert to_rgb255((1.0, 0.0, 0.5, 1.0)) == (255, 0, 128)


def test_entity_color_follows_the_entity_kind() -> None:
    human = HumanEntity(entity_id="player1", position=(0.0, 0.0), direction=Direction.UP)
    pursuer = AIEntity(entity_id="ai1", position=(0.0, 0.0), rotation=3 * math.pi / 2)

    assert (human.kind, pursuer.kind) == ("human", "ai")
    assert entity_color(human) == HUMAN_DIRECTION_COLORS[Direction.UP]
    assert entity_color(pursuer) == AI_DIRECTION_COLORS[Direction.UP]
