import random
from dataclasses import replace

from game.config import SimulationConfig
from game.entities import Direction
from game.world import create_initial_world
from ui.status import DETECTED_TEXT, SCANNING_TEXT, hud_lines, legend_entries


def test_hud_lines_for_reference_scenario() -> None:
    world = create_initial_world(SimulationConfig(), random.Random(0))

    assert hud_lines(world.snapshot()) == [
        "Use WASD keys to move",
        "Player direction: NONE",
        "AI direction: RIGHT",
        f"AI vision: {SCANNING_TEXT}",
    ]


def test_hud_reports_detection_per_pursuer() -> None:
    world = create_initial_world(SimulationConfig(pursuers=2), random.Random(0))
    frame = world.snapshot()
    first, second = frame.pursuers
    frame = replace(
        frame,
        human=replace(frame.human, direction=Direction.LEFT),
        pursuers=(replace(first, vision=first.vision.with_sight(True)), second),
    )

    lines = hud_lines(frame)

    assert "Player direction: LEFT" in lines
    assert f"AI ai1 vision: {DETECTED_TEXT}" in lines
    assert f"AI ai2 vision: {SCANNING_TEXT}" in lines
    assert "AI ai2 direction: RIGHT" in lines


def test_legend_lists_four_directions_for_each_table() -> None:
    entries = legend_entries()

    assert [caption for caption, _ in entries] == ["Player colors:", "AI colors:"]
    for _, swatches in entries:
        assert [label for label, _ in swatches] == ["UP", "DOWN", "LEFT", "RIGHT"]
