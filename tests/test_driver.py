import random
from typing import List

from game.config import SimulationConfig
from game.driver import FrameDriver
from game.keyboard import InputState
from game.world import Frame, create_initial_world


def _world():
    return create_initial_world(SimulationConfig(wander_chance=0.0), random.Random(0), obstacles=())


def test_tick_before_start_does_nothing() -> None:
    world = _world()
    frames: List[Frame] = []
    driver = FrameDriver(world, sink=frames.append)

    assert not driver.tick()
    assert world.frame_index == 0
    assert frames == []


def test_ticks_step_world_then_render() -> None:
    world = _world()
    frames: List[Frame] = []
    driver = FrameDriver(world, sink=frames.append)

    driver.start()
    assert driver.tick()
    assert driver.tick()

    assert [frame.index for frame in frames] == [1, 2]
    assert driver.last_frame is frames[-1]
    assert driver.frames_run == 2


def test_held_keys_reach_the_human() -> None:
    driver = FrameDriver(_world())
    driver.start()
    driver.input.key_down("W")

    driver.tick()

    assert driver.world.human.position == (400.0, 295.0)


def test_missing_playfield_drops_the_frame() -> None:
    world = _world()
    frames: List[Frame] = []
    driver = FrameDriver(world, bounds_provider=lambda: None, sink=frames.append)
    driver.start()

    assert not driver.tick()
    assert driver.frames_dropped == 1
    assert world.frame_index == 0
    assert frames == []


def test_missing_sink_still_steps() -> None:
    driver = FrameDriver(_world())
    driver.start()

    assert driver.tick()
    assert driver.world.frame_index == 1


def test_stop_halts_ticks_and_detaches_input() -> None:
    input_state = InputState()
    driver = FrameDriver(_world(), input_state=input_state)
    driver.start()
    input_state.key_down("d")

    driver.stop()
    input_state.key_down("w")

    assert not driver.running
    assert dict(input_state.snapshot()) == {}
    assert not driver.tick()


def test_run_is_bounded_and_stops_afterwards() -> None:
    driver = FrameDriver(_world())

    assert driver.run(5) == 5
    assert not driver.running
    assert driver.world.frame_index == 5


def test_sink_can_stop_the_driver() -> None:
    world = _world()
    holder = {}

    def sink(frame: Frame) -> None:
        if frame.index == 3:
            holder["driver"].stop()

    driver = FrameDriver(world, sink=sink)
    holder["driver"] = driver

    assert driver.run(10) == 3
    assert world.frame_index == 3
