from game.collision import circle_overlaps_box, circles_overlap, collides, resolve
from game.entities import AIEntity, Box, HumanEntity


def _mover(position=(200.0, 200.0)) -> AIEntity:
    return AIEntity(entity_id="ai1", position=position, size=20.0)


def test_overlapping_proposal_returns_pre_move_position() -> None:
    box = Box(x=230.0, y=200.0, width=20.0, height=20.0)

    assert resolve(203.0, 200.0, _mover(), [box]) == (200.0, 200.0)


def test_clear_proposal_is_returned_verbatim() -> None:
    box = Box(x=400.0, y=400.0, width=20.0, height=20.0)

    assert resolve(203.0, 201.5, _mover(), [box]) == (203.0, 201.5)


def test_touching_is_not_overlap() -> None:
    box = Box(x=230.0, y=200.0, width=20.0, height=20.0)

    assert not circle_overlaps_box((200.0, 200.0), 20.0, box)
    assert not circles_overlap((0.0, 0.0), 20.0, (40.0, 0.0), 20.0)
    assert circles_overlap((0.0, 0.0), 20.0, (39.9, 0.0), 20.0)


def test_obstacle_order_does_not_matter() -> None:
    far = Box(x=600.0, y=100.0, width=50.0, height=50.0)
    near = Box(x=230.0, y=200.0, width=20.0, height=20.0)
    mover = _mover()

    assert resolve(203.0, 200.0, mover, [far, near]) == resolve(203.0, 200.0, mover, [near, far])
    assert resolve(190.0, 200.0, mover, [far, near]) == resolve(190.0, 200.0, mover, [near, far])


def test_zero_area_box_behaves_as_point() -> None:
    point = Box(x=210.0, y=200.0, width=0.0, height=0.0)

    assert circle_overlaps_box((200.0, 200.0), 20.0, point)
    assert not circle_overlaps_box((180.0, 200.0), 20.0, point)


def test_negative_extents_use_magnitude() -> None:
    box = Box(x=100.0, y=100.0, width=-40.0, height=-40.0)

    assert box.corners() == (80.0, 80.0, 120.0, 120.0)


def test_other_entities_block_but_mover_is_skipped() -> None:
    mover = _mover()
    itself = _mover()
    human = HumanEntity(entity_id="player1", position=(238.0, 200.0), size=20.0)

    assert not collides((203.0, 200.0), mover, [], [itself])
    assert resolve(203.0, 200.0, mover, [], [human]) == (200.0, 200.0)
