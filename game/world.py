"""World state and single-frame stepping for Conesight."""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from .ai import PursuerAIController
from .collision import collides
from .config import WANDER_CHANCE, WANDER_INTERVAL_FRAMES, SimulationConfig
from .entities import AIEntity, AnyEntity, Bounds, Box, HumanEntity, VisionState
from .human import step_human
from .obstacles import get_obstacle_layout

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

HUMAN_SPAWN: Vec2 = (400.0, 300.0)
PURSUER_SPAWNS: Tuple[Vec2, ...] = (
    (200.0, 200.0),
    (650.0, 500.0),
    (700.0, 80.0),
    (100.0, 100.0),
)
CARDINAL_HEADINGS = (0.0, math.pi / 2, math.pi, 3 * math.pi / 2)
SPAWN_RING_POINTS = 8


@dataclass(frozen=True)
class Pursuer:
    """An AI entity paired with the vision state it owns."""

    entity: AIEntity
    vision: VisionState


@dataclass(frozen=True)
class Frame:
    """Snapshot of one finished frame, handed to the render sink."""

    index: int
    bounds: Bounds
    human: HumanEntity
    pursuers: Tuple[Pursuer, ...]
    obstacles: Tuple[Box, ...]


@dataclass
class World:
    bounds: Bounds
    human: HumanEntity
    pursuers: List[Pursuer] = field(default_factory=list)
    obstacles: Tuple[Box, ...] = ()
    controller: PursuerAIController = field(default_factory=PursuerAIController)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    wander_interval_frames: int = WANDER_INTERVAL_FRAMES
    wander_chance: float = WANDER_CHANCE
    frame_index: int = 0

    def step(self, keys: Mapping[str, bool], bounds: Optional[Bounds] = None) -> Frame:
        """Advance the world one frame: human first, then every pursuer in order."""

        if bounds is not None:
            self.bounds = bounds
        pursuer_entities = [pursuer.entity for pursuer in self.pursuers]
        self.human = step_human(
            self.human, keys, self.bounds, self.obstacles, pursuer_entities
        )

        for index, pursuer in enumerate(self.pursuers):
            others = [p.entity for i, p in enumerate(self.pursuers) if i != index]
            entity, vision = self.controller.step(
                pursuer.entity,
                self.human,
                pursuer.vision,
                self.bounds,
                self.obstacles,
                others,
            )
            self.pursuers[index] = Pursuer(entity=entity, vision=vision)

        self.frame_index += 1
        self._maybe_wander()
        return self.snapshot()

    def snapshot(self) -> Frame:
        return Frame(
            index=self.frame_index,
            bounds=self.bounds,
            human=self.human,
            pursuers=tuple(self.pursuers),
            obstacles=self.obstacles,
        )

    def _maybe_wander(self) -> None:
        """Occasionally re-pick a cardinal heading for pursuers that see nothing."""

        if self.wander_chance <= 0.0 or self.frame_index % self.wander_interval_frames:
            return
        for index, pursuer in enumerate(self.pursuers):
            if pursuer.vision.can_see_player or pursuer.entity.idle:
                continue
            if self.rng.random() >= self.wander_chance:
                continue
            heading = self.rng.choice(CARDINAL_HEADINGS)
            logger.debug("%s wanders to heading %.2f rad", pursuer.entity.entity_id, heading)
            self.pursuers[index] = replace(
                pursuer, entity=replace(pursuer.entity, rotation=heading)
            )


def _spawn_candidates(bounds: Bounds, size: float) -> Iterator[Vec2]:
    """Anchor points first, then widening rings around each, then a grid sweep."""

    yield from PURSUER_SPAWNS
    spacing = 2.0 * size + 10.0
    reach = max(bounds.width, bounds.height)
    ring = 1
    while ring * spacing <= reach:
        radius = ring * spacing
        for anchor_x, anchor_y in PURSUER_SPAWNS:
            for step in range(SPAWN_RING_POINTS):
                angle = 2.0 * math.pi * step / SPAWN_RING_POINTS
                yield (anchor_x + math.cos(angle) * radius, anchor_y + math.sin(angle) * radius)
        ring += 1
    y = size
    while y <= bounds.height - size:
        x = size
        while x <= bounds.width - size:
            yield (x, y)
            x += 2.0 * size
        y += 2.0 * size


def _place(
    entity: AIEntity,
    bounds: Bounds,
    obstacles: Sequence[Box],
    occupied: Sequence[AnyEntity],
) -> AIEntity:
    for candidate in _spawn_candidates(bounds, entity.size):
        position = bounds.clamp(candidate, entity.size)
        if not collides(position, entity, obstacles, occupied):
            return replace(entity, position=position)
    raise ValueError(f"No free spawn point for pursuer {entity.entity_id}")


def create_pursuers(
    config: SimulationConfig,
    bounds: Bounds,
    obstacles: Sequence[Box] = (),
    occupied: Sequence[AnyEntity] = (),
) -> List[Pursuer]:
    """Spawn ``config.pursuers`` pursuers, none touching a box or each other."""

    pursuers: List[Pursuer] = []
    placed: List[AnyEntity] = list(occupied)
    for index in range(config.pursuers):
        entity = AIEntity(
            entity_id=f"ai{index + 1}",
            position=(0.0, 0.0),
            speed=config.ai_speed,
            size=config.ai_size,
            # Start half a cycle out of phase with the human for contrast.
            pulse=math.pi,
            rotation=0.0,
            rotation_speed=config.ai_rotation_speed,
        )
        entity = _place(entity, bounds, obstacles, placed)
        logger.debug("%s spawns at (%.1f, %.1f)", entity.entity_id, entity.x, entity.y)
        placed.append(entity)
        vision = VisionState(
            can_see_player=False,
            cone_angle=config.cone_angle,
            vision_distance=config.vision_distance,
        )
        pursuers.append(Pursuer(entity=entity, vision=vision))
    return pursuers


def create_initial_world(
    config: Optional[SimulationConfig] = None,
    rng: Optional[random.Random] = None,
    obstacles: Optional[Sequence[Box]] = None,
) -> World:
    """Build the reference scenario described by ``config``."""

    config = config or SimulationConfig()
    if rng is None:
        rng = random.Random(config.seed)
    bounds = Bounds(width=config.width, height=config.height)
    if obstacles is None:
        obstacles = get_obstacle_layout(config.layout).boxes
    human = HumanEntity(
        entity_id="player1",
        position=bounds.clamp(HUMAN_SPAWN, config.human_size),
        speed=config.human_speed,
        size=config.human_size,
        pulse=0.0,
    )
    return World(
        bounds=bounds,
        human=human,
        pursuers=create_pursuers(config, bounds, tuple(obstacles), [human]),
        obstacles=tuple(obstacles),
        controller=PursuerAIController(rng),
        rng=rng,
        wander_interval_frames=config.wander_interval_frames,
        wander_chance=config.wander_chance,
    )
