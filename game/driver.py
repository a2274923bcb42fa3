"""Frame scheduling for Conesight.

The driver owns the running flag, the held-key state and the render sink.
Each tick is strictly sequential: snapshot input, step the world, render.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .entities import Bounds
from .keyboard import InputState
from .world import Frame, World

logger = logging.getLogger(__name__)

BoundsProvider = Callable[[], Optional[Bounds]]
RenderSink = Callable[[Frame], None]


class FrameDriver:
    """Runs one world step per tick until stopped."""

    def __init__(
        self,
        world: World,
        input_state: Optional[InputState] = None,
        bounds_provider: Optional[BoundsProvider] = None,
        sink: Optional[RenderSink] = None,
    ) -> None:
        self.world = world
        self.input = input_state if input_state is not None else InputState()
        self._bounds_provider = bounds_provider or (lambda: world.bounds)
        self._sink = sink
        self.running = False
        self.frames_run = 0
        self.frames_dropped = 0
        self.last_frame: Optional[Frame] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self.input.attach()
        logger.info("Simulation started with %d pursuer(s)", len(self.world.pursuers))

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        self.input.detach()
        logger.info(
            "Simulation stopped after %d frame(s), %d dropped",
            self.frames_run,
            self.frames_dropped,
        )

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """Run a single frame; return ``False`` if it was skipped."""

        if not self.running:
            return False
        bounds = self._bounds_provider()
        if bounds is None:
            self.frames_dropped += 1
            logger.debug("No playfield available, dropping frame %d", self.world.frame_index + 1)
            return False
        frame = self.world.step(self.input.snapshot(), bounds)
        self.frames_run += 1
        self.last_frame = frame
        if self._sink is not None:
            self._sink(frame)
        return True

    def run(self, frames: int) -> int:
        """Tick up to ``frames`` times, returning how many frames actually ran."""

        self.start()
        completed = 0
        try:
            for _ in range(frames):
                if not self.running:
                    break
                if self.tick():
                    completed += 1
        finally:
            self.stop()
        return completed
