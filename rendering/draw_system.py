"""Flat-shape renderer for Conesight frames."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
import pygame
from OpenGL import GL as gl

from game.entities import AnyEntity, Box
from game.world import Frame, Pursuer
from .opengl_context import GRID_COLOR
from .palette import (
    AI_OUTLINE,
    HUMAN_OUTLINE,
    LABEL_COLOR,
    RGBA,
    cone_colors,
    entity_color,
)
from .shapes import (
    Polygon,
    create_box_quad,
    create_circle,
    create_cone_wedge,
    create_grid_lines,
    facing_indicator,
    pulsing_radius,
)


class SceneRenderer:
    """Draws grid, boxes, vision wedges and avatars for a finished frame."""

    def __init__(self) -> None:
        pygame.font.init()
        self._label_font = pygame.font.SysFont("Arial", 12)
        self._box_outline: RGBA = (0.25, 0.18, 0.12, 1.0)

    def draw(self, frame: Frame) -> None:
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        self._draw_grid(frame)

        for box in frame.obstacles:
            self._draw_box(box, frame.index)

        # Cones sit underneath every avatar.
        for pursuer in frame.pursuers:
            self._draw_vision_cone(pursuer)

        for pursuer in frame.pursuers:
            self._draw_avatar(pursuer.entity)
        # The human goes last so it stays on top when overlapping.
        self._draw_avatar(frame.human)

    # ------------------------------------------------------------------
    # Scene layers
    # ------------------------------------------------------------------
    def _draw_grid(self, frame: Frame) -> None:
        gl.glLineWidth(1.0)
        self._emit_segments(create_grid_lines(frame.bounds), GRID_COLOR)

    def _draw_box(self, box: Box, frame_index: int) -> None:
        # Boxes shimmer slightly; the box itself never changes.
        glow = 0.06 * math.sin(box.pulse + frame_index * 0.05)
        r, g, b, a = box.color
        fill = (
            max(0.0, min(1.0, r + glow)),
            max(0.0, min(1.0, g + glow)),
            max(0.0, min(1.0, b + glow)),
            a,
        )
        quad = create_box_quad(box)
        self._emit(gl.GL_QUADS, quad, fill)
        gl.glLineWidth(2.0)
        self._emit(gl.GL_LINE_LOOP, quad, self._box_outline)

    def _draw_vision_cone(self, pursuer: Pursuer) -> None:
        ai = pursuer.entity
        if ai.rotation is None:
            return
        vision = pursuer.vision
        wedge = create_cone_wedge(ai.position, ai.rotation, vision.cone_angle, vision.vision_distance)
        fill, stroke = cone_colors(vision.can_see_player)
        self._emit(gl.GL_TRIANGLE_FAN, wedge.fan(), fill)
        gl.glLineWidth(1.0)
        self._emit(gl.GL_LINE_LOOP, np.vstack([wedge.center, wedge.outline]), stroke)

    def _draw_avatar(self, entity: AnyEntity) -> None:
        is_ai = entity.kind == "ai"
        body: Polygon = create_circle(entity.position, pulsing_radius(entity.size, entity.pulse))
        self._emit(gl.GL_TRIANGLE_FAN, body.fan(), entity_color(entity))
        outline = AI_OUTLINE if is_ai else HUMAN_OUTLINE
        gl.glLineWidth(2.0)
        self._emit(gl.GL_LINE_LOOP, body.outline, outline)

        if entity.kind == "human":
            indicator = facing_indicator(entity.position, entity.size, direction=entity.direction)
        else:
            indicator = facing_indicator(entity.position, entity.size, rotation=entity.rotation)
        if indicator is not None:
            gl.glLineWidth(3.0)
            self._emit(gl.GL_LINES, indicator, outline)

        self._draw_label("AI" if is_ai else "P1", entity.position)

    # ------------------------------------------------------------------
    # GL helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _emit(mode: int, vertices: np.ndarray, color: Sequence[float]) -> None:
        if len(vertices) == 0:
            return
        gl.glColor4f(*color)
        gl.glBegin(mode)
        for x, y in vertices:
            gl.glVertex2f(float(x), float(y))
        gl.glEnd()

    def _emit_segments(self, segments: np.ndarray, color: Sequence[float]) -> None:
        self._emit(gl.GL_LINES, segments.reshape(-1, 2), color)

    def _draw_label(self, text: str, center: Tuple[float, float]) -> None:
        surface = self._label_font.render(text, True, LABEL_COLOR)
        data = pygame.image.tostring(surface, "RGBA", True)
        x = center[0] - surface.get_width() * 0.5
        # Raster position is the bitmap's bottom-left corner.
        y = center[1] + surface.get_height() * 0.5
        gl.glRasterPos2f(x, y)
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
