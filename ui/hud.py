"""GL drawing of the overlay panel on top of the scene."""
from __future__ import annotations

from typing import Tuple

import pygame
from OpenGL import GL as gl

from game.world import Frame
from rendering.palette import CONE_STROKE_ALERT, LABEL_COLOR, RGBA, to_rgb255
from .layout import LEGEND_ROW_HEIGHT, LINE_HEIGHT, HudLayout
from .status import DETECTED_TEXT, hud_lines, legend_entries


class HudRenderer:
    """Draws the status panel; expects the canvas projection to be active."""

    def __init__(self, layout: HudLayout) -> None:
        pygame.font.init()
        self._layout = layout
        self._font = pygame.font.SysFont("Consolas", 16)
        self._small_font = pygame.font.SysFont("Consolas", 12)
        self._bg_color: RGBA = (0.0, 0.0, 0.0, 0.5)
        self._text_color = LABEL_COLOR
        self._alert_color = to_rgb255(CONE_STROKE_ALERT)

    def draw(self, frame: Frame) -> None:
        lines = hud_lines(frame)
        legend = legend_entries()
        rect = self._layout.panel_rect(len(lines), len(legend))
        self._draw_rect(rect, self._bg_color)

        x, y = self._layout.text_origin()
        for line in lines:
            color = self._alert_color if line.endswith(DETECTED_TEXT) else self._text_color
            self._draw_text(x, y, line, color, self._font)
            y += LINE_HEIGHT

        legend_x, legend_y = self._layout.legend_origin(len(lines))
        for caption, swatches in legend:
            self._draw_text(legend_x, legend_y, caption, self._text_color, self._small_font)
            legend_y += LEGEND_ROW_HEIGHT
            cursor_x = legend_x
            for label, color in swatches:
                swatch = pygame.Rect(cursor_x, legend_y + 2, 10, 10)
                self._draw_rect(swatch, color)
                self._draw_text(cursor_x + 14, legend_y, label, self._text_color, self._small_font)
                cursor_x += 14 + self._small_font.size(label)[0] + 10
            legend_y += LEGEND_ROW_HEIGHT

    def _draw_rect(self, rect: pygame.Rect, color: RGBA) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_QUADS)
        gl.glVertex2f(rect.left, rect.top)
        gl.glVertex2f(rect.right, rect.top)
        gl.glVertex2f(rect.right, rect.bottom)
        gl.glVertex2f(rect.left, rect.bottom)
        gl.glEnd()

    def _draw_text(
        self, x: float, y: float, text: str, color: Tuple[int, int, int], font: pygame.font.Font
    ) -> None:
        surface = font.render(text, True, color)
        data = pygame.image.tostring(surface, "RGBA", True)
        gl.glRasterPos2f(x, y + surface.get_height())
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
