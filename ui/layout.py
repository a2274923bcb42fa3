"""Layout helpers for Conesight's overlay panel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame


Size = Tuple[int, int]

LINE_HEIGHT = 20
LEGEND_ROW_HEIGHT = 18


@dataclass
class HudLayout:
    """Places the translucent info panel in the canvas' top-left corner."""

    window_size: Size
    margin: int = 16
    padding: int = 8
    panel_width: int = 300

    def update(self, window_size: Size) -> None:
        self.window_size = window_size

    def panel_rect(self, text_lines: int, legend_rows: int = 0) -> pygame.Rect:
        height = (
            self.padding * 2
            + text_lines * LINE_HEIGHT
            + legend_rows * (LEGEND_ROW_HEIGHT * 2)
        )
        width = min(self.panel_width, max(0, self.window_size[0] - 2 * self.margin))
        return pygame.Rect(self.margin, self.margin, width, height)

    def text_origin(self) -> Tuple[int, int]:
        return (self.margin + self.padding, self.margin + self.padding)

    def legend_origin(self, text_lines: int) -> Tuple[int, int]:
        x, y = self.text_origin()
        return (x, y + text_lines * LINE_HEIGHT)
