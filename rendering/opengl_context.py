"""OpenGL context helpers for Conesight's flat 2D canvas."""
from __future__ import annotations

from typing import Tuple

from OpenGL import GL as gl


BACKGROUND_COLOR = (0.95, 0.96, 0.97, 1.0)
GRID_COLOR = (0.87, 0.87, 0.87, 1.0)


def initialize_gl(surface_size: Tuple[int, int]) -> None:
    """Configure a top-left origin orthographic projection matching canvas space."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
    gl.glClearColor(*BACKGROUND_COLOR)

    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)

    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()

    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glEnable(gl.GL_LINE_SMOOTH)
    gl.glLineWidth(1.0)


def resize_viewport(surface_size: Tuple[int, int]) -> None:
    """Update viewport and projection when the window changes size."""
    initialize_gl(surface_size)
