from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
import pygame
from OpenGL import GL

from .math3d import Vec2

RGBA = Tuple[float, float, float, float]


class LineRenderer:
    """2D line surface drawn through the fixed-function OpenGL pipeline.

    ``draw_line`` only queues segments; ``present`` uploads one float32 vertex
    array per (color, width) pair and issues a single GL_LINES draw for it.
    Coordinates are pixels with the origin at the top-left corner.
    """

    def __init__(self, width: int, height: int, background: str = "#101010") -> None:
        self.width = width
        self.height = height
        self.background = background
        self._colors: Dict[str, RGBA] = {}
        self._batches: Dict[Tuple[RGBA, float], List[float]] = {}

    def _rgba(self, color: str) -> RGBA:
        rgba = self._colors.get(color)
        if rgba is None:
            rgba = tuple(pygame.Color(color).normalize())
            self._colors[color] = rgba
        return rgba

    def clear(self) -> None:
        self._batches.clear()

    def draw_line(self, p1: Vec2, p2: Vec2, color: str = "red", width: float = 2.0) -> None:
        batch = self._batches.setdefault((self._rgba(color), float(width)), [])
        batch.extend((p1.x, p1.y, p2.x, p2.y))

    def segment_count(self) -> int:
        return sum(len(batch) for batch in self._batches.values()) // 4

    def present(self) -> None:
        r, g, b, a = self._rgba(self.background)
        GL.glViewport(0, 0, self.width, self.height)
        GL.glClearColor(r, g, b, a)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        GL.glMatrixMode(GL.GL_PROJECTION)
        GL.glLoadIdentity()
        GL.glOrtho(0, self.width, self.height, 0, -1, 1)
        GL.glMatrixMode(GL.GL_MODELVIEW)
        GL.glLoadIdentity()

        GL.glDisable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_LINE_SMOOTH)
        GL.glEnable(GL.GL_BLEND)
        GL.glBlendFunc(GL.GL_SRC_ALPHA, GL.GL_ONE_MINUS_SRC_ALPHA)

        GL.glEnableClientState(GL.GL_VERTEX_ARRAY)
        for (rgba, width), coords in self._batches.items():
            if not coords:
                continue
            # PyOpenGL can't reliably infer array types from plain Python lists.
            vertices = np.asarray(coords, dtype=np.float32)
            GL.glColor4f(*rgba)
            GL.glLineWidth(width)
            GL.glVertexPointer(2, GL.GL_FLOAT, 0, vertices)
            GL.glDrawArrays(GL.GL_LINES, 0, vertices.size // 2)
        GL.glDisableClientState(GL.GL_VERTEX_ARRAY)
