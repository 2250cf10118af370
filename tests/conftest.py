"""
Shared fixtures for the wireframe tests.

Provides a recording drawing surface so the scene driver can be exercised
without a window or GL context.
"""
import pytest


class RecordingSurface:
    def __init__(self, width=1280, height=720):
        self.width = width
        self.height = height
        self.lines = []
        self.clears = 0

    def clear(self):
        self.clears += 1
        self.lines = []

    def draw_line(self, p1, p2, color, width):
        self.lines.append((p1, p2, color, width))


@pytest.fixture
def surface():
    return RecordingSurface()
