from __future__ import annotations

import logging

import pygame
from OpenGL.GL import glViewport

from .input import InputState
from .renderer import LineRenderer

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        background: str = "#101010",
    ) -> None:
        pygame.init()

        # --- Anti-aliasing (MSAA) ---
        # Must be set BEFORE creating the OpenGL context.
        try:
            pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
            pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 4)
        except pygame.error:
            logger.info("MSAA attributes not supported, continuing without")

        pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF)
        pygame.display.set_caption(title)
        self.width = width
        self.height = height
        self.title = title
        self.surface = LineRenderer(width, height, background)
        self.input = InputState()
        glViewport(0, 0, width, height)
        logger.info("Opened %dx%d window", width, height)

    def poll(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            self.input.handle_event(event)
        self.input.update()
        return True

    def swap(self) -> None:
        self.surface.present()
        pygame.display.flip()

    def show_fps(self, fps: float) -> None:
        pygame.display.set_caption(f"{self.title} - {fps:.0f} FPS")

    def shutdown(self) -> None:
        pygame.quit()
