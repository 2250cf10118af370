from __future__ import annotations

from typing import Callable, Optional

import pygame

LookHandler = Callable[[float, float], None]


class InputState:
    """Keyboard snapshot plus pointer-captured mouse look.

    Clicking the window captures the pointer (grabbed and hidden); Escape
    releases it. Mouse motion reaches ``on_look`` only while captured.
    """

    def __init__(self, on_look: Optional[LookHandler] = None) -> None:
        self.on_look = on_look
        self.captured = False
        self.keys = pygame.key.get_pressed()
        self.mods = pygame.key.get_mods()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and not self.captured:
            self.capture(True)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE and self.captured:
            self.capture(False)
        elif event.type == pygame.MOUSEMOTION and self.captured and self.on_look is not None:
            dx, dy = event.rel
            self.on_look(float(dx), float(dy))

    def capture(self, enabled: bool) -> None:
        self.captured = enabled
        pygame.event.set_grab(enabled)
        pygame.mouse.set_visible(not enabled)
        # Discard the jump accumulated while the pointer was free.
        pygame.mouse.get_rel()

    def update(self) -> None:
        self.keys = pygame.key.get_pressed()
        self.mods = pygame.key.get_mods()

    def key(self, key: int) -> bool:
        return bool(self.keys[key])

    def shift(self) -> bool:
        return bool(self.mods & pygame.KMOD_SHIFT)
