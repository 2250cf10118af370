from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame

from wireframe.camera import FlyCamera
from wireframe.math3d import Vec2

from . import config


class KeySource(Protocol):
    def key(self, key: int) -> bool: ...

    def shift(self) -> bool: ...


@dataclass(frozen=True)
class MoveIntent:
    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    boost: bool = False

    def direction(self) -> Vec2:
        """(strafe, advance) in [-1, 1]; opposing keys cancel out."""
        return Vec2(float(self.right) - float(self.left), float(self.forward) - float(self.back))

    @staticmethod
    def from_input(input_state: KeySource) -> "MoveIntent":
        return MoveIntent(
            forward=input_state.key(pygame.K_w),
            back=input_state.key(pygame.K_s),
            left=input_state.key(pygame.K_a),
            right=input_state.key(pygame.K_d),
            boost=input_state.shift(),
        )


class Player:
    def __init__(self, camera: FlyCamera) -> None:
        self.camera = camera

    @property
    def move_speed(self) -> float:
        return config.MOVE_SPEED

    def update(self, delta: float, intent: MoveIntent) -> bool:
        """Advance the camera along its own axes. Returns True if it moved."""
        direction = intent.direction()
        if direction.length_squared() == 0:
            return False
        direction = direction.normalized()

        camera = self.camera
        move = camera.forward() * direction.y + camera.right() * direction.x
        if move.length_squared() == 0:
            return False
        move = move.normalized()

        speed = self.move_speed * (config.BOOST_MULTIPLIER if intent.boost else 1.0)
        camera.move(move * (speed * delta))
        return True

    def look(self, dx: float, dy: float) -> None:
        sensitivity = config.MOUSE_SENSITIVITY
        self.camera.turn(dx * sensitivity, -dy * sensitivity, config.PITCH_LIMIT)
