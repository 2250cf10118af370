from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, List, Optional, Protocol

from wireframe.camera import FlyCamera, perspective, world_to_screen
from wireframe.math3d import Mat4, Vec2, matmul
from wireframe.mesh import Mesh, box_mesh, grid_mesh
from wireframe.transform import Transform

from . import config
from .player import MoveIntent, Player
from .rng import Mulberry32

logger = logging.getLogger(__name__)

Y_AXIS = (0.0, 1.0, 0.0)


class Surface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...

    def draw_line(self, p1: Vec2, p2: Vec2, color: str, width: float) -> None: ...


@dataclass
class SceneObject:
    transform: Transform
    color: str


def scatter_boxes(count: int, seed: int) -> List[SceneObject]:
    """Static boxes placed once from a seeded generator; same seed, same scene."""
    rng = Mulberry32(seed)
    rx, ry, rz = config.STATIC_BOX_RANGE
    lo, hi = config.STATIC_BOX_SCALE
    objects = []
    for _ in range(count):
        # Draw order is part of the scene layout: translation, scale, axis, angle.
        translation = (rng.uniform(-rx, rx), rng.uniform(-ry, ry), rng.uniform(-rz, rz))
        scaling = (rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))
        axis = (rng.uniform(0, 1), rng.uniform(0, 1), rng.uniform(0, 1))
        angle = rng.random() * math.pi * 2
        transform = (
            Transform()
            .with_translation(*translation)
            .with_scaling(*scaling)
            .with_rotation(axis, angle)
        )
        objects.append(SceneObject(transform=transform, color=config.STATIC_BOX_COLOR))
    return objects


class World:
    """Scene driver: owns the camera, the animation angle and the object list.

    ``tick(delta)`` is the whole per-frame update: move the camera from the
    current input intent, clear the surface, draw the grid, then draw every
    box. ``look(dx, dy)`` may be called between ticks.
    """

    def __init__(
        self,
        surface: Surface,
        intent_source: Callable[[], MoveIntent],
        seed: int = config.SEED,
        static_boxes: int = config.STATIC_BOX_COUNT,
    ) -> None:
        self.surface = surface
        self.intent_source = intent_source

        self.box_mesh: Mesh = box_mesh()
        self.grid_mesh: Mesh = grid_mesh(config.GRID_HALF_EXTENT)

        self.camera = FlyCamera(config.CAMERA_START, config.CAMERA_TARGET, config.UP)
        self.player = Player(self.camera)
        self.projection: Mat4 = perspective(
            math.radians(config.FOV_DEG),
            surface.width / surface.height,
            config.NEAR,
            config.FAR,
        )
        self.view: Mat4 = self.camera.view_matrix()

        self.angle = 0.0
        self.grid_model = (
            Transform()
            .with_scaling(*config.GRID_SCALE)
            .with_translation(*config.GRID_OFFSET)
        )
        self.static_objects = scatter_boxes(static_boxes, seed)
        self.lines_drawn = 0
        logger.debug(
            "Scene ready: %d static boxes (seed=%d), grid %d faces",
            len(self.static_objects),
            seed,
            len(self.grid_mesh.faces),
        )

    def look(self, dx: float, dy: float) -> None:
        self.player.look(dx, dy)
        self.view = self.camera.view_matrix()

    def animated_objects(self) -> List[SceneObject]:
        spinner = (
            Transform()
            .with_translation(-2, 0, 0)
            .with_rotation(Y_AXIS, self.angle)
        )
        counter_spinner = (
            Transform()
            .with_translation(2, 1, 0)
            .with_rotation(Y_AXIS, -self.angle)
            .with_scaling(1, 2, 1)
        )
        return [
            SceneObject(transform=spinner, color=config.SPINNER_COLOR),
            SceneObject(transform=counter_spinner, color=config.COUNTER_SPINNER_COLOR),
        ]

    def objects(self) -> List[SceneObject]:
        return self.animated_objects() + self.static_objects

    def tick(self, delta: float) -> None:
        if self.player.update(delta, self.intent_source()):
            self.view = self.camera.view_matrix()

        self.surface.clear()
        self.lines_drawn = 0

        self.lines_drawn += self.draw_mesh(
            self.grid_mesh, self.grid_model, config.GRID_COLOR, config.GRID_LINE_WIDTH
        )

        self.angle += math.radians((config.ROTATION_SPEED_DEG * delta) % 360)
        for obj in self.objects():
            self.lines_drawn += self.draw_mesh(
                self.box_mesh, obj.transform, obj.color, config.BOX_LINE_WIDTH
            )

    def draw_mesh(self, mesh: Mesh, model: Transform, color: str, width: float) -> int:
        mvp = matmul(self.projection, matmul(self.view, model))
        projected: List[Optional[Vec2]] = [
            world_to_screen(mvp, p, self.surface.width, self.surface.height) for p in mesh.points
        ]
        drawn = 0
        for i, j in mesh.all_edges():
            p1, p2 = projected[i], projected[j]
            if p1 is None or p2 is None:
                continue
            self.surface.draw_line(p1, p2, color, width)
            drawn += 1
        return drawn
