from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .math3d import Mat4, Vec3, matmul

Axis = Union[Vec3, Sequence[float]]


@dataclass(frozen=True)
class Transform:
    """Pending affine transform: world = translation x rotation x scaling.

    Points are scaled first, then rotated, then translated. The ``with_*``
    builders return a new Transform; the untouched components are cloned, not
    shared.
    """

    translation: Mat4 = field(default_factory=Mat4.identity)
    rotation: Mat4 = field(default_factory=Mat4.identity)
    scaling: Mat4 = field(default_factory=Mat4.identity)

    def matrix(self) -> Mat4:
        # Recomputed every call; the three components are the only state.
        return matmul(self.translation, matmul(self.rotation, self.scaling))

    def clone(self) -> "Transform":
        return Transform(
            translation=self.translation.clone(),
            rotation=self.rotation.clone(),
            scaling=self.scaling.clone(),
        )

    @staticmethod
    def from_translation(x: float, y: float, z: float) -> "Transform":
        return Transform(translation=Mat4.translation(x, y, z))

    @staticmethod
    def from_scaling(x: float, y: float, z: float) -> "Transform":
        return Transform(scaling=Mat4.scaling(x, y, z))

    @staticmethod
    def from_rotation(axis: Axis, angle: float) -> "Transform":
        return Transform(rotation=Mat4.rotation(axis, angle))

    def with_translation(self, x: float, y: float, z: float) -> "Transform":
        return Transform(
            translation=Mat4.translation(x, y, z),
            rotation=self.rotation.clone(),
            scaling=self.scaling.clone(),
        )

    def with_scaling(self, x: float, y: float, z: float) -> "Transform":
        return Transform(
            translation=self.translation.clone(),
            rotation=self.rotation.clone(),
            scaling=Mat4.scaling(x, y, z),
        )

    def with_rotation(self, axis: Axis, angle: float) -> "Transform":
        return Transform(
            translation=self.translation.clone(),
            rotation=Mat4.rotation(axis, angle),
            scaling=self.scaling.clone(),
        )
