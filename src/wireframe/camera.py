from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

from .math3d import Mat4, Vec2, Vec3, cross, dot, matmul

Point = Union[Vec3, Sequence[float]]

# Clip-space w at or below this is treated as behind (or at) the eye.
MIN_CLIP_W = 1e-6


def perspective(fov: float, aspect: float, near: float, far: float) -> Mat4:
    """Right-handed perspective projection, ``fov`` in radians.

    Depth is mapped with (far+near)/(near-far) and 2*far*near/(near-far), so
    NDC z lands in [-1, 1] between the near and far planes.
    """
    f = 1.0 / math.tan(fov / 2.0)
    nf = 1.0 / (near - far)
    return Mat4([
        [f / aspect, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) * nf, (2.0 * far * near) * nf],
        [0.0, 0.0, -1.0, 0.0],
    ])


def look_at(eye: Point, target: Point, up: Point) -> Mat4:
    eye = Vec3.of(eye)
    target = Vec3.of(target)
    up = Vec3.of(up)

    f = (target - eye).normalized()
    s = cross(f, up).normalized()
    u = cross(s, f)

    return Mat4([
        [s.x, s.y, s.z, -dot(s, eye)],
        [u.x, u.y, u.z, -dot(u, eye)],
        [-f.x, -f.y, -f.z, dot(f, eye)],
        [0.0, 0.0, 0.0, 1.0],
    ])


def to_yaw_pitch(eye: Point, target: Point) -> Tuple[float, float]:
    """Yaw is measured from -Z (atan2(f.x, -f.z)), pitch is asin(f.y).

    Straight up or down (pitch = +-pi/2) leaves yaw undefined; whatever atan2
    returns there is passed through unchanged.
    """
    forward = (Vec3.of(target) - Vec3.of(eye)).normalized()
    yaw = math.atan2(forward.x, -forward.z)
    pitch = math.asin(max(-1.0, min(1.0, forward.y)))
    return yaw, pitch


def forward_direction(yaw: float, pitch: float) -> Vec3:
    cy = math.cos(yaw)
    sy = math.sin(yaw)
    cp = math.cos(pitch)
    sp = math.sin(pitch)
    return Vec3(sy * cp, sp, -cy * cp).normalized()


def from_yaw_pitch(yaw: float, pitch: float, eye: Point) -> Vec3:
    """Synthetic look target one unit ahead of ``eye``."""
    return Vec3.of(eye) + forward_direction(yaw, pitch)


def to_screen(ndc: Vec3, width: float, height: float) -> Vec2:
    return Vec2(
        (ndc.x * 0.5 + 0.5) * width,
        (1.0 - (ndc.y * 0.5 + 0.5)) * height,
    )


def world_to_screen(mvp, point: Point, width: float, height: float) -> Optional[Vec2]:
    """Project a model-space point to pixels, or None when it is not in front of the eye."""
    clip = matmul(mvp, Vec3.of(point))
    if clip.w <= MIN_CLIP_W:
        return None
    ndc = clip.vec3() / clip.w
    return to_screen(ndc, width, height)


class FlyCamera:
    def __init__(self, position: Point, target: Point, up: Point = (0.0, 1.0, 0.0)) -> None:
        self.position = Vec3.of(position)
        self.up = Vec3.of(up)
        self.yaw, self.pitch = to_yaw_pitch(self.position, target)

    def forward(self) -> Vec3:
        return forward_direction(self.yaw, self.pitch)

    def right(self) -> Vec3:
        # Not normalized: movement code normalizes the combined vector.
        return cross(self.forward(), self.up)

    def target(self) -> Vec3:
        return from_yaw_pitch(self.yaw, self.pitch, self.position)

    def view_matrix(self) -> Mat4:
        return look_at(self.position, self.target(), self.up)

    def turn(self, dyaw: float, dpitch: float, pitch_limit: Optional[float] = None) -> None:
        self.yaw += dyaw
        self.pitch += dpitch
        if pitch_limit is not None:
            self.pitch = max(-pitch_limit, min(pitch_limit, self.pitch))

    def move(self, offset: Vec3) -> None:
        self.position = self.position + offset
