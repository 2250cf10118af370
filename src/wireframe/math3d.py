from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Iterable, Sequence, Tuple, TypeVar, Union

from .errors import ArityMismatchError, DegenerateVectorError


class _VecBase:
    """Shared algebra for the fixed-size vectors.

    Subclasses are frozen dataclasses and list their own components in
    ``values()``; nothing here inspects fields at runtime.
    """

    def values(self) -> Tuple[float, ...]:
        raise NotImplementedError

    def size(self) -> int:
        return len(self.values())

    def length_squared(self) -> float:
        return sum(v * v for v in self.values())

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self: V) -> V:
        length = self.length()
        if length == 0.0:
            raise DegenerateVectorError("Cannot normalize a vector of length 0")
        return type(self)(*(v / length for v in self.values()))

    def __iter__(self):
        return iter(self.values())

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return sub(self, other)

    def __mul__(self, other):
        return mul(self, other)

    def __rmul__(self, other):
        return mul(self, other)

    def __truediv__(self, other):
        return div(self, other)

    def __neg__(self):
        return mul(self, -1.0)


@dataclass(frozen=True)
class Vec2(_VecBase):
    x: float
    y: float

    def values(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vec3(_VecBase):
    x: float
    y: float
    z: float

    def values(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def of(value: Union["Vec3", Sequence[float]]) -> "Vec3":
        if isinstance(value, Vec3):
            return value
        vals = tuple(value)
        if len(vals) != 3:
            raise ArityMismatchError(f"Vec3 expects 3 components, got {len(vals)}")
        return Vec3(float(vals[0]), float(vals[1]), float(vals[2]))

    def vec3(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    def vec4(self, w: float = 1.0) -> "Vec4":
        return Vec4(self.x, self.y, self.z, w)


@dataclass(frozen=True)
class Vec4(_VecBase):
    x: float
    y: float
    z: float
    w: float

    def values(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def vec3(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def vec4(self) -> "Vec4":
        return Vec4(self.x, self.y, self.z, self.w)


V = TypeVar("V", Vec2, Vec3, Vec4)
Scalar = Union[int, float]


def _op(v1: V, v2: Union[V, Scalar], operator: Callable[[float, float], float]) -> V:
    if isinstance(v2, (int, float)):
        others: Tuple[float, ...] = (float(v2),) * v1.size()
    elif not isinstance(v2, _VecBase) or v1.size() != v2.size():
        raise ArityMismatchError(
            f"Mismatched vector size: {type(v1).__name__} and {type(v2).__name__}"
        )
    else:
        others = v2.values()
    return type(v1)(*(operator(a, b) for a, b in zip(v1.values(), others)))


def add(v1: V, v2: Union[V, Scalar]) -> V:
    return _op(v1, v2, lambda a, b: a + b)


def sub(v1: V, v2: Union[V, Scalar]) -> V:
    return _op(v1, v2, lambda a, b: a - b)


def mul(v1: V, v2: Union[V, Scalar]) -> V:
    return _op(v1, v2, lambda a, b: a * b)


def div(v1: V, v2: Union[V, Scalar]) -> V:
    return _op(v1, v2, lambda a, b: a / b)


def dot(v1: Union[_VecBase, Sequence[float]], v2: Union[_VecBase, Sequence[float]]) -> float:
    """Sum of elementwise products. Accepts vectors or plain float sequences."""
    vals1 = v1.values() if isinstance(v1, _VecBase) else tuple(v1)
    vals2 = v2.values() if isinstance(v2, _VecBase) else tuple(v2)
    if len(vals1) != len(vals2):
        raise ArityMismatchError(f"dot() operands differ in size: {len(vals1)} and {len(vals2)}")
    return sum(a * b for a, b in zip(vals1, vals2))


def cross(v1: Vec3, v2: Vec3) -> Vec3:
    if not isinstance(v1, Vec3) or not isinstance(v2, Vec3):
        raise ArityMismatchError("Cross product vectors must be of size 3")
    return Vec3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def cross2(v1: Vec2, v2: Vec2) -> float:
    """z component of the 3D cross product of two planar vectors."""
    if not isinstance(v1, Vec2) or not isinstance(v2, Vec2):
        raise ArityMismatchError("cross2 product vectors must be of size 2")
    return v1.x * v2.y - v1.y * v2.x


Rows = Tuple[Tuple[float, float, float, float], ...]


class Mat4:
    """4x4 matrix stored row-major as ``rows[row][col]``.

    Immutable; ``clone()`` exists so callers that want an independent copy can
    say so explicitly.
    """

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        built = tuple(tuple(float(v) for v in row) for row in rows)
        if len(built) != 4 or any(len(row) != 4 for row in built):
            raise ArityMismatchError(
                f"Mat4 expects 4 rows of 4 floats, got {[len(row) for row in built]}"
            )
        self.rows: Rows = built

    @staticmethod
    def identity() -> "Mat4":
        return Mat4([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @staticmethod
    def translation(x: float, y: float, z: float) -> "Mat4":
        return Mat4([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @staticmethod
    def scaling(x: float, y: float, z: float) -> "Mat4":
        return Mat4([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @staticmethod
    def rotation(axis: Union[Vec3, Sequence[float]], angle: float) -> "Mat4":
        """Axis-angle rotation (Rodrigues). The axis is normalized first."""
        x, y, z = Vec3.of(axis).normalized().values()
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c
        return Mat4([
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def clone(self) -> "Mat4":
        return Mat4(self.rows)

    def row(self, i: int) -> Tuple[float, float, float, float]:
        return self.rows[i]

    def column(self, j: int) -> Tuple[float, float, float, float]:
        return (self.rows[0][j], self.rows[1][j], self.rows[2][j], self.rows[3][j])

    def values(self) -> list[float]:
        return [v for row in self.rows for v in row]

    def __matmul__(self, other):
        return matmul(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"Mat4({[list(row) for row in self.rows]})"


def _as_matrix(value) -> Mat4:
    # Anything exposing matrix() (e.g. Transform) collapses to its Mat4.
    if isinstance(value, Mat4):
        return value
    matrix = getattr(value, "matrix", None)
    if callable(matrix):
        return matrix()
    raise TypeError(f"Expected Mat4 or Transform, got {type(value).__name__}")


def matmul(m1, m2):
    """Multiply a matrix by a matrix or by a vector.

    ``m1`` is a Mat4 or a Transform. With a Mat4/Transform ``m2`` the result is
    the matrix product; with a Vec3 (promoted with w=1) or Vec4 it is the
    transformed Vec4.
    """
    a = _as_matrix(m1)

    if isinstance(m2, (Vec3, Vec4)):
        v = m2.vec4() if isinstance(m2, Vec3) else m2
        r0, r1, r2, r3 = a.rows
        return Vec4(dot(r0, v), dot(r1, v), dot(r2, v), dot(r3, v))

    if isinstance(m2, Vec2):
        raise ArityMismatchError("Mat4 cannot multiply a Vec2")

    b = _as_matrix(m2)
    columns = [b.column(j) for j in range(4)]
    return Mat4([[dot(row, col) for col in columns] for row in a.rows])
