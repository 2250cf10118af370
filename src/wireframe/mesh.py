from __future__ import annotations

import numbers
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import InvalidFaceIndexError
from .math3d import Vec3

Edge = Tuple[int, int]


class Mesh:
    """Point list plus faces given as point-index outlines.

    A face of three or more indices is a closed outline (the last index links
    back to the first). A two-index face is a single edge; meshes use it to
    describe connecting edges that are not part of any polygon.
    """

    def __init__(
        self,
        points: Iterable[Union[Vec3, Sequence[float]]] = (),
        faces: Iterable[Sequence[int]] = (),
    ) -> None:
        self.points: List[Vec3] = [Vec3.of(p) for p in points]
        self.faces: List[List[int]] = []
        for face in faces:
            self.add_face(face)

    def add_point(self, point: Union[Vec3, Sequence[float]]) -> int:
        self.points.append(Vec3.of(point))
        return len(self.points) - 1

    def add_face(self, indices: Sequence[int]) -> None:
        face = list(indices)
        for i in face:
            if not isinstance(i, numbers.Integral):
                raise InvalidFaceIndexError(f"Face {face} has non-integer index {i!r}")
        face = [int(i) for i in face]
        for i in face:
            if not 0 <= i < len(self.points):
                raise InvalidFaceIndexError(
                    f"Face {face} references point {i}, mesh has {len(self.points)} points"
                )
        self.faces.append(face)

    @staticmethod
    def edges(face: Sequence[int]) -> Iterator[Edge]:
        count = len(face)
        if count < 2:
            return
        if count == 2:
            yield face[0], face[1]
            return
        for f in range(count):
            yield face[f], face[(f + 1) % count]

    def all_edges(self) -> Iterator[Edge]:
        for face in self.faces:
            yield from self.edges(face)


def box_mesh() -> Mesh:
    """Cube with corners at +-1: two quads plus the four edges joining them."""
    return Mesh(
        [
            (-1, -1, -1),  # 0
            (-1, -1, 1),   # 1
            (-1, 1, -1),   # 2
            (-1, 1, 1),    # 3
            (1, -1, -1),   # 4
            (1, -1, 1),    # 5
            (1, 1, -1),    # 6
            (1, 1, 1),     # 7
        ],
        [
            [0, 1, 3, 2],
            [4, 5, 7, 6],
            [0, 4],
            [1, 5],
            [3, 7],
            [2, 6],
        ],
    )


def grid_mesh(half_extent: int = 10) -> Mesh:
    """Flat tiles on the XZ plane for x, z in [-half_extent, half_extent].

    Every tile gets its own four points; neighbours do not share vertices.
    """
    mesh = Mesh()
    for x in range(-half_extent, half_extent + 1):
        for z in range(-half_extent, half_extent + 1):
            first = mesh.add_point((x, 0, z))
            mesh.add_point((x + 1, 0, z))
            mesh.add_point((x + 1, 0, z + 1))
            mesh.add_point((x, 0, z + 1))
            mesh.add_face([first, first + 1, first + 2, first + 3])
    return mesh
