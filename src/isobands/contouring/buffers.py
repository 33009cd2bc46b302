from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from isobands.model.geometry_primitives import Point3


@dataclass(frozen=True, eq=False)
class BandMesh:
    """
    Flat-colored triangle mesh produced by the mesher.

    Vertices are not shared between polygons so every polygon carries its own
    color. All buffers are flat:

    - ``positions``: 3 floats per vertex
    - ``indices``: 3 vertex indices per triangle
    - ``colors``: 3 floats in [0, 1] per vertex
    - ``levels``: iso-value that colored each triangle
    """
    positions: npt.NDArray[np.float64]
    indices: npt.NDArray[np.int64]
    colors: npt.NDArray[np.float64]
    levels: npt.NDArray[np.float64]

    @classmethod
    def empty(cls) -> BandMesh:
        return cls(
            positions=np.empty(0, dtype=np.float64),
            indices=np.empty(0, dtype=np.int64),
            colors=np.empty(0, dtype=np.float64),
            levels=np.empty(0, dtype=np.float64),
        )

    @property
    def n_vertices(self) -> int:
        return self.positions.size // 3

    @property
    def n_triangles(self) -> int:
        return self.indices.size // 3

    @property
    def is_empty(self) -> bool:
        return self.indices.size == 0

    @property
    def points(self) -> npt.NDArray[np.float64]:
        """(n_vertices, 3) view of the positions."""
        return self.positions.reshape(-1, 3)

    @property
    def triangles(self) -> npt.NDArray[np.int64]:
        """(n_triangles, 3) view of the indices."""
        return self.indices.reshape(-1, 3)

    @property
    def vertex_colors(self) -> npt.NDArray[np.float64]:
        """(n_vertices, 3) view of the colors."""
        return self.colors.reshape(-1, 3)


@dataclass
class PolygonBuffer:
    """
    Growable output buffers of one worker.

    Polygons are fan-triangulated around their first vertex as they are added.
    """
    positions: List[float] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    colors: List[float] = field(default_factory=list)
    levels: List[float] = field(default_factory=list)

    @property
    def n_vertices(self) -> int:
        return len(self.positions) // 3

    def add_polygon(
        self,
        vertices: Sequence[Point3],
        color: Tuple[float, float, float],
        level: float
    ) -> None:
        """
        Append a convex polygon with one flat color.

        Args:
            vertices: 3 or more vertices in winding order.
            color: RGB color repeated on every vertex.
            level: Iso-value recorded for each emitted triangle.
        """
        n = len(vertices)
        if n < 3:
            raise ValueError(f"A polygon needs at least 3 vertices, got {n}.")

        first = self.n_vertices
        for vertex in vertices:
            self.positions.extend(vertex)
            self.colors.extend(color)

        # Fan around vertex 0
        for k in range(1, n - 1):
            self.indices.extend((first, first + k, first + k + 1))
            self.levels.append(level)

    @classmethod
    def concatenate(cls, buffers: Iterable[PolygonBuffer]) -> PolygonBuffer:
        """Join buffers in the given order, shifting their indices."""
        out = cls()
        for buffer in buffers:
            offset = out.n_vertices
            out.positions.extend(buffer.positions)
            out.colors.extend(buffer.colors)
            out.levels.extend(buffer.levels)
            out.indices.extend(i + offset for i in buffer.indices)
        return out

    def to_mesh(self) -> BandMesh:
        return BandMesh(
            positions=np.asarray(self.positions, dtype=np.float64),
            indices=np.asarray(self.indices, dtype=np.int64),
            colors=np.asarray(self.colors, dtype=np.float64),
            levels=np.asarray(self.levels, dtype=np.float64),
        )
