from __future__ import annotations

from typing import Dict, TYPE_CHECKING

import numpy as np
import numba as nb

if TYPE_CHECKING:
    import numpy.typing as npt
    from isobands.contouring.buffers import BandMesh


@nb.njit(cache=True)
def _triangle_areas(
    points: npt.NDArray[np.float64],
    triangles: npt.NDArray[np.int64]
) -> npt.NDArray[np.float64]:
    """
    Area of every triangle, half the norm of the edge cross product.

    Args:
        points: (n, 3) vertex coordinates.
        triangles: (m, 3) vertex indices.

    Returns:
        (m,) array of areas.
    """
    areas = np.empty(triangles.shape[0], dtype=np.float64)
    for t in range(triangles.shape[0]):
        i, j, k = triangles[t, 0], triangles[t, 1], triangles[t, 2]
        ux = points[j, 0] - points[i, 0]
        uy = points[j, 1] - points[i, 1]
        uz = points[j, 2] - points[i, 2]
        vx = points[k, 0] - points[i, 0]
        vy = points[k, 1] - points[i, 1]
        vz = points[k, 2] - points[i, 2]
        cx = uy * vz - uz * vy
        cy = uz * vx - ux * vz
        cz = ux * vy - uy * vx
        areas[t] = 0.5 * np.sqrt(cx * cx + cy * cy + cz * cz)
    return areas


def triangle_areas(positions: npt.ArrayLike, indices: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Area of every triangle of an indexed mesh.

    Args:
        positions: Flat (or (n, 3)) vertex coordinates.
        indices: Flat (or (m, 3)) vertex indices.

    Returns:
        (m,) array of areas.
    """
    points = np.ascontiguousarray(positions, dtype=np.float64).reshape(-1, 3)
    triangles = np.ascontiguousarray(indices, dtype=np.int64).reshape(-1, 3)
    return _triangle_areas(points, triangles)


def band_areas(mesh: BandMesh) -> Dict[float, float]:
    """
    Surface area of each band of a band mesh.

    Args:
        mesh: Output of the band mesher.

    Returns:
        Mapping iso-level -> area, ordered by increasing level.
    """
    if mesh.is_empty:
        return {}

    areas = triangle_areas(mesh.positions, mesh.indices)
    levels, inverse = np.unique(mesh.levels, return_inverse=True)
    sums = np.bincount(inverse.reshape(-1), weights=areas, minlength=levels.size)
    return {float(level): float(area) for level, area in zip(levels, sums)}
