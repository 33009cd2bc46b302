"""
Iso-lines (unfilled contours).

Uses the same classification and cutting as the band mesher but keeps the
cuts themselves as line segments instead of filling between them.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, TYPE_CHECKING

import numpy as np

from isobands.contouring.classifier import classify_triangle
from isobands.contouring.mesher import prepare_inputs
from isobands.contouring.normalize import normalize_field
from isobands.contouring.segments import generate_segments
from isobands.model.geometry_primitives import Point3
from isobands.model.lut import get_lookup_table
from isobands.model.settings import BandSettings

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class IsoLines:
    """
    Line segments along iso-levels.

    - ``positions``: 6 floats per segment (two end points)
    - ``colors``: 3 floats per end point
    - ``levels``: iso-value of each segment
    """
    positions: npt.NDArray[np.float64]
    colors: npt.NDArray[np.float64]
    levels: npt.NDArray[np.float64]

    @property
    def n_segments(self) -> int:
        return self.levels.size

    @property
    def segments(self) -> npt.NDArray[np.float64]:
        """(n_segments, 2, 3) view of the end points."""
        return self.positions.reshape(-1, 2, 3)


def build_iso_lines(
    indices: npt.ArrayLike,
    positions: npt.ArrayLike,
    field: npt.ArrayLike,
    settings: Optional[BandSettings] = None,
) -> IsoLines:
    """
    Cut every triangle along the iso-levels and return the cuts.

    Args:
        indices: Flat (or (m, 3)) triangle vertex indices.
        positions: Flat (or (n, 3)) vertex coordinates.
        field: (n,) raw scalar values, one per vertex.
        settings: Scalar window, band count and palette.

    Returns:
        The iso-line segments in triangle order.
    """
    settings = settings or BandSettings()
    settings.validate()
    lut = get_lookup_table(settings.lut_name, settings.band_count)

    triangles, points, values = prepare_inputs(indices, positions, field)
    if settings.normalize:
        values = normalize_field(values)

    vertices = [Point3(x, y, z) for x, y, z in points.tolist()]
    coords: List[float] = []
    colors: List[float] = []
    levels: List[float] = []

    for a, b, c in triangles.tolist():
        tri = classify_triangle(
            (vertices[a], vertices[b], vertices[c]),
            (values[a], values[b], values[c]),
            settings.min,
        )
        if tri is None:
            continue
        for segment in generate_segments(tri, settings):
            color = lut.color_at(segment.iso, settings.min, settings.max, settings.reversed)
            if color is None:
                color = settings.default_color
            coords.extend(segment.p1)
            coords.extend(segment.p2)
            colors.extend(color)
            colors.extend(color)
            levels.append(segment.iso)

    logger.info(f"Extracted {len(levels)} iso-line segments from {triangles.shape[0]} triangles.")
    return IsoLines(
        positions=np.asarray(coords, dtype=np.float64),
        colors=np.asarray(colors, dtype=np.float64),
        levels=np.asarray(levels, dtype=np.float64),
    )
