from __future__ import annotations

import math
from typing import List, TYPE_CHECKING

from isobands.config import LEVEL_TOLERANCE, MAX_SEGMENTS_PER_TRIANGLE
from isobands.model.geometry_primitives import IsoSegment, Point3

if TYPE_CHECKING:
    from isobands.model.geometry_primitives import ClassifiedTriangle
    from isobands.model.settings import BandSettings


def edge_weight(va: float, vb: float, iso: float) -> float:
    """
    Weight of the first end point for the crossing of ``iso`` on an edge.

    Args:
        va: Scalar value at the first end point.
        vb: Scalar value at the second end point, ``vb != va``.
        iso: Iso-level strictly between (or at) the two values.

    Returns:
        ``w`` such that ``w * A + (1 - w) * B`` lies on the iso-level.
    """
    return 1.0 - abs(iso - va) / abs(vb - va)


def first_level(settings: BandSettings) -> float:
    """
    First iso-level, snapped to a multiple of the increment counted from zero.

    Snapping keeps band boundaries identical for every triangle whatever
    ``min`` is. Halves round up. An empty window has no levels and returns
    ``min``.
    """
    increment = settings.increment
    if increment <= 0.0:
        return settings.min
    return increment * math.floor(settings.min / increment + 0.5)


def level_step(tri: ClassifiedTriangle, settings: BandSettings, begin: float) -> float:
    """
    Spacing of the iso-levels walked for one triangle.

    The configured increment is coarsened when more than
    ``MAX_SEGMENTS_PER_TRIANGLE`` levels would fit between ``begin`` and the
    top of the triangle (or window).
    """
    increment = settings.increment
    span = min(tri.v3, settings.max) - begin
    if span / increment > MAX_SEGMENTS_PER_TRIANGLE:
        return span / MAX_SEGMENTS_PER_TRIANGLE
    return increment


def make_segment(tri: ClassifiedTriangle, iso: float) -> IsoSegment:
    """
    Cut a classified triangle at ``iso`` (``v1 < iso < v3``).

    Below ``v2`` the cut joins edges p1-p2 and p1-p3, from ``v2`` on it joins
    edges p2-p3 and p1-p3.
    """
    if iso < tri.v2:
        start = tri.p1.blend(tri.p2, edge_weight(tri.v1, tri.v2, iso))
    else:
        start = tri.p2.blend(tri.p3, edge_weight(tri.v2, tri.v3, iso))
    end = tri.p1.blend(tri.p3, edge_weight(tri.v1, tri.v3, iso))
    return IsoSegment(p1=start, p2=end, iso=iso)


def generate_segments(tri: ClassifiedTriangle, settings: BandSettings) -> List[IsoSegment]:
    """
    Compute the iso-level crossings of a classified triangle.

    Levels at or below ``v1`` do not cut the triangle; the highest of them is
    stored in ``tri.baseline_value`` (which starts at ``settings.min``).

    Args:
        tri: Triangle ordered by value. Its ``baseline_value`` is updated.
        settings: Scalar window and band count.

    Returns:
        Segments ordered by strictly increasing iso-value, at most
        ``MAX_SEGMENTS_PER_TRIANGLE`` of them.
    """
    tri.baseline_value = settings.min
    segments: List[IsoSegment] = []
    if settings.increment <= 0.0:
        return segments

    begin = first_level(settings)
    step = level_step(tri, settings, begin)
    top = settings.max - LEVEL_TOLERANCE * settings.increment

    for k in range(MAX_SEGMENTS_PER_TRIANGLE):
        iso = begin + k * step
        if iso >= tri.v3 or iso >= top:
            break
        if iso > tri.v1:
            segments.append(make_segment(tri, iso))
        else:
            tri.baseline_value = iso

    return segments
