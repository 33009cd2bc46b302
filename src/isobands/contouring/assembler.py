from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

from isobands.model.geometry_primitives import BandPolygon, Point3

if TYPE_CHECKING:
    from isobands.model.geometry_primitives import ClassifiedTriangle, IsoSegment


def drop_repeated_vertices(vertices: Sequence[Point3]) -> tuple[Point3, ...]:
    """
    Remove vertices equal to their predecessor (cyclically).

    Cuts passing exactly through the middle vertex produce such repeats,
    e.g. a quad ``(p1, p2, p2, q)`` which is really a triangle.
    """
    out: List[Point3] = []
    for vertex in vertices:
        if not out or vertex != out[-1]:
            out.append(vertex)
    while len(out) > 1 and out[-1] == out[0]:
        out.pop()
    return tuple(out)


def _canonical_polygons(tri: ClassifiedTriangle, segments: Sequence[IsoSegment]) -> List[BandPolygon]:
    """
    Band polygons wound like ``p1 -> p2 -> p3``, from the lowest band upwards.
    """
    p1, p2, p3 = tri.p1, tri.p2, tri.p3
    polygons: List[BandPolygon] = []

    # The first one, between p1 and the lowest cut
    seg = segments[0]
    wrapped = seg.iso >= tri.v2
    if wrapped:
        polygons.append(BandPolygon((p1, p2, seg.p1, seg.p2), tri.baseline_value))
    else:
        polygons.append(BandPolygon((p1, seg.p1, seg.p2), tri.baseline_value))

    # Inside the face
    for nxt in segments[1:]:
        if nxt.iso < tri.v2 or wrapped:
            polygons.append(BandPolygon((seg.p1, nxt.p1, nxt.p2, seg.p2), seg.iso))
        else:
            # First pair straddling v2, wrap around p2
            wrapped = True
            polygons.append(BandPolygon((p2, nxt.p1, nxt.p2, seg.p2, seg.p1), seg.iso))
        seg = nxt

    # The last one, between the highest cut and p3
    if wrapped:
        polygons.append(BandPolygon((seg.p1, p3, seg.p2), seg.iso))
    else:
        polygons.append(BandPolygon((p2, p3, seg.p2, seg.p1), seg.iso))

    return polygons


def assemble_polygons(tri: ClassifiedTriangle, segments: Sequence[IsoSegment]) -> List[BandPolygon]:
    """
    Split a classified triangle into flat-colored band polygons.

    Polygons cover the triangle exactly once and keep the front face of the
    original (unsorted) triangle: when the value ordering flipped the winding,
    every polygon is reversed around its first vertex.

    Args:
        tri: Triangle ordered by value, with its baseline value set.
        segments: Cuts of the triangle by increasing iso-value.

    Returns:
        Polygons of 3, 4 or 5 vertices, each tagged with the iso-value of its
        lower bounding level (the baseline value below the first cut).
    """
    if not segments:
        whole = BandPolygon((tri.p1, tri.p2, tri.p3), tri.baseline_value)
        return [whole.reversed_winding() if tri.reversed else whole]

    polygons: List[BandPolygon] = []
    for polygon in _canonical_polygons(tri, segments):
        vertices = drop_repeated_vertices(polygon.vertices)
        if len(vertices) < 3:
            continue
        polygon = BandPolygon(vertices, polygon.iso)
        polygons.append(polygon.reversed_winding() if tri.reversed else polygon)

    return polygons
