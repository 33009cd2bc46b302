"""
Geometric Primitives for the band mesher.

Small immutable value types passed between the classifier, the segment
generator and the polygon assembler.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import math


@dataclass(frozen=True)
class Point3:
    """A point in 3D space."""
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Point3) -> Point3:
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3) -> Point3:
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def blend(self, other: Point3, weight: float) -> Point3:
        """
        Return ``weight * self + (1 - weight) * other``.

        Args:
            other: The second end point.
            weight: Weight of this point, 1.0 returns ``self``.
        """
        rest = 1.0 - weight
        return Point3(
            weight * self.x + rest * other.x,
            weight * self.y + rest * other.y,
            weight * self.z + rest * other.z,
        )

    def cross(self, other: Point3) -> Point3:
        return Point3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class IsoSegment:
    """
    Intersection of one iso-level with a triangle.

    ``p1`` lies on the edge that leaves the middle-value vertex side
    (edge p1-p2 below v2, edge p2-p3 at or above v2), ``p2`` always lies
    on the long edge p1-p3.
    """
    p1: Point3
    p2: Point3
    iso: float


@dataclass
class ClassifiedTriangle:
    """
    A triangle with its vertices ordered by ascending scalar value.

    ``reversed`` records whether the ordering is an odd permutation of the
    original vertex cycle. ``baseline_value`` is the highest iso-level at or
    below ``v1`` and colors the region under the first crossing.
    """
    p1: Point3
    p2: Point3
    p3: Point3
    v1: float
    v2: float
    v3: float
    reversed: bool = False
    baseline_value: float = 0.0


@dataclass(frozen=True)
class BandPolygon:
    """A flat-colored piece of a triangle between two iso-levels."""
    vertices: Tuple[Point3, ...]
    iso: float

    def __len__(self) -> int:
        return len(self.vertices)

    def reversed_winding(self) -> BandPolygon:
        """Same polygon with opposite winding, keeping vertex 0 as fan pivot."""
        first, *rest = self.vertices
        return BandPolygon(vertices=(first, *reversed(rest)), iso=self.iso)

    def area_vector(self) -> Point3:
        """
        Twice the vector area of the (planar) polygon.

        Its direction is the front-face normal given by the winding, its
        magnitude twice the polygon area.
        """
        pivot = self.vertices[0]
        acc = Point3(0.0, 0.0, 0.0)
        for a, b in zip(self.vertices[1:-1], self.vertices[2:]):
            acc = acc + (a - pivot).cross(b - pivot)
        return acc

    @property
    def area(self) -> float:
        return 0.5 * self.area_vector().magnitude
