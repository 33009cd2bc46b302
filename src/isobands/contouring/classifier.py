from __future__ import annotations

import math
from typing import Optional, Sequence

from isobands.model.geometry_primitives import ClassifiedTriangle, Point3


def classify_triangle(
    points: Sequence[Point3],
    values: Sequence[float],
    baseline_value: float = 0.0,
) -> Optional[ClassifiedTriangle]:
    """
    Order the vertices of a triangle by ascending scalar value.

    Ties are broken by the order of the comparisons (first match wins), so the
    result is unique for any input. ``reversed`` is set when the new order is
    an odd permutation of the original vertex cycle, i.e. when the two
    non-minimum vertices swapped places.

    Args:
        points: The three vertex positions in their original winding order.
        values: The three scalar values, aligned with ``points``.
        baseline_value: Initial value for ``baseline_value``.

    Returns:
        The classified triangle, or None if a value is NaN or infinite.
    """
    pa, pb, pc = points
    va, vb, vc = (float(v) for v in values)
    if not (math.isfinite(va) and math.isfinite(vb) and math.isfinite(vc)):
        return None

    if va <= vb and va <= vc:
        if vb <= vc:
            order, reversed_ = ((pa, va), (pb, vb), (pc, vc)), False
        else:
            order, reversed_ = ((pa, va), (pc, vc), (pb, vb)), True
    elif vb <= va and vb <= vc:
        if va <= vc:
            order, reversed_ = ((pb, vb), (pa, va), (pc, vc)), True
        else:
            order, reversed_ = ((pb, vb), (pc, vc), (pa, va)), False
    else:
        if va <= vb:
            order, reversed_ = ((pc, vc), (pa, va), (pb, vb)), False
        else:
            order, reversed_ = ((pc, vc), (pb, vb), (pa, va)), True

    (p1, v1), (p2, v2), (p3, v3) = order
    return ClassifiedTriangle(
        p1=p1, p2=p2, p3=p3,
        v1=v1, v2=v2, v3=v3,
        reversed=reversed_,
        baseline_value=baseline_value,
    )
