import math

import pytest

from isobands.contouring.classifier import classify_triangle
from isobands.model.geometry_primitives import Point3

A = Point3(0.0, 0.0, 0.0)
B = Point3(1.0, 0.0, 0.0)
C = Point3(0.0, 1.0, 0.0)


@pytest.mark.parametrize("values, expected", [
    ((0.0, 0.5, 1.0), (A, B, C)),
    ((1.0, 0.0, 0.5), (B, C, A)),
    ((0.5, 1.0, 0.0), (C, A, B)),
])
def test_cyclic_orders_are_not_reversed(values, expected):
    tri = classify_triangle((A, B, C), values)
    assert (tri.p1, tri.p2, tri.p3) == expected
    assert tri.reversed is False
    assert tri.v1 <= tri.v2 <= tri.v3


@pytest.mark.parametrize("values, expected", [
    ((0.0, 1.0, 0.5), (A, C, B)),
    ((0.5, 0.0, 1.0), (B, A, C)),
    ((1.0, 0.5, 0.0), (C, B, A)),
])
def test_odd_orders_are_reversed(values, expected):
    tri = classify_triangle((A, B, C), values)
    assert (tri.p1, tri.p2, tri.p3) == expected
    assert tri.reversed is True
    assert (tri.v1, tri.v2, tri.v3) == (0.0, 0.5, 1.0)


def test_constant_values_keep_original_order():
    tri = classify_triangle((A, B, C), (0.3, 0.3, 0.3))
    assert (tri.p1, tri.p2, tri.p3) == (A, B, C)
    assert tri.reversed is False


def test_ties_first_match_wins():
    tri = classify_triangle((A, B, C), (0.5, 0.2, 0.2))
    assert (tri.p1, tri.p2, tri.p3) == (B, C, A)
    assert tri.reversed is False

    tri = classify_triangle((A, B, C), (0.2, 0.5, 0.2))
    assert (tri.p1, tri.p2, tri.p3) == (A, C, B)
    assert tri.reversed is True


def test_nan_value_is_not_classified():
    assert classify_triangle((A, B, C), (0.0, math.nan, 1.0)) is None
    assert classify_triangle((A, B, C), (math.nan, 0.0, 1.0)) is None
    assert classify_triangle((A, B, C), (0.0, 1.0, math.nan)) is None


@pytest.mark.parametrize("bad", [math.inf, -math.inf])
def test_infinite_value_is_not_classified(bad):
    assert classify_triangle((A, B, C), (bad, 0.0, 1.0)) is None
    assert classify_triangle((A, B, C), (0.0, 1.0, bad)) is None


def test_baseline_is_carried():
    tri = classify_triangle((A, B, C), (0.0, 0.5, 1.0), baseline_value=0.25)
    assert tri.baseline_value == 0.25
