import os

# Headless matplotlib / pyvista
os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from isobands.model.geometry_primitives import Point3


def make_grid(n=6, size=1.0):
    """
    Planar (n x n) vertex grid in z = 0, two counter-clockwise triangles per cell.

    Returns flat indices, flat positions and the (n*n, 3) points.
    """
    xs, ys = np.meshgrid(np.linspace(0.0, size, n), np.linspace(0.0, size, n))
    points = np.column_stack((xs.ravel(), ys.ravel(), np.zeros(n * n)))
    triangles = []
    for j in range(n - 1):
        for i in range(n - 1):
            a = j * n + i
            b = a + 1
            c = a + n
            d = c + 1
            triangles.append((a, b, d))
            triangles.append((a, d, c))
    return np.asarray(triangles, dtype=np.int64).ravel(), points.ravel(), points


@pytest.fixture
def grid():
    return make_grid()


@pytest.fixture
def grid_factory():
    return make_grid


@pytest.fixture
def ccw_triangle():
    """Counter-clockwise triangle in z = 0 whose scalar value equals x."""
    points = (Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 0.0), Point3(0.5, 1.0, 0.0))
    values = (0.0, 1.0, 0.5)
    return points, values


@pytest.fixture
def single_triangle():
    indices = [0, 1, 2]
    positions = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
    return indices, positions
