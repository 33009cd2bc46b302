from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def normalize_field(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Min-max normalize a scalar field over the whole mesh.

    The smallest finite value maps to 0 and the largest to 1. A constant field
    maps to 0 everywhere. Non-finite entries (NaN, +/-inf) are ignored when
    looking for the bounds and stay non-finite in the result.

    Args:
        values: (n,) scalar values, one per vertex.

    Returns:
        A new (n,) float64 array.
    """
    field = np.array(values, dtype=np.float64).reshape(-1)
    finite = np.isfinite(field)
    if not finite.any():
        return field

    vmin = float(field[finite].min())
    vmax = float(field[finite].max())
    span = vmax - vmin
    if span == 0.0:
        return np.where(finite, 0.0, field)

    return (field - vmin) / span
