"""
Color Lookup Tables
===================
Discrete palettes mapping a scalar value to an RGB color.

A table is built once from a matplotlib colormap sampled into ``n_colors``
flat colors (one per band). Queries are pure: the scalar window and the
reversal flag are passed with every call, so a table can be shared between
threads.
"""
from __future__ import annotations

from functools import lru_cache
import logging
import math
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap

from isobands.config import LUT_INDEX_TOLERANCE, PALETTE_ALIASES, PALETTE_COLOR_LISTS
from isobands.exceptions import InvalidInputError

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.colors import Colormap

logger = logging.getLogger(__name__)

RGB = Tuple[float, float, float]

# Historical palette names, kept for configuration compatibility
LOOKUP_TABLES: List[str] = [
    'Cooltowarm',
    'Blackbody',
    'Grayscale',
    'Insar',
    'Rainbow',
    'Igeoss',
    'Blue_White_Red',
    'Blue_Green_Red',
    'Spectrum',
    'Default',
    'Banded',
]


def _resolve_colormap(name: str, n_colors: int) -> Colormap:
    """
    Resolve a palette name into a matplotlib colormap with ``n_colors`` entries.

    Historical names are matched case-insensitively, anything else is handed
    to matplotlib as a colormap name.
    """
    key = name.lower()
    if key in PALETTE_COLOR_LISTS:
        return LinearSegmentedColormap.from_list(name, PALETTE_COLOR_LISTS[key], N=n_colors)

    cmap_name = PALETTE_ALIASES.get(key, name)
    try:
        return plt.get_cmap(cmap_name, n_colors)
    except ValueError as e:
        raise InvalidInputError(f"Unknown lookup table '{name}'.") from e


class LookupTable:
    """
    Discrete palette of ``n_colors`` flat colors.
    """
    def __init__(self, name: str, n_colors: int) -> None:
        """
        Initialize the lookup table.

        Args:
            name: Palette name (historical name or matplotlib colormap name).
            n_colors: Number of discrete colors, usually the band count.
        """
        if n_colors <= 0:
            raise InvalidInputError(f"A lookup table needs at least one color, got {n_colors}.")

        self.name = name
        self.n_colors = int(n_colors)
        cmap = _resolve_colormap(name, self.n_colors)
        self._colors: npt.NDArray[np.float64] = np.asarray(
            cmap(np.arange(self.n_colors)), dtype=np.float64
        )[:, :3]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, n_colors={self.n_colors})"

    @property
    def colors(self) -> npt.NDArray[np.float64]:
        """(n_colors, 3) array of RGB colors in [0, 1]."""
        return self._colors.copy()

    def band_index(self, value: float, vmin: float, vmax: float) -> Optional[int]:
        """
        Index of the color band holding ``value`` in the window ``[vmin, vmax]``.

        Values within ``LUT_INDEX_TOLERANCE`` (relative to the window) of a
        bound count as inside.

        Returns:
            The band index, or None for NaN or out-of-window values.
        """
        span = vmax - vmin
        if math.isnan(value) or span < 0.0:
            return None
        if span == 0.0:
            return 0 if value == vmin else None

        t = (value - vmin) / span
        if t < -LUT_INDEX_TOLERANCE or t > 1.0 + LUT_INDEX_TOLERANCE:
            return None
        index = math.floor(t * self.n_colors + LUT_INDEX_TOLERANCE)
        return min(max(index, 0), self.n_colors - 1)

    def color_at(
        self,
        value: float,
        vmin: float,
        vmax: float,
        reversed: bool = False
    ) -> Optional[RGB]:
        """
        Color of ``value`` in the window ``[vmin, vmax]``.

        Args:
            value: Scalar value to look up.
            vmin: Lower bound of the window, mapped to the first color.
            vmax: Upper bound of the window, mapped to the last color.
            reversed: Walk the palette from the last color to the first.

        Returns:
            An RGB triple in [0, 1], or None when the value has no color.
        """
        index = self.band_index(value, vmin, vmax)
        if index is None:
            return None
        if reversed:
            index = self.n_colors - 1 - index

        r, g, b = self._colors[index]
        return (float(r), float(g), float(b))


@lru_cache(maxsize=32)
def get_lookup_table(name: str, n_colors: int) -> LookupTable:
    """Shared, cached lookup table for a palette name and color count."""
    logger.debug(f"Building lookup table '{name}' with {n_colors} colors.")
    return LookupTable(name, n_colors)
