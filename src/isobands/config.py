"""
Configuration & Constants
=========================
This module serves as the central registry for global constants of the mesher.

Why is this file needed?
------------------------
1. Tunables: the per-triangle safety cap and the lookup table tolerance live
   in one place instead of being repeated as magic numbers.
2. Palettes: it maps the historical palette names onto matplotlib colormaps.

Exports:
    MAX_SEGMENTS_PER_TRIANGLE (int): Upper bound of iso-levels walked per triangle.
    LUT_INDEX_TOLERANCE (float): Snap tolerance used when binning a value into a band.
    LEVEL_TOLERANCE (float): Snap tolerance of the last iso-level against max.
    DEFAULT_COLOR (tuple): Color used when the lookup table has no color for a value.
    DEFAULT_LUT_NAME (str): Palette used when none is configured.
    DEFAULT_BAND_COUNT (int): Number of bands used when none is configured.
    PALETTE_ALIASES (dict): Historical palette name -> matplotlib colormap name.
    PALETTE_COLOR_LISTS (dict): Historical palette name -> list of anchor colors.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

# Upper bound on the cuts computed for one triangle, whatever the band count.
MAX_SEGMENTS_PER_TRIANGLE: int = 100

# Iso-levels are computed as begin + k * increment, so a level may land a few
# ulps off a band edge or off the window bounds. Relative to the window.
LUT_INDEX_TOLERANCE: float = 1e-9

# Fraction of the increment under which a level counts as reaching max.
LEVEL_TOLERANCE: float = 1e-9

DEFAULT_COLOR: Tuple[float, float, float] = (0.0, 0.0, 0.0)
DEFAULT_LUT_NAME: str = "Rainbow"
DEFAULT_BAND_COUNT: int = 10

# Keys are lower-case; lookups are case-insensitive.
PALETTE_ALIASES: Dict[str, str] = {
    "cooltowarm": "coolwarm",
    "blackbody": "hot",
    "grayscale": "gray",
    "insar": "hsv",
    "rainbow": "rainbow",
    "igeoss": "jet",
    "blue_white_red": "bwr",
    "spectrum": "nipy_spectral",
    "default": "viridis",
    "banded": "Paired",
}

PALETTE_COLOR_LISTS: Dict[str, List[str]] = {
    "blue_green_red": ["blue", "green", "red"],
}
