"""
Band Settings
=============
Run-time configuration of the mesher.

The scalar window (``min``, ``max``) is expressed in the normalized domain of
the field; ``0 <= min <= max <= 1`` is the intended range but is not enforced.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
import logging
import numbers
from typing import Any, Dict, Tuple

from isobands.config import DEFAULT_BAND_COUNT, DEFAULT_COLOR, DEFAULT_LUT_NAME
from isobands.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandSettings:
    """
    Configuration shared by every triangle of one mesher run.
    """
    min: float = 0.0
    max: float = 1.0
    band_count: int = DEFAULT_BAND_COUNT
    lut_name: str = DEFAULT_LUT_NAME
    reversed: bool = False

    # Color used when the lookup table has no color for a value
    default_color: Tuple[float, float, float] = DEFAULT_COLOR

    # Rescale the raw field to [0, 1] before cutting it
    normalize: bool = True

    # Displacement scaling, 0.0 leaves the positions untouched
    deform_scaling_factor: float = 0.0

    @property
    def increment(self) -> float:
        """
        Spacing between two consecutive iso-levels, the window split into
        ``band_count`` bands. Zero or negative when the window is empty.
        """
        return (self.max - self.min) / self.band_count

    def validate(self) -> None:
        """
        Check the settings against the input contract.

        Raises:
            InvalidInputError: If ``band_count`` is not a positive integer or
                the default color is not an RGB triple in [0, 1].
        """
        if isinstance(self.band_count, bool) or not isinstance(self.band_count, numbers.Integral):
            raise InvalidInputError(
                f"band_count must be an integer, got {self.band_count!r}."
            )
        if self.band_count <= 0:
            raise InvalidInputError(f"band_count must be positive, got {self.band_count}.")

        if len(self.default_color) != 3 or any(not 0.0 <= c <= 1.0 for c in self.default_color):
            raise InvalidInputError(
                f"default_color must be an RGB triple in [0, 1], got {self.default_color!r}."
            )

        if self.min >= self.max:
            logger.warning(
                f"Scalar window is empty (min={self.min} >= max={self.max}), no iso-levels are cut."
            )

    def with_changes(self, **changes: Any) -> BandSettings:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> BandSettings:
        data = dict(data)
        if "default_color" in data:
            data["default_color"] = tuple(data["default_color"])
        return BandSettings(**data)
