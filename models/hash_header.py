"""Quantized header fields of a ThumbHash."""

from dataclasses import dataclass
from typing import Tuple

from utils.constants import L_LIMIT_ALPHA, L_LIMIT_OPAQUE, MIN_HASH, MIN_L_GRID
from utils.errors import InvalidArgumentError


@dataclass(frozen=True)
class HashHeader:
    """Integer header fields, exactly as stored in the hash.

    ``l_count`` is the luminance term count along the shorter side
    (``ly`` for landscape images, ``lx`` otherwise).
    """

    l_dc: int
    p_dc: int
    q_dc: int
    l_scale: int
    has_alpha: bool
    l_count: int
    p_scale: int
    q_scale: int
    is_landscape: bool
    a_dc: int = 15
    a_scale: int = 15

    @property
    def size(self) -> int:
        """Header length in bytes."""
        return MIN_HASH + 1 if self.has_alpha else MIN_HASH

    @property
    def l_max(self) -> int:
        return L_LIMIT_ALPHA if self.has_alpha else L_LIMIT_OPAQUE

    @property
    def luminance_counts(self) -> Tuple[int, int]:
        """Raw luminance counts (lx, ly) as stored, before grid clamping."""
        if self.is_landscape:
            return self.l_max, self.l_count
        return self.l_count, self.l_max

    @property
    def luminance_grid(self) -> Tuple[int, int]:
        """Luminance DCT grid (nx, ny) used by the decoder."""
        lx, ly = self.luminance_counts
        return max(MIN_L_GRID, lx), max(MIN_L_GRID, ly)

    @property
    def aspect_ratio(self) -> float:
        """Approximate width / height, from the raw luminance counts.

        Raises InvalidArgumentError when ``l_count`` is zero.
        """
        if self.l_count == 0:
            raise InvalidArgumentError("ThumbHash has a zero luminance count")
        lx, ly = self.luminance_counts
        return lx / ly
