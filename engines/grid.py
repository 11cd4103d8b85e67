"""Per-channel DCT grid sizes, hash length and placeholder raster size."""

import numpy as np
from typing import List, Tuple

from engines.dct_engine import coefficient_count
from utils.constants import (
    ALPHA_GRID, L_LIMIT_ALPHA, L_LIMIT_OPAQUE, MAX_THUMB_SIZE, MIN_HASH, MIN_L_GRID, PQ_GRID
)


def luminance_counts(width: int, height: int, has_alpha: bool) -> Tuple[int, int]:
    """Luminance terms (lx, ly) proportional to the aspect ratio, at least 1."""
    l_limit = L_LIMIT_ALPHA if has_alpha else L_LIMIT_OPAQUE
    longest = np.float32(max(width, height))
    lx = max(int(np.round(np.float32(l_limit * width) / longest)), 1)
    ly = max(int(np.round(np.float32(l_limit * height) / longest)), 1)
    return lx, ly


def channel_grids(lx: int, ly: int, has_alpha: bool) -> List[Tuple[str, int, int]]:
    """(channel, nx, ny) in payload order: L, P, Q and A when present."""
    grids = [
        ('L', max(lx, MIN_L_GRID), max(ly, MIN_L_GRID)),
        ('P', *PQ_GRID),
        ('Q', *PQ_GRID),
    ]
    if has_alpha:
        grids.append(('A', *ALPHA_GRID))
    return grids


def total_coefficients(grids: List[Tuple[str, int, int]]) -> int:
    return sum(coefficient_count(nx, ny) for _, nx, ny in grids)


def hash_length(lx: int, ly: int, has_alpha: bool) -> int:
    """Exact byte length of a hash with the given luminance terms."""
    header_size = MIN_HASH + 1 if has_alpha else MIN_HASH
    nibbles = total_coefficients(channel_grids(lx, ly, has_alpha))
    return header_size + (nibbles + 1) // 2


def thumb_size(aspect_ratio: float) -> Tuple[int, int]:
    """Placeholder (width, height): the longer side is MAX_THUMB_SIZE."""
    ratio = np.float32(aspect_ratio)
    size = np.float32(MAX_THUMB_SIZE)
    if ratio > 1.0:
        return MAX_THUMB_SIZE, int(np.round(size / ratio))
    return int(np.round(size * ratio)), MAX_THUMB_SIZE
