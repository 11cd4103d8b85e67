"""Truncated DCT-II over a single plane with a triangular coefficient scan."""

from functools import lru_cache
import numpy as np
from typing import Tuple

from models.channel import ChannelCoefficients


@lru_cache(maxsize=64)
def ac_scan_order(nx: int, ny: int) -> Tuple[Tuple[int, int], ...]:
    """(cx, cy) of every AC term kept for an nx x ny grid, in storage order.

    Row ``cy`` keeps ``cx`` while ``cx * ny < nx * (ny - cy)``, which trims
    the high-frequency corner of the grid. The DC term (0, 0) is excluded.
    """
    order = []
    for cy in range(ny):
        cx = 1 if cy == 0 else 0
        while cx * ny < nx * (ny - cy):
            order.append((cx, cy))
            cx += 1
    return tuple(order)


def coefficient_count(nx: int, ny: int) -> int:
    """Number of AC terms stored for an nx x ny grid."""
    return len(ac_scan_order(nx, ny))


def nth_coefficient(nx: int, ny: int, index: int) -> Tuple[int, int]:
    """Frequency (cx, cy) of the AC term at ``index`` in scan order."""
    return ac_scan_order(nx, ny)[index]


def cosine_basis(n: int, size: int) -> np.ndarray:
    """Half-sample-shifted cosines, shape (n, size): cos(pi / size * k * (i + 0.5))."""
    k = np.arange(n, dtype=np.float32)[:, None]
    i = np.arange(size, dtype=np.float32)[None, :] + 0.5
    return np.cos(np.float32(np.pi) / size * k * i).astype(np.float32)


def encode_channel(plane: np.ndarray, nx: int, ny: int) -> ChannelCoefficients:
    """Forward DCT of an (h, w) plane, keeping the triangular scan.

    AC terms are normalized to [0, 1] by the largest AC magnitude when it
    is non-zero.
    """
    h, w = plane.shape
    fx = cosine_basis(nx, w)
    fy = cosine_basis(ny, h)
    coeffs = (fy @ plane.astype(np.float32) @ fx.T) / (w * h)

    order = ac_scan_order(nx, ny)
    ac = np.array([coeffs[cy, cx] for cx, cy in order], dtype=np.float32)
    scale = float(np.max(np.abs(ac))) if ac.size else 0.0
    if scale > 0.0:
        ac = (0.5 + 0.5 / scale * ac).astype(np.float32)
    return ChannelCoefficients(dc=float(coeffs[0, 0]), ac=ac, scale=scale)


def render_channel(
    dc: float,
    ac: np.ndarray,
    nx: int,
    ny: int,
    width: int,
    height: int
) -> np.ndarray:
    """Inverse DCT of signed AC terms onto a (height, width) raster."""
    order = ac_scan_order(nx, ny)
    if len(ac) != len(order):
        raise ValueError(f"Expected {len(order)} AC terms for a {nx}x{ny} grid, got {len(ac)}")
    grid = np.zeros((ny, nx), dtype=np.float32)
    for value, (cx, cy) in zip(ac, order):
        grid[cy, cx] = value
    fx = cosine_basis(nx, width)
    # One-sided normalization at encode time is undone by doubling fy
    fy2 = cosine_basis(ny, height) * 2.0
    return (dc + fy2.T @ grid @ fx).astype(np.float32)
