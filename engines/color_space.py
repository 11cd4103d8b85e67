"""Color space conversion between RGBA8 and LPQA planes.

LPQA: luminance, yellow-blue (p), red-green (q) and alpha. Pixels are
composited atop the image's alpha-weighted average color before the
conversion, so fully transparent regions carry the average color.
"""

import numpy as np
from typing import Tuple


def average_rgba(rgba: np.ndarray) -> Tuple[float, float, float, float]:
    """Alpha-weighted average RGB in [0, 1] plus the total alpha.

    Each channel is weighted by ``alpha / 255`` and the sum divided by the
    total alpha. The fourth value is the undivided alpha sum.
    """
    pixels = rgba.reshape(-1, 4).astype(np.float32)
    alpha = pixels[:, 3] / 255.0
    total_alpha = float(np.sum(alpha, dtype=np.float32))
    sums = (alpha / 255.0) @ pixels[:, :3]
    if total_alpha > 0.0:
        sums = sums / np.float32(total_alpha)
    avg_r, avg_g, avg_b = (float(v) for v in sums)
    return avg_r, avg_g, avg_b, total_alpha


def has_alpha(total_alpha: float, pixel_count: int) -> bool:
    """True iff any pixel is less than fully opaque."""
    return total_alpha < pixel_count


def rgba_to_lpqa(rgba: np.ndarray, average: Tuple[float, ...]) -> np.ndarray:
    """RGBA8 (h, w, 4) to float32 LPQA planes stacked as (h, w, 4)."""
    avg = np.asarray(average[:3], dtype=np.float32)
    pixels = rgba.astype(np.float32)
    alpha = pixels[:, :, 3:4] / 255.0
    # Alpha weights the pixel a second time on top of the blend factor
    rgb = avg * (1.0 - alpha) + alpha / 255.0 * pixels[:, :, :3]
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    L = (R + G + B) / 3.0
    P = (R + G) / 2.0 - B
    Q = R - G
    return np.stack([L, P, Q, alpha[:, :, 0]], axis=-1).astype(np.float32)


def lpqa_to_rgb(l, p, q):
    """Inverse of the LPQA plane construction, clamped to [0, 1].

    Works on scalars and arrays alike.
    """
    B = l - 2.0 / 3.0 * p
    R = (3.0 * l - B + q) / 2.0
    G = R - q
    return np.clip(R, 0.0, 1.0), np.clip(G, 0.0, 1.0), np.clip(B, 0.0, 1.0)


def to_rgba8(r: np.ndarray, g: np.ndarray, b: np.ndarray, a: np.ndarray) -> np.ndarray:
    """Stack [0, 1] planes into RGBA8 with a truncating cast."""
    rgba = np.stack([r, g, b, a], axis=-1)
    return (np.clip(rgba, 0.0, 1.0) * 255.0).astype(np.uint8)
