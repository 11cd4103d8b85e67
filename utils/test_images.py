"""Synthetic RGBA test images for placeholder demos."""

import numpy as np
from typing import Sequence

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)


def generate_solid(width: int, height: int, color: Sequence[int] = (200, 120, 40, 255)) -> np.ndarray:
    """Single flat color."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :] = color
    return img


def generate_quadrants(
    width: int = 2,
    height: int = 2,
    colors: Sequence[Sequence[int]] = (RED, GREEN, BLUE, YELLOW)
) -> np.ndarray:
    """Four flat quadrants: top-left, top-right, bottom-left, bottom-right."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    half_w, half_h = max(width // 2, 1), max(height // 2, 1)
    img[:half_h, :half_w] = colors[0]
    img[:half_h, half_w:] = colors[1]
    img[half_h:, :half_w] = colors[2]
    img[half_h:, half_w:] = colors[3]
    return img


def generate_gradient(width: int = 64, height: int = 48) -> np.ndarray:
    """Smooth diagonal gradient, fully opaque."""
    y, x = np.mgrid[0:height, 0:width].astype(np.float32)
    t = (x + y) / max(width + height - 2, 1)
    img = np.empty((height, width, 4), dtype=np.float32)
    img[:, :, 0] = 40 + t * 180
    img[:, :, 1] = 60 + t * 140
    img[:, :, 2] = 120 + t * 100
    img[:, :, 3] = 255
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_alpha_disc(size: int = 48, color: Sequence[int] = (220, 60, 60)) -> np.ndarray:
    """Opaque disc fading to a transparent background."""
    y, x = np.mgrid[0:size, 0:size].astype(np.float32)
    center = (size - 1) / 2.0
    dist = np.sqrt((x - center) ** 2 + (y - center) ** 2) / max(center, 1.0)
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:, :, :3] = color
    img[:, :, 3] = (np.clip(1.5 - 1.5 * dist, 0.0, 1.0) * 255).astype(np.uint8)
    return img
