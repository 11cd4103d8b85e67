"""Quantization of header fields and 4-bit AC terms.

Arithmetic is carried out in float32 and rounding is half-to-even, so the
quantized fields agree with other ThumbHash implementations.
"""

import numpy as np

from utils.constants import NIBBLE_HALF, NIBBLE_LEVELS


def quantize_unsigned(value: float, levels: float) -> int:
    """Map [0, 1] onto 0..levels."""
    return int(np.round(np.float32(levels) * np.float32(value)))


def dequantize_unsigned(field: int, levels: float) -> float:
    return float(np.float32(field) / np.float32(levels))


def quantize_signed(value: float, half: float) -> int:
    """Map [-1, 1] onto 0..2*half."""
    half = np.float32(half)
    return int(np.round(half + half * np.float32(value)))


def dequantize_signed(field: int, half: float) -> float:
    return float(np.float32(field) / np.float32(half) - np.float32(1.0))


def quantize_nibbles(values: np.ndarray) -> np.ndarray:
    """Normalized [0, 1] AC terms to 4-bit codes."""
    codes = np.round(NIBBLE_LEVELS * np.asarray(values, dtype=np.float32))
    return codes.astype(np.uint8) & 15


def dequantize_nibbles(codes: np.ndarray, scale: float) -> np.ndarray:
    """4-bit codes to signed AC terms in [-scale, scale]."""
    codes = np.asarray(codes, dtype=np.float32)
    return ((codes / NIBBLE_HALF - 1.0) * np.float32(scale)).astype(np.float32)
