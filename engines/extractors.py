"""Header-only views of a ThumbHash: average color and aspect ratio."""

from typing import Tuple

from engines.color_space import lpqa_to_rgb
from utils.errors import InvalidArgumentError
from engines.quantizer import dequantize_signed, dequantize_unsigned
from utils.constants import (
    L_DC_LEVELS, L_LIMIT_ALPHA, L_LIMIT_OPAQUE, MIN_HASH, NIBBLE_LEVELS, PQ_DC_HALF
)


def _check_length(thumb_hash: bytes) -> None:
    if len(thumb_hash) < MIN_HASH:
        raise InvalidArgumentError(
            f"ThumbHash must be at least {MIN_HASH} bytes, got {len(thumb_hash)}"
        )


def thumb_hash_to_average_rgba(thumb_hash: bytes) -> Tuple[float, float, float, float]:
    """Average color as unpremultiplied (r, g, b, a), each in [0, 1]."""
    _check_length(thumb_hash)
    header = thumb_hash[0] | (thumb_hash[1] << 8) | (thumb_hash[2] << 16)
    l = dequantize_unsigned(header & 63, L_DC_LEVELS)
    p = dequantize_signed((header >> 6) & 63, PQ_DC_HALF)
    q = dequantize_signed((header >> 12) & 63, PQ_DC_HALF)
    a = 1.0
    if (header >> 23) != 0:
        if len(thumb_hash) < MIN_HASH + 1:
            raise InvalidArgumentError("ThumbHash has alpha but no alpha byte")
        a = dequantize_unsigned(thumb_hash[5] & 15, NIBBLE_LEVELS)
    r, g, b = lpqa_to_rgb(l, p, q)
    return float(r), float(g), float(b), a


def thumb_hash_to_approximate_aspect_ratio(thumb_hash: bytes) -> float:
    """Approximate width / height of the original image.

    A zero luminance count (never written by the encoder) raises
    InvalidArgumentError instead of yielding a ratio of 0 or infinity.
    """
    _check_length(thumb_hash)
    has_alpha = (thumb_hash[2] & 0x80) != 0
    l_max = L_LIMIT_ALPHA if has_alpha else L_LIMIT_OPAQUE
    l_min = thumb_hash[3] & 7
    if l_min == 0:
        raise InvalidArgumentError("ThumbHash has a zero luminance count")
    is_landscape = (thumb_hash[4] & 0x80) != 0
    lx = l_max if is_landscape else l_min
    ly = l_min if is_landscape else l_max
    return lx / ly
