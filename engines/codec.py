"""ThumbHash encode/decode entry points."""

import logging
import numpy as np
from typing import Dict, Tuple

from engines.bit_packer import BitPacker, BitUnpacker
from engines.color_space import average_rgba, has_alpha, lpqa_to_rgb, rgba_to_lpqa, to_rgba8
from engines.dct_engine import coefficient_count, encode_channel, render_channel
from utils.errors import InvalidArgumentError
from engines.extractors import thumb_hash_to_approximate_aspect_ratio
from engines.grid import channel_grids, hash_length, luminance_counts, thumb_size, total_coefficients
from engines.quantizer import (
    dequantize_nibbles, dequantize_signed, dequantize_unsigned,
    quantize_nibbles, quantize_signed, quantize_unsigned,
)
from models.channel import ChannelCoefficients
from models.decoded_image import DecodedImage
from models.hash_header import HashHeader
from utils.constants import (
    L_DC_LEVELS, L_SCALE_LEVELS, MAX_RGBA_HEIGHT, MAX_RGBA_WIDTH, MIN_HASH,
    NIBBLE_LEVELS, PQ_DC_HALF, PQ_SCALE_LEVELS, SATURATION_BOOST,
)

logger = logging.getLogger(__name__)

LPQA_INDEX = {'L': 0, 'P': 1, 'Q': 2, 'A': 3}


def _validate_image(width: int, height: int, rgba) -> np.ndarray:
    """Check dimensions and length, return pixels as (height, width, 4) uint8."""
    if not (1 <= width <= MAX_RGBA_WIDTH):
        raise InvalidArgumentError(f"width must be 1-{MAX_RGBA_WIDTH}, got {width}")
    if not (1 <= height <= MAX_RGBA_HEIGHT):
        raise InvalidArgumentError(f"height must be 1-{MAX_RGBA_HEIGHT}, got {height}")
    
    if isinstance(rgba, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(rgba, dtype=np.uint8)
    else:
        values = np.asarray(rgba)
        if values.dtype != np.uint8:
            in_range = values.dtype.kind in 'iu' and (
                values.size == 0 or (values.min() >= 0 and values.max() <= 255)
            )
            if not in_range:
                raise InvalidArgumentError("rgba values must be integers in 0-255")
        flat = values.astype(np.uint8, copy=False).reshape(-1)
    
    expected = width * height * 4
    if flat.size != expected:
        raise InvalidArgumentError(
            f"rgba must have {expected} bytes for {width}x{height}, got {flat.size}"
        )
    return flat.reshape(height, width, 4)


def _writable_bytes(out) -> np.ndarray:
    if isinstance(out, np.ndarray):
        return out.reshape(-1)
    return np.frombuffer(out, dtype=np.uint8)


def _encode_pixels(pixels: np.ndarray, average: Tuple[float, ...], alpha: bool) -> bytes:
    height, width = pixels.shape[:2]
    lx, ly = luminance_counts(width, height, alpha)
    lpqa = rgba_to_lpqa(pixels, average)
    grids = channel_grids(lx, ly, alpha)
    logger.debug("Encoding %dx%d (alpha=%s) with grids %s", width, height, alpha, grids)
    
    channels: Dict[str, ChannelCoefficients] = {}
    for name, nx, ny in grids:
        channels[name] = encode_channel(lpqa[:, :, LPQA_INDEX[name]], nx, ny)
    A = channels.get('A', ChannelCoefficients(dc=1.0, scale=1.0))
    L, P, Q = channels['L'], channels['P'], channels['Q']
    
    is_landscape = width > height
    header = HashHeader(
        l_dc=quantize_unsigned(L.dc, L_DC_LEVELS),
        p_dc=quantize_signed(P.dc, PQ_DC_HALF),
        q_dc=quantize_signed(Q.dc, PQ_DC_HALF),
        l_scale=quantize_unsigned(L.scale, L_SCALE_LEVELS),
        has_alpha=alpha,
        l_count=ly if is_landscape else lx,
        p_scale=quantize_unsigned(P.scale, PQ_SCALE_LEVELS),
        q_scale=quantize_unsigned(Q.scale, PQ_SCALE_LEVELS),
        is_landscape=is_landscape,
        a_dc=quantize_unsigned(A.dc, NIBBLE_LEVELS),
        a_scale=quantize_unsigned(A.scale, NIBBLE_LEVELS),
    )
    
    packer = BitPacker()
    packer.write_header(header)
    for name, _, _ in grids:
        packer.write_nibbles(quantize_nibbles(channels[name].ac))
    logger.debug("ThumbHash is %d bytes", len(packer))
    return packer.to_bytes()


def rgba_to_thumb_hash(width: int, height: int, rgba) -> bytes:
    """Encode an RGBA8 image (at most 100x100, not premultiplied) to a ThumbHash.
    
    ``rgba`` is a (height, width, 4) uint8 array or any flat sequence of
    ``width * height * 4`` bytes, row by row.
    """
    pixels = _validate_image(width, height, rgba)
    average = average_rgba(pixels)
    return _encode_pixels(pixels, average, has_alpha(average[3], width * height))


def rgba_to_thumb_hash_into(out, width: int, height: int, rgba) -> int:
    """Encode into a caller-provided buffer, returning the bytes written."""
    buffer = _writable_bytes(out)
    if buffer.size < MIN_HASH:
        raise InvalidArgumentError(f"Output buffer must hold at least {MIN_HASH} bytes")
    pixels = _validate_image(width, height, rgba)
    average = average_rgba(pixels)
    alpha = has_alpha(average[3], width * height)
    
    needed = hash_length(*luminance_counts(width, height, alpha), alpha)
    if buffer.size < needed:
        raise InvalidArgumentError(
            f"Output buffer holds {buffer.size} bytes, ThumbHash needs {needed}"
        )
    
    data = _encode_pixels(pixels, average, alpha)
    buffer[:len(data)] = np.frombuffer(data, dtype=np.uint8)
    return len(data)


def thumb_hash_to_rgba(thumb_hash: bytes) -> DecodedImage:
    """Render a ThumbHash to an RGBA8 placeholder whose longer side is 32px."""
    unpacker = BitUnpacker(thumb_hash)
    header = unpacker.read_header()
    ratio = header.aspect_ratio
    
    lx, ly = header.luminance_grid
    grids = channel_grids(lx, ly, header.has_alpha)
    unpacker.require_nibbles(total_coefficients(grids))
    width, height = thumb_size(ratio)
    logger.debug("Decoding %d-byte ThumbHash to %dx%d", len(thumb_hash), width, height)
    
    a_dc = dequantize_unsigned(header.a_dc, NIBBLE_LEVELS) if header.has_alpha else 1.0
    a_scale = dequantize_unsigned(header.a_scale, NIBBLE_LEVELS) if header.has_alpha else 1.0
    dcs = {
        'L': dequantize_unsigned(header.l_dc, L_DC_LEVELS),
        'P': dequantize_signed(header.p_dc, PQ_DC_HALF),
        'Q': dequantize_signed(header.q_dc, PQ_DC_HALF),
        'A': a_dc,
    }
    # Chroma saturation is boosted to compensate for quantization
    scales = {
        'L': dequantize_unsigned(header.l_scale, L_SCALE_LEVELS),
        'P': dequantize_unsigned(header.p_scale, PQ_SCALE_LEVELS) * SATURATION_BOOST,
        'Q': dequantize_unsigned(header.q_scale, PQ_SCALE_LEVELS) * SATURATION_BOOST,
        'A': a_scale,
    }
    
    planes = {}
    for name, nx, ny in grids:
        codes = unpacker.read_nibbles(coefficient_count(nx, ny))
        ac = dequantize_nibbles(codes, scales[name])
        planes[name] = render_channel(dcs[name], ac, nx, ny, width, height)
    
    alpha_plane = planes.get('A', np.full((height, width), a_dc, dtype=np.float32))
    r, g, b = lpqa_to_rgb(planes['L'], planes['P'], planes['Q'])
    return DecodedImage(width=width, height=height, rgba=to_rgba8(r, g, b, alpha_plane))


def thumb_hash_to_rgba_into(thumb_hash: bytes, out) -> Tuple[int, int]:
    """Render into a caller-provided buffer of at least ``w * h * 4`` bytes."""
    width, height = thumb_size(thumb_hash_to_approximate_aspect_ratio(thumb_hash))
    needed = width * height * 4
    buffer = _writable_bytes(out)
    if buffer.size < needed:
        raise InvalidArgumentError(
            f"Output buffer holds {buffer.size} bytes, {width}x{height} RGBA needs {needed}"
        )
    image = thumb_hash_to_rgba(thumb_hash)
    buffer[:needed] = image.rgba.reshape(-1)
    return image.width, image.height
