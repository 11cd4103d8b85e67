"""ThumbHash engines - pure computation, no GUI or file I/O."""

from utils.errors import InvalidArgumentError
from .color_space import average_rgba, has_alpha, rgba_to_lpqa, lpqa_to_rgb, to_rgba8
from .dct_engine import ac_scan_order, coefficient_count, nth_coefficient, encode_channel, render_channel
from .quantizer import quantize_nibbles, dequantize_nibbles
from .bit_packer import BitPacker, BitUnpacker
from .grid import luminance_counts, channel_grids, hash_length, thumb_size
from .extractors import thumb_hash_to_average_rgba, thumb_hash_to_approximate_aspect_ratio
from .codec import (
    rgba_to_thumb_hash,
    rgba_to_thumb_hash_into,
    thumb_hash_to_rgba,
    thumb_hash_to_rgba_into,
)
from .pipeline import encode_reconstruct

__all__ = [
    'InvalidArgumentError',
    'average_rgba',
    'has_alpha',
    'rgba_to_lpqa',
    'lpqa_to_rgb',
    'to_rgba8',
    'ac_scan_order',
    'coefficient_count',
    'nth_coefficient',
    'encode_channel',
    'render_channel',
    'quantize_nibbles',
    'dequantize_nibbles',
    'BitPacker',
    'BitUnpacker',
    'luminance_counts',
    'channel_grids',
    'hash_length',
    'thumb_size',
    'thumb_hash_to_average_rgba',
    'thumb_hash_to_approximate_aspect_ratio',
    'rgba_to_thumb_hash',
    'rgba_to_thumb_hash_into',
    'thumb_hash_to_rgba',
    'thumb_hash_to_rgba_into',
    'encode_reconstruct',
]
