"""Data models for codec parameters, coefficients and results."""

from .channel import ChannelCoefficients
from .hash_header import HashHeader
from .decoded_image import DecodedImage
from .codec_params import CodecParams
from .placeholder_result import PlaceholderResult

__all__ = [
    'ChannelCoefficients',
    'HashHeader',
    'DecodedImage',
    'CodecParams',
    'PlaceholderResult',
]
