"""Placeholder result with metrics."""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

from .decoded_image import DecodedImage


@dataclass
class PlaceholderResult:
    """Results from the encode/decode pipeline."""
    
    source_image: np.ndarray
    thumb_hash: bytes
    hash_base64: str
    placeholder: DecodedImage
    
    # Header-only views
    average_rgba: Tuple[float, float, float, float]
    aspect_ratio: float
    
    # Quality metrics against the source resized to the placeholder size
    psnr_rgb: Optional[float] = None
    ssim_rgb: Optional[float] = None
    
    # Runtime
    encode_time_ms: float = 0.0
    decode_time_ms: float = 0.0
    
    @property
    def hash_length(self) -> int:
        return len(self.thumb_hash)
