"""Placeholder pipeline: fit, encode, decode and measure."""

import base64
import logging
import numpy as np

from models.codec_params import CodecParams
from models.placeholder_result import PlaceholderResult
from engines.codec import rgba_to_thumb_hash, thumb_hash_to_rgba
from engines.extractors import thumb_hash_to_average_rgba, thumb_hash_to_approximate_aspect_ratio
from utils.image_io import fit_within, resize_image
from utils.metrics import compute_psnr_ssim, Timer

logger = logging.getLogger(__name__)


def encode_reconstruct(image_rgba: np.ndarray, params: CodecParams = None) -> PlaceholderResult:
    """Run the full ThumbHash round trip on an RGBA image of any size."""
    params = params or CodecParams()
    if image_rgba.ndim != 3 or image_rgba.shape[2] != 4:
        raise ValueError(f"Expected an (h, w, 4) RGBA image, got shape {image_rgba.shape}")
    timer = Timer()
    
    # === ENCODING ===
    source = fit_within(image_rgba, params.max_input_size, params.interpolation)
    height, width = source.shape[:2]
    if source.shape != image_rgba.shape:
        logger.info("Fitted %dx%d image to %dx%d",
                    image_rgba.shape[1], image_rgba.shape[0], width, height)
    thumb_hash = timer.measure_encode(rgba_to_thumb_hash, width, height, source)
    
    # === DECODING ===
    placeholder = timer.measure_decode(thumb_hash_to_rgba, thumb_hash)
    logger.info("Encoded %dx%d to %d bytes, placeholder %dx%d",
                width, height, len(thumb_hash), placeholder.width, placeholder.height)
    
    result = PlaceholderResult(
        source_image=source,
        thumb_hash=thumb_hash,
        hash_base64=base64.b64encode(thumb_hash).decode('ascii'),
        placeholder=placeholder,
        average_rgba=thumb_hash_to_average_rgba(thumb_hash),
        aspect_ratio=thumb_hash_to_approximate_aspect_ratio(thumb_hash),
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms,
    )
    
    # === METRICS ===
    if params.compute_metrics:
        reference = resize_image(source, placeholder.width, placeholder.height, params.interpolation)
        metrics = compute_psnr_ssim(reference, placeholder.rgba)
        result.psnr_rgb = metrics['psnr_rgb']
        result.ssim_rgb = metrics['ssim_rgb']
    
    return result
