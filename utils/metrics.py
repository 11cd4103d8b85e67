"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict, Optional


def _ssim_window(height: int, width: int) -> Optional[int]:
    """Largest odd window up to 7 that fits the image, or None if under 3px."""
    side = min(height, width, 7)
    if side % 2 == 0:
        side -= 1
    return side if side >= 3 else None


def compute_psnr_ssim(reference_rgba: np.ndarray, placeholder_rgba: np.ndarray) -> Dict[str, Optional[float]]:
    """PSNR and SSIM on the RGB channels of two equally sized images."""
    reference = reference_rgba[:, :, :3]
    placeholder = placeholder_rgba[:, :, :3]
    
    # Identical images have zero error and an infinite PSNR
    with np.errstate(divide='ignore'):
        psnr_rgb = peak_signal_noise_ratio(reference, placeholder, data_range=255)
    
    win_size = _ssim_window(*reference.shape[:2])
    ssim_rgb = None
    if win_size is not None:
        ssim_rgb = float(structural_similarity(
            reference, placeholder, channel_axis=2, data_range=255, win_size=win_size
        ))
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': ssim_rgb,
    }


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    @staticmethod
    def _timed(func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        return result, (time.perf_counter() - start) * 1000.0
    
    def measure_encode(self, func, *args, **kwargs):
        result, self.encode_time_ms = self._timed(func, *args, **kwargs)
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        result, self.decode_time_ms = self._timed(func, *args, **kwargs)
        return result
