"""Shared utilities."""

from .errors import InvalidArgumentError
from .constants import MIN_HASH, MAX_HASH, MAX_THUMB_SIZE
from .metrics import compute_psnr_ssim, Timer
from .test_images import generate_solid, generate_quadrants, generate_gradient, generate_alpha_disc
from .image_io import load_image, save_image, fit_within, resize_image

__all__ = [
    'InvalidArgumentError',
    'MIN_HASH',
    'MAX_HASH',
    'MAX_THUMB_SIZE',
    'compute_psnr_ssim',
    'Timer',
    'generate_solid',
    'generate_quadrants',
    'generate_gradient',
    'generate_alpha_disc',
    'load_image',
    'save_image',
    'fit_within',
    'resize_image',
]
