"""Image I/O and resizing using OpenCV. Images are RGBA uint8 throughout."""

import cv2
import numpy as np

INTERPOLATION = {
    'area': cv2.INTER_AREA,
    'linear': cv2.INTER_LINEAR,
    'nearest': cv2.INTER_NEAREST,
}


def load_image(path: str) -> np.ndarray:
    """Load image as RGBA uint8 (opaque alpha added when missing)."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype == np.uint16:
        img = (img // 257).astype(np.uint8)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGBA image."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not save image to {path}")


def resize_image(image: np.ndarray, width: int, height: int, interpolation: str = 'area') -> np.ndarray:
    return cv2.resize(image, (width, height), interpolation=INTERPOLATION[interpolation])


def fit_within(image: np.ndarray, max_size: int, interpolation: str = 'area') -> np.ndarray:
    """Downscale so the longer side is at most ``max_size``, keeping aspect."""
    h, w = image.shape[:2]
    longest = max(h, w)
    if longest <= max_size:
        return image
    scale = max_size / longest
    new_w = max(1, min(max_size, round(w * scale)))
    new_h = max(1, min(max_size, round(h * scale)))
    return resize_image(image, new_w, new_h, interpolation)
