"""Placeholder image rendered from a ThumbHash."""

from dataclasses import dataclass
import numpy as np


@dataclass
class DecodedImage:
    """Unpremultiplied RGBA8 raster, shape (height, width, 4)."""

    width: int
    height: int
    rgba: np.ndarray

    def to_bytes(self) -> bytes:
        """Row-major RGBA bytes, ``width * height * 4`` long."""
        return self.rgba.tobytes()
