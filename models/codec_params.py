"""Placeholder generation parameters."""

from dataclasses import dataclass
from typing import Literal

from utils.constants import MAX_RGBA_WIDTH


@dataclass
class CodecParams:
    """Options for fitting an image and reporting on its placeholder."""
    
    max_input_size: int = MAX_RGBA_WIDTH
    interpolation: Literal['area', 'linear', 'nearest'] = 'area'
    compute_metrics: bool = True
    
    def __post_init__(self):
        if not (1 <= self.max_input_size <= MAX_RGBA_WIDTH):
            raise ValueError(
                f"max_input_size must be 1-{MAX_RGBA_WIDTH}, got {self.max_input_size}"
            )
        if self.interpolation not in ('area', 'linear', 'nearest'):
            raise ValueError(f"Unknown interpolation: {self.interpolation}")
