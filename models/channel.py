"""DCT coefficients of a single LPQA channel."""

from dataclasses import dataclass, field
import numpy as np


@dataclass
class ChannelCoefficients:
    """DC term, AC terms in triangular scan order, and AC scale.

    When ``scale > 0`` the AC terms are normalized to [0, 1]; decoded
    channels hold signed AC terms in [-scale, scale] instead.
    """

    dc: float
    ac: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float32))
    scale: float = 0.0

    @property
    def count(self) -> int:
        return int(self.ac.size)
