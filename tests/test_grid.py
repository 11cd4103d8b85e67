"""Tests for grid sizes, hash length and placeholder size."""

import pytest
from engines.grid import channel_grids, hash_length, luminance_counts, thumb_size


@pytest.mark.parametrize("width, height, alpha, expected", [
    (100, 100, False, (7, 7)),
    (100, 100, True, (5, 5)),
    (100, 50, False, (7, 4)),
    (50, 100, True, (2, 5)),
    (100, 1, False, (7, 1)),
    (1, 1, True, (5, 5)),
])
def test_luminance_counts(width, height, alpha, expected):
    """Luminance terms follow the aspect ratio, rounding half to even."""
    assert luminance_counts(width, height, alpha) == expected


def test_channel_grids():
    """L is at least 3x3, P and Q 3x3, A 5x5 only with alpha."""
    assert channel_grids(7, 1, False) == [('L', 7, 3), ('P', 3, 3), ('Q', 3, 3)]
    assert channel_grids(5, 5, True)[-1] == ('A', 5, 5)


def test_hash_length_extremes():
    """Square images give 24 bytes opaque and 25 with alpha."""
    assert hash_length(7, 7, False) == 24
    assert hash_length(5, 5, True) == 25


@pytest.mark.parametrize("ratio, expected", [
    (1.0, (32, 32)),
    (7 / 4, (32, 18)),
    (4 / 7, (18, 32)),
    (7.0, (32, 5)),
    (1 / 7, (5, 32)),
])
def test_thumb_size(ratio, expected):
    """The longer placeholder side is 32."""
    assert thumb_size(ratio) == expected
