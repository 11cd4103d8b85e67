"""Tests for header-only average color and aspect ratio."""

import pytest
from engines.codec import rgba_to_thumb_hash
from utils.errors import InvalidArgumentError
from engines.extractors import thumb_hash_to_average_rgba, thumb_hash_to_approximate_aspect_ratio
from utils.test_images import generate_alpha_disc, generate_gradient, generate_solid


def encode(image):
    h, w = image.shape[:2]
    return rgba_to_thumb_hash(w, h, image)


@pytest.mark.parametrize("width, height, expected", [
    (60, 30, 7 / 4),
    (30, 60, 4 / 7),
    (50, 50, 1.0),
    (100, 10, 7.0),
    (10, 100, 1 / 7),
])
def test_aspect_ratio_opaque(width, height, expected):
    """Aspect ratio comes from the luminance counts."""
    thumb_hash = encode(generate_gradient(width, height))
    assert thumb_hash_to_approximate_aspect_ratio(thumb_hash) == pytest.approx(expected)


def test_aspect_ratio_orientation():
    """Landscape is above one, portrait below, square one."""
    landscape = encode(generate_gradient(80, 40))
    portrait = encode(generate_gradient(40, 80))
    square = encode(generate_gradient(40, 40))
    assert thumb_hash_to_approximate_aspect_ratio(landscape) > 1.0
    assert thumb_hash_to_approximate_aspect_ratio(portrait) < 1.0
    assert thumb_hash_to_approximate_aspect_ratio(square) == pytest.approx(1.0)


def test_aspect_ratio_with_alpha():
    """Alpha hashes use five luminance terms on the long side."""
    image = generate_solid(60, 30, (10, 20, 30, 100))
    # lx = 5, ly = round(2.5) = 2
    assert thumb_hash_to_approximate_aspect_ratio(encode(image)) == pytest.approx(5 / 2)


def test_average_color_opaque():
    """Opaque hashes report alpha 1 and a color close to the source."""
    r, g, b, a = thumb_hash_to_average_rgba(encode(generate_solid(8, 8, (0, 0, 255, 255))))
    assert a == 1.0
    assert b == pytest.approx(1.0, abs=1 / 15)
    assert r == pytest.approx(0.0, abs=1 / 15)
    assert g == pytest.approx(0.0, abs=1 / 15)


def test_average_color_with_alpha():
    """Alpha comes from the alpha byte when present."""
    r, g, b, a = thumb_hash_to_average_rgba(encode(generate_alpha_disc(40)))
    assert 0.0 < a < 1.0
    for value in (r, g, b, a):
        assert 0.0 <= value <= 1.0


def test_only_header_is_read():
    """Extractors work on the bare header."""
    header = encode(generate_gradient(40, 20))[:5]
    assert thumb_hash_to_approximate_aspect_ratio(header) > 1.0
    assert len(thumb_hash_to_average_rgba(header)) == 4


@pytest.mark.parametrize("extractor", [
    thumb_hash_to_average_rgba,
    thumb_hash_to_approximate_aspect_ratio,
])
def test_short_input_rejected(extractor):
    """Fewer than five bytes is rejected."""
    with pytest.raises(InvalidArgumentError):
        extractor(b"\x01\x02\x03\x04")


def test_zero_luminance_count_rejected():
    """A zero luminance count cannot come from the encoder."""
    with pytest.raises(InvalidArgumentError):
        thumb_hash_to_approximate_aspect_ratio(bytes([0, 0, 0, 0, 0x80]))
