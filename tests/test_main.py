"""Tests for the command line entry point."""

import base64
import pytest
from engines.codec import rgba_to_thumb_hash
from main import main
from utils.image_io import load_image


def test_encode_synthetic(capsys, tmp_path):
    """Synthetic encode prints a report and saves the placeholder."""
    output = tmp_path / "placeholder.png"
    assert main(['encode', '--synthetic', '-o', str(output)]) == 0
    report = capsys.readouterr().out
    assert "ThumbHash:" in report
    assert "Bytes:     24" in report
    assert load_image(str(output)).shape == (32, 32, 4)


def test_decode_writes_image(tmp_path):
    """Decode renders a base64 hash to a file."""
    output = tmp_path / "out.png"
    # 2x2 red/green/blue/yellow image
    pixels = bytes([255, 0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255, 255, 255, 0, 255])
    text = base64.b64encode(rgba_to_thumb_hash(2, 2, pixels)).decode('ascii')
    assert main(['decode', text, str(output)]) == 0
    assert load_image(str(output)).shape == (32, 32, 4)


@pytest.mark.parametrize("text", ["not base64!", "AAAA"])
def test_decode_invalid_hash(text, tmp_path, capsys):
    """Bad base64 or short hashes exit with status 1."""
    assert main(['decode', text, str(tmp_path / "x.png")]) == 1
    assert "Invalid ThumbHash" in capsys.readouterr().err


def test_encode_needs_a_source():
    """encode without an image or --synthetic is a usage error."""
    with pytest.raises(SystemExit):
        main(['encode'])
