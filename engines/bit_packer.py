"""Bit-exact ThumbHash layout: packed header fields and 4-bit AC payload.

Header (LSB first within each field)::

    bytes 0-2  l_dc:6  p_dc:6  q_dc:6  l_scale:5  has_alpha:1
    bytes 3-4  l_count:3  p_scale:6  q_scale:6  is_landscape:1
    byte  5    a_dc:4  a_scale:4            (only when has_alpha)

The payload follows with two AC codes per byte, low nibble first. Channels
are concatenated without padding, so a channel may start mid-byte.
"""

from typing import Iterable

import numpy as np

from utils.errors import InvalidArgumentError
from models.hash_header import HashHeader
from utils.constants import MIN_HASH


class BitPacker:
    """Accumulates a hash: header first, then nibble codes."""

    def __init__(self):
        self._buffer = bytearray()
        self._is_odd = False

    def __len__(self) -> int:
        return len(self._buffer)

    def write_header(self, header: HashHeader) -> None:
        if self._buffer:
            raise RuntimeError("Header must be written first")
        header24 = (
            header.l_dc
            | (header.p_dc << 6)
            | (header.q_dc << 12)
            | (header.l_scale << 18)
            | (int(header.has_alpha) << 23)
        )
        header16 = (
            header.l_count
            | (header.p_scale << 3)
            | (header.q_scale << 9)
            | (int(header.is_landscape) << 15)
        )
        self._buffer.extend((
            header24 & 255,
            (header24 >> 8) & 255,
            (header24 >> 16) & 255,
            header16 & 255,
            (header16 >> 8) & 255,
        ))
        if header.has_alpha:
            self._buffer.append((header.a_dc & 15) | ((header.a_scale & 15) << 4))

    def write_nibbles(self, codes: Iterable[int]) -> None:
        """Append 4-bit codes, continuing a half-filled byte if there is one."""
        for code in codes:
            code = int(code) & 15
            if self._is_odd:
                self._buffer[-1] |= code << 4
            else:
                self._buffer.append(code)
            self._is_odd = not self._is_odd

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)


class BitUnpacker:
    """Reads a hash back: header, bound check, then nibble codes.

    The nibble cursor is shared by all channels and never resets at a
    channel boundary.
    """

    def __init__(self, data: bytes):
        if len(data) < MIN_HASH:
            raise InvalidArgumentError(
                f"ThumbHash must be at least {MIN_HASH} bytes, got {len(data)}"
            )
        self._data = bytes(data)
        self._start = MIN_HASH
        self._index = 0
        self.header = None

    def read_header(self) -> HashHeader:
        data = self._data
        header24 = data[0] | (data[1] << 8) | (data[2] << 16)
        header16 = data[3] | (data[4] << 8)
        has_alpha = (header24 >> 23) != 0
        a_dc, a_scale = 15, 15
        if has_alpha:
            if len(data) < MIN_HASH + 1:
                raise InvalidArgumentError(
                    f"ThumbHash with alpha must be at least {MIN_HASH + 1} bytes, got {len(data)}"
                )
            a_dc, a_scale = data[5] & 15, data[5] >> 4
        self.header = HashHeader(
            l_dc=header24 & 63,
            p_dc=(header24 >> 6) & 63,
            q_dc=(header24 >> 12) & 63,
            l_scale=(header24 >> 18) & 31,
            has_alpha=has_alpha,
            l_count=header16 & 7,
            p_scale=(header16 >> 3) & 63,
            q_scale=(header16 >> 9) & 63,
            is_landscape=(header16 >> 15) != 0,
            a_dc=a_dc,
            a_scale=a_scale,
        )
        self._start = self.header.size
        return self.header

    def require_nibbles(self, total: int) -> None:
        """Fail unless ``total`` codes fit after the header."""
        needed = self._start + (total + 1) // 2
        if len(self._data) < needed:
            raise InvalidArgumentError(
                f"ThumbHash is truncated: header implies {needed} bytes, got {len(self._data)}"
            )

    def read_nibbles(self, count: int) -> np.ndarray:
        codes = np.empty(count, dtype=np.uint8)
        for n in range(count):
            byte = self._data[self._start + (self._index >> 1)]
            codes[n] = (byte >> ((self._index & 1) << 2)) & 15
            self._index += 1
        return codes
