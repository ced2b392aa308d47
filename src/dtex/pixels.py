"""Pixel index packing."""

from __future__ import annotations

from typing import Sequence

from .errors import UnsupportedFormat
from .formats import TextureFormat, bits_per_pixel


def pixels_per_byte(texture_format: TextureFormat) -> int:
    return 8 // bits_per_pixel(texture_format)


def pack_indices(values: Sequence[int], bpp: int) -> int:
    """Pack ``values`` into one byte, first value in the lowest bits."""

    mask = (1 << bpp) - 1
    packed = 0
    for i, value in enumerate(values):
        packed |= (value & mask) << (i * bpp)
    return packed


def encode_pixels(indices: Sequence[int], texture_format: TextureFormat) -> bytes:
    """Pack palette indices for ``texture_format``.

    Indices wider than the format are truncated to their low bits, and a
    trailing group that does not fill a whole byte is dropped.
    """

    if texture_format in (TextureFormat.BPP16, TextureFormat.C4X4):
        raise UnsupportedFormat(
            texture_format,
            "pixels",
            f"{texture_format} pixel conversion is not implemented",
        )

    bpp = bits_per_pixel(texture_format)
    per_byte = 8 // bpp
    count = len(indices) // per_byte

    out = bytearray(count)
    for pos in range(count):
        start = pos * per_byte
        out[pos] = pack_indices(indices[start : start + per_byte], bpp)
    return bytes(out)
