"""Texture formats understood by the Nintendo DS 3D engine."""

# Reference: DS texture formats (TEXIMAGE_PARAM bits 26-28)
# Name  | Pixel bits | Palette entries | Notes
# ------|------------|-----------------|----------------------------------------
# a3i5  | 8          | 32              | 3-bit alpha, 5-bit index
# 2bpp  | 2          | 4               |
# 4bpp  | 4          | 16              |
# 8bpp  | 8          | 256             |
# 4x4c  | 2          | -               | 4x4 texel blocks, not implemented here
# a5i3  | 8          | 8               | 5-bit alpha, 3-bit index
# 16bpp | 16         | -               | direct color, no palette

from __future__ import annotations

from enum import Enum
from typing import Dict

from .errors import UnknownFormatError


class TextureFormat(Enum):
    BPP2 = "2bpp"
    BPP4 = "4bpp"
    BPP8 = "8bpp"
    BPP16 = "16bpp"
    A3I5 = "a3i5"
    A5I3 = "a5i3"
    C4X4 = "4x4c"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "TextureFormat":
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise UnknownFormatError(
            f"Unknown texture format: {name!r} (expected one of: {', '.join(FORMAT_NAMES)})"
        )


FORMAT_NAMES = tuple(member.value for member in TextureFormat)

# Storage width of one pixel in the packed texture.
BITS_PER_PIXEL: Dict[TextureFormat, int] = {
    TextureFormat.BPP2: 2,
    TextureFormat.BPP4: 4,
    TextureFormat.BPP8: 8,
    TextureFormat.BPP16: 16,
    TextureFormat.A3I5: 8,
    TextureFormat.A5I3: 8,
    TextureFormat.C4X4: 2,
}

# The alpha formats only address part of the palette with their index bits.
_PALETTE_INDEX_BITS: Dict[TextureFormat, int] = {
    TextureFormat.A3I5: 5,
    TextureFormat.A5I3: 3,
}

PALETTE_SPACE = 256


def bits_per_pixel(texture_format: TextureFormat) -> int:
    return BITS_PER_PIXEL[texture_format]


def palette_index_bits(texture_format: TextureFormat) -> int:
    """Return how many bits of a pixel select a palette entry."""

    return _PALETTE_INDEX_BITS.get(texture_format, BITS_PER_PIXEL[texture_format])


def has_alpha_bits(texture_format: TextureFormat) -> bool:
    return texture_format in _PALETTE_INDEX_BITS
