"""Palette table encoding.

The DS stores palettes as little-endian 15-bit color words. A texture with
``n`` index bits uses a table of ``2**n`` entries; the alpha formats
(a3i5/a5i3) take their entries from the end of the 256-color palette because
the leading entries of the source image are reserved for alpha levels.
"""

from __future__ import annotations

from typing import List, Sequence

from .errors import UnsupportedFormat
from .formats import PALETTE_SPACE, TextureFormat, has_alpha_bits, palette_index_bits
from .quantize import quantize_rgba

Color = Sequence[int]


def palette_window(texture_format: TextureFormat) -> tuple[int, int]:
    """Return ``(offset, size)`` of the palette slice used by ``texture_format``."""

    size = 1 << palette_index_bits(texture_format)
    offset = PALETTE_SPACE - size if has_alpha_bits(texture_format) else 0
    return offset, size


def quantize_palette(palette: Sequence[Color], index_bits: int, offset: int = 0) -> List[int]:
    """Build a ``2**index_bits`` word table starting at ``palette[offset]``.

    Entries past the end of ``palette`` stay zero.
    """

    table = [0] * (1 << index_bits)
    window = palette[offset : offset + len(table)]
    for i, color in enumerate(window):
        table[i] = quantize_rgba(color)
    return table


def _check_format(texture_format: TextureFormat) -> None:
    if texture_format is TextureFormat.BPP16:
        raise UnsupportedFormat(texture_format, "palette", "16bpp textures have no palette")
    if texture_format is TextureFormat.C4X4:
        raise UnsupportedFormat(
            texture_format, "palette", "4x4c palette conversion is not implemented"
        )


def encode_palette(palette: Sequence[Color], texture_format: TextureFormat) -> bytes:
    _check_format(texture_format)

    offset, _ = palette_window(texture_format)
    table = quantize_palette(palette, palette_index_bits(texture_format), offset)

    out = bytearray()
    for word in table:
        out.append(word & 0xFF)
        out.append(word >> 8)
    return bytes(out)
