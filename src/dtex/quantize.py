"""Reduce 8-bit RGB colors to the DS 15-bit color word."""

from __future__ import annotations

from typing import Sequence


def to_5bit(component: int) -> int:
    return (component >> 3) & 0x1F


def quantize_color(r: int, g: int, b: int) -> int:
    """Pack an RGB triple into ``0BBBBBGGGGGRRRRR``.

    Channels are truncated, not rounded, so 0-7 all map to 0.
    """

    return to_5bit(r) | (to_5bit(g) << 5) | (to_5bit(b) << 10)


def quantize_rgba(color: Sequence[int]) -> int:
    """Quantize an RGB or RGBA palette entry.

    RGBA entries are premultiplied by alpha first, so a fully transparent
    entry becomes black.
    """

    if len(color) == 4:
        r, g, b, a = color
        r, g, b = r * a // 255, g * a // 255, b * a // 255
    else:
        r, g, b = color
    return quantize_color(r, g, b)
