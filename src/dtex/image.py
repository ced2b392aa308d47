"""Adapter from Pillow images to the paletted input the codecs consume."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from .errors import IOFailure, UnsupportedSourceImage

PaletteEntry = Tuple[int, ...]


@dataclass(frozen=True)
class PalettedImage:
    """Palette plus one index byte per pixel, row-major."""

    width: int
    height: int
    palette: Tuple[PaletteEntry, ...]
    pixels: bytes

    @classmethod
    def from_image(cls, image: Image.Image) -> "PalettedImage":
        if image.mode != "P":
            raise UnsupportedSourceImage(
                f"Only paletted images are supported (got mode {image.mode!r})"
            )

        flat = image.getpalette("RGB") or []
        colors = [tuple(flat[i : i + 3]) for i in range(0, len(flat) - 2, 3)]

        # tRNS is either a single transparent index or one alpha per entry.
        transparency = image.info.get("transparency")
        if isinstance(transparency, int):
            alphas = [0 if i == transparency else 255 for i in range(len(colors))]
            colors = [color + (alpha,) for color, alpha in zip(colors, alphas)]
        elif isinstance(transparency, (bytes, bytearray)):
            alphas = list(transparency) + [255] * (len(colors) - len(transparency))
            colors = [color + (alpha,) for color, alpha in zip(colors, alphas)]

        width, height = image.size
        return cls(width=width, height=height, palette=tuple(colors), pixels=image.tobytes())


def load_paletted_image(path: str | Path) -> PalettedImage:
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            return PalettedImage.from_image(img)
    except FileNotFoundError as exc:
        raise IOFailure(f"Input file not found: {path}") from exc
    except UnidentifiedImageError as exc:
        raise UnsupportedSourceImage(f"Not a recognized image file: {path}") from exc
    except OSError as exc:
        raise IOFailure(f"Failed to read image: {path}") from exc
