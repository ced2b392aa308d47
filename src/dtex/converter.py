"""Driver that turns paletted images into DS texture or palette data."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .errors import IOFailure
from .formats import TextureFormat, bits_per_pixel, has_alpha_bits
from .image import PalettedImage, load_paletted_image
from .palette import encode_palette, palette_window
from .pixels import encode_pixels, pixels_per_byte


@dataclass
class ConvertOptions:
    """Target format and output mode."""

    texture_format: TextureFormat = TextureFormat.BPP2
    palette: bool = False  # write the palette table instead of pixel data

    @classmethod
    def from_names(cls, format_name: str, palette: bool = False) -> "ConvertOptions":
        return cls(texture_format=TextureFormat.from_name(format_name), palette=palette)


def _warn_pixels(image: PalettedImage, texture_format: TextureFormat) -> None:
    bpp = bits_per_pixel(texture_format)
    per_byte = pixels_per_byte(texture_format)

    leftover = len(image.pixels) % per_byte
    if leftover:
        warnings.warn(
            f"{leftover} trailing pixel(s) do not fill a byte at {texture_format} and were dropped",
            RuntimeWarning,
            stacklevel=3,
        )

    if bpp < 8 and image.pixels and max(image.pixels) >= (1 << bpp):
        warnings.warn(
            f"Palette indices above {(1 << bpp) - 1} were truncated to {bpp} bits",
            RuntimeWarning,
            stacklevel=3,
        )


def _warn_palette(image: PalettedImage, texture_format: TextureFormat) -> None:
    if not has_alpha_bits(texture_format):
        return
    offset, size = palette_window(texture_format)
    if len(image.palette) < offset + size:
        warnings.warn(
            f"{texture_format} uses palette entries {offset}-{offset + size - 1} "
            f"but the image only has {len(image.palette)} colors; missing entries are black",
            RuntimeWarning,
            stacklevel=3,
        )


def convert_image(image: PalettedImage, options: ConvertOptions | None = None) -> bytes:
    options = options or ConvertOptions()
    texture_format = options.texture_format

    if options.palette:
        data = encode_palette(image.palette, texture_format)
        _warn_palette(image, texture_format)
    else:
        data = encode_pixels(image.pixels, texture_format)
        _warn_pixels(image, texture_format)
    return data


def convert_pil_image(image: Image.Image, options: ConvertOptions | None = None) -> bytes:
    return convert_image(PalettedImage.from_image(image), options)


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    options: ConvertOptions | None = None,
) -> Path:
    """Convert ``input_path`` and write the raw result to ``output_path``.

    Nothing is written unless the conversion succeeds.
    """

    output = Path(output_path)
    data = convert_image(load_paletted_image(input_path), options)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
    except OSError as exc:
        raise IOFailure(f"Failed to write output: {output}") from exc
    return output
