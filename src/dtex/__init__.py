"""Nintendo DS texture converter.

Packs the pixels of a paletted image into DS texture formats (2bpp, 4bpp,
8bpp, a3i5, a5i3) and encodes the matching 15-bit palette table. It can be
invoked through the CLI (``python -m dtex``) or imported to convert images
in memory.
"""

__version__ = "0.1.0"

from .converter import ConvertOptions, convert_file, convert_image, convert_pil_image
from .errors import (
    ConversionError,
    IOFailure,
    UnknownFormatError,
    UnsupportedFormat,
    UnsupportedSourceImage,
)
from .formats import FORMAT_NAMES, TextureFormat, bits_per_pixel, palette_index_bits
from .image import PalettedImage, load_paletted_image
from .palette import encode_palette, quantize_palette
from .pixels import encode_pixels, pack_indices
from .quantize import quantize_color

__all__ = [
    "FORMAT_NAMES",
    "ConversionError",
    "ConvertOptions",
    "IOFailure",
    "PalettedImage",
    "TextureFormat",
    "UnknownFormatError",
    "UnsupportedFormat",
    "UnsupportedSourceImage",
    "bits_per_pixel",
    "convert_file",
    "convert_image",
    "convert_pil_image",
    "encode_palette",
    "encode_pixels",
    "load_paletted_image",
    "pack_indices",
    "palette_index_bits",
    "quantize_color",
    "quantize_palette",
]
