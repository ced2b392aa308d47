"""Exceptions raised by the dtex converter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formats import TextureFormat


class ConversionError(Exception):
    """Base exception for conversion errors."""


class UnsupportedSourceImage(ConversionError):
    """Raised when the source image is not paletted."""


class UnsupportedFormat(ConversionError):
    """Raised when a texture format has no encoding for the requested mode."""

    def __init__(self, texture_format: TextureFormat, mode: str, message: str):
        super().__init__(message)
        self.format = texture_format
        self.mode = mode


class UnknownFormatError(ConversionError, ValueError):
    """Raised for a format name that is not in the registry."""


class IOFailure(ConversionError):
    """Raised when reading the source or writing the output fails."""
