"""Command line interface for dtex."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from . import __version__
from .converter import ConvertOptions, convert_file
from .errors import ConversionError
from .formats import FORMAT_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dtex",
        description=(
            "dtex, a texture converter for Nintendo DS homebrew.\n"
            "Converts a paletted PNG into raw DS texture data, or with --palette "
            "into the matching 15-bit palette table.\n"
            "a3i5/a5i3 palettes are taken from the last 32/8 entries of the image palette."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", type=Path, help="Paletted source image (PNG)")
    parser.add_argument(
        "-t",
        "--to",
        dest="texture_format",
        choices=FORMAT_NAMES,
        default="2bpp",
        help="Target texture format",
    )
    parser.add_argument(
        "--palette",
        action="store_true",
        help="Write the palette table instead of the texture data",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        type=Path,
        help="Destination file for the raw output",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing output file",
    )
    parser.add_argument("--version", action="version", version=f"dtex {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = ConvertOptions.from_names(args.texture_format, palette=args.palette)

        if args.output.exists() and not args.force:
            raise ConversionError(
                f"Output file already exists (use --force to overwrite): {args.output}"
            )

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            target = convert_file(args.input, args.output, options)
        for warning in caught:
            print(f"Warning: {warning.message}")
        print(f"wrote {target}")
        return 0
    except ConversionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
