import random

import pytest

from dtex import TextureFormat, UnsupportedFormat, encode_pixels, pack_indices
from dtex.pixels import pixels_per_byte

INDEX_FORMATS = [TextureFormat.BPP2, TextureFormat.BPP4, TextureFormat.BPP8]


def _unpack(data: bytes, bpp: int) -> list[int]:
    mask = (1 << bpp) - 1
    values = []
    for byte in data:
        for i in range(8 // bpp):
            values.append((byte >> (i * bpp)) & mask)
    return values


def test_2bpp_packs_first_index_lowest() -> None:
    assert encode_pixels([0, 1, 2, 3], TextureFormat.BPP2) == bytes([0xE4])


def test_4bpp_drops_trailing_index() -> None:
    assert encode_pixels([1, 2, 3, 4, 5], TextureFormat.BPP4) == bytes([0x21, 0x43])


def test_8bpp_copies_indices() -> None:
    data = bytes(range(256))
    assert encode_pixels(data, TextureFormat.BPP8) == data


@pytest.mark.parametrize("fmt", [TextureFormat.A3I5, TextureFormat.A5I3])
def test_alpha_formats_store_one_byte_per_pixel(fmt: TextureFormat) -> None:
    assert encode_pixels(b"\x00\xe0\xff", fmt) == b"\x00\xe0\xff"


@pytest.mark.parametrize("fmt", INDEX_FORMATS)
def test_output_length(fmt: TextureFormat) -> None:
    per_byte = pixels_per_byte(fmt)
    for length in range(0, 20):
        assert len(encode_pixels(bytes(length), fmt)) == length // per_byte


@pytest.mark.parametrize("fmt", INDEX_FORMATS)
def test_unpack_recovers_masked_values(fmt: TextureFormat) -> None:
    rng = random.Random(1234)
    bpp = 8 // pixels_per_byte(fmt)
    indices = [rng.randrange(256) for _ in range(64)]

    packed = encode_pixels(indices, fmt)

    assert _unpack(packed, bpp) == [value & ((1 << bpp) - 1) for value in indices]


def test_out_of_range_indices_are_truncated() -> None:
    assert encode_pixels([5, 6, 7, 0xFF], TextureFormat.BPP2) == bytes([0xF9])
    assert encode_pixels([0x1F, 0x20], TextureFormat.BPP4) == bytes([0x0F])


def test_pack_indices() -> None:
    assert pack_indices([3], 2) == 3
    assert pack_indices([1, 1, 1, 1], 2) == 0x55
    assert pack_indices([0xA, 0xB], 4) == 0xBA


@pytest.mark.parametrize("fmt", [TextureFormat.BPP16, TextureFormat.C4X4])
def test_unsupported_formats(fmt: TextureFormat) -> None:
    with pytest.raises(UnsupportedFormat) as excinfo:
        encode_pixels([0, 1, 2, 3], fmt)
    assert excinfo.value.format is fmt
    assert excinfo.value.mode == "pixels"
