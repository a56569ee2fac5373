"""Unit tests for indexed pixel data."""

import pytest

from gba.core.errors import OutOfBoundsError, PixelIndexError
from gba.core.pixel_data import PixelData, PixelDepth


def legacy_4bpp_pixel(values: list[int], index: int) -> int:
    """Nibble extraction as originally written for 4bpp data."""
    pixel = values[index // 2]
    if (index & 1) == 0:
        return pixel & 0x0F
    return (pixel & 0xF0) >> 4


class TestPixelDepth:
    """Tests for PixelDepth."""

    def test_values(self):
        assert [d.value for d in PixelDepth] == [1, 2, 4, 8]

    def test_pixels_per_byte(self):
        assert PixelDepth.BPP_1.pixels_per_byte == 8
        assert PixelDepth.BPP_4.pixels_per_byte == 2
        assert PixelDepth.BPP_8.pixels_per_byte == 1


class TestPixel4bpp:
    """Tests for 4bpp pixel extraction."""

    def test_low_nibble_first(self):
        pixels = PixelData(bytes([0x21, 0x43]))
        assert [pixels.pixel(i) for i in range(4)] == [1, 2, 3, 4]

    def test_matches_legacy_formula(self):
        values = list(range(256))
        pixels = PixelData(bytes(values), PixelDepth.BPP_4)
        for index in range(pixels.pixel_count):
            assert pixels.pixel(index) == legacy_4bpp_pixel(values, index)

    def test_pixel_count(self):
        assert PixelData(bytes(32)).pixel_count == 64


class TestOtherDepths:
    """Tests for 1, 2, and 8bpp extraction."""

    def test_1bpp_lsb_first(self):
        pixels = PixelData(bytes([0b10100101]), PixelDepth.BPP_1)
        assert [pixels.pixel(i) for i in range(8)] == [1, 0, 1, 0, 0, 1, 0, 1]

    def test_2bpp(self):
        pixels = PixelData(bytes([0b11100100]), PixelDepth.BPP_2)
        assert [pixels.pixel(i) for i in range(4)] == [0, 1, 2, 3]

    def test_8bpp(self):
        pixels = PixelData(bytes([7, 200]), PixelDepth.BPP_8)
        assert [pixels.pixel(0), pixels.pixel(1)] == [7, 200]
        assert pixels.pixel_count == 2


class TestBounds:
    """Tests for out-of-range pixel indices."""

    def test_past_end_raises(self):
        pixels = PixelData(bytes(2))
        with pytest.raises(OutOfBoundsError):
            pixels.pixel(4)

    def test_negative_raises(self):
        with pytest.raises(OutOfBoundsError):
            PixelData(bytes(2)).pixel(-1)

    def test_last_pixel_readable(self):
        assert PixelData(bytes([0x00, 0xF0])).pixel(3) == 0xF

    def test_error_names_pixel_index(self):
        with pytest.raises(PixelIndexError) as exc_info:
            PixelData(bytes(2)).pixel(7)
        assert exc_info.value.index == 7
        assert exc_info.value.pixel_count == 4
        assert "Pixel index 7" in str(exc_info.value)
        assert "4 pixels" in str(exc_info.value)


class TestRead:
    """Tests for PixelData.read()."""

    def test_compressed(self, make_rom, two_tile_pixels_hex):
        rom = make_rom(0x100, {0x80: two_tile_pixels_hex})
        pixels = PixelData.read(rom, 0x80)
        assert pixels.compressed
        assert len(pixels.values) == 64
        assert pixels.pixel(0) == 1
        assert pixels.pixel(64) == 2

    def test_uncompressed_with_size(self, make_rom):
        rom = make_rom(0x100, {0x80: "21 43 65 87"})
        pixels = PixelData.read(rom, 0x80, PixelDepth.BPP_4, size=4)
        assert not pixels.compressed
        assert pixels.values == [0x21, 0x43, 0x65, 0x87]

    def test_uncompressed_without_size_raises(self, make_rom):
        rom = make_rom(0x100, {0x80: "21 43"})
        with pytest.raises(ValueError, match="size is required"):
            PixelData.read(rom, 0x80)

    def test_depth_kept(self, make_rom):
        rom = make_rom(0x100, {0x80: "FF"})
        pixels = PixelData.read(rom, 0x80, PixelDepth.BPP_8, size=1)
        assert pixels.depth is PixelDepth.BPP_8
        assert pixels.pixel(0) == 0xFF
