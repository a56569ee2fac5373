"""Shared pytest fixtures for ROM tests."""

import pytest

from gba.core.charset import load_character_table
from gba.core.rom_buffer import RomBuffer
from gba.formats.hex_utils import parse_hex_bytes

# 16x8 image at 4bpp: tile 0 filled with index 1, tile 1 with index 2
TWO_TILE_PIXELS_LZ77 = "10 40 00 00 6C 11 F0 00 A0 00 22 F0 00 A0 00"

# 16 color palette: 0 black, 1 red, 2 blue, 3 white, rest black
PALETTE_16 = "00 00 1F 00 00 7C FF 7F" + " 00 00" * 12


@pytest.fixture
def charset():
    """Default Poketext table."""
    return load_character_table()


@pytest.fixture
def make_rom(charset):
    """Build a zero-filled RomBuffer with hex chunks placed at addresses."""

    def _make_rom(size: int = 0x400, chunks: dict[int, str] | None = None) -> RomBuffer:
        data = bytearray(size)
        for address, hex_str in (chunks or {}).items():
            block = parse_hex_bytes(hex_str)
            data[address : address + len(block)] = block
        return RomBuffer(bytes(data), charset)

    return _make_rom


@pytest.fixture
def counting_rom(charset):
    """16-byte ROM holding bytes 0x00-0x0F."""
    return RomBuffer(bytes(range(16)), charset)


class RecordingSink:
    """PixelSink that records every write."""

    def __init__(self):
        self.pixels: dict[tuple[int, int], tuple] = {}

    def set_pixel(self, x, y, color):
        self.pixels[(x, y)] = tuple(color)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def palette_hex():
    """Uncompressed 16 color palette as hex."""
    return PALETTE_16


@pytest.fixture
def two_tile_pixels_hex():
    """LZ77 block holding a 16x8 4bpp image as hex."""
    return TWO_TILE_PIXELS_LZ77
