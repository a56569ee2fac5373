"""
GBA ROM Toolkit - Palette Data

Palettes are runs of 16-bit BGR555 words, stored raw or LZ77-compressed.
Each word holds one color: bits 0-4 red, 5-9 green, 10-14 blue.
"""

from typing import List, Tuple

from . import lz77
from .errors import ColorIndexError, UnsupportedWriteError
from .rom_buffer import RomBuffer
from .savable import Savable

# Type alias for RGB color
RGBColor = Tuple[int, int, int]


def decode_color(word: int) -> RGBColor:
    """
    Convert a BGR555 word to an RGB tuple (0-248 per channel).

    Example:
        >>> decode_color(0x001F)
        (248, 0, 0)
    """
    red = (word & 0x1F) << 3
    green = (word & 0x3E0) >> 2
    blue = (word & 0x7C00) >> 7
    return (red, green, blue)


def encode_color(color: RGBColor) -> int:
    """Convert an RGB tuple back to a BGR555 word (low 3 bits of each channel are dropped)."""
    red, green, blue = color
    return ((red >> 3) & 0x1F) | (((green >> 3) & 0x1F) << 5) | (((blue >> 3) & 0x1F) << 10)


class Palette(Savable):
    """
    A palette of 16 or 256 colors read from the ROM.

    `values` holds the raw bytes backing the palette (two per color, low
    byte first); `colors` holds the decoded RGB tuples.
    """

    def __init__(self, values: bytes, address: int | None = None, compressed: bool = False):
        """
        Args:
            values: Raw palette bytes (little-endian color words)
            address: ROM address the palette came from (needed for persist)
            compressed: Whether the palette was stored as an LZ77 block
        """
        self.values: List[int] = list(values)
        self.address = address
        self.compressed = compressed
        self.colors: List[RGBColor] = [
            decode_color(self.word(i)) for i in range(len(self.values) // 2)
        ]

    @classmethod
    def read(cls, rom: RomBuffer, address: int, size: int) -> "Palette":
        """
        Read a palette from the ROM.

        Args:
            rom: Buffer to read
            address: Address of palette data
            size: Number of colors (used when the data is not compressed)

        Returns:
            Loaded palette
        """
        if lz77.is_compressed(rom, address):
            return cls(lz77.decompress(rom, address), address, compressed=True)
        return cls(rom.read_bytes(size * 2, address), address)

    def __len__(self) -> int:
        return len(self.colors)

    def color(self, index: int) -> RGBColor:
        """
        Get the color at a palette index.

        Raises:
            ColorIndexError: If the palette has no color at index
        """
        if index < 0 or index >= len(self.colors):
            raise ColorIndexError(index, len(self.colors))
        return self.colors[index]

    def word(self, index: int) -> int:
        """Get the raw 16-bit word for a palette index."""
        return self.values[index * 2] | (self.values[index * 2 + 1] << 8)

    def value(self, index: int) -> int:
        """Get one raw byte of the backing data."""
        return self.values[index]

    def set_value(self, index: int, value: int):
        """Replace one raw byte of the backing data."""
        self.values[index] = value & 0xFF
        color_index = index // 2
        if color_index < len(self.colors):
            self.colors[color_index] = decode_color(self.word(color_index))

    def set_color(self, index: int, color: RGBColor):
        """Replace a color, re-encoding its backing word."""
        word = encode_color(color)
        self.values[index * 2] = word & 0xFF
        self.values[index * 2 + 1] = word >> 8
        self.colors[index] = decode_color(word)

    def persist(self, rom: RomBuffer) -> None:
        """
        Write the color words back to the ROM at the original address.

        Raises:
            UnsupportedWriteError: If the palette was loaded from an LZ77
                block or has no address
        """
        if self.address is None:
            raise UnsupportedWriteError("Palette has no ROM address to write to")
        if self.compressed:
            raise UnsupportedWriteError(
                f"Palette at 0x{self.address:X} was LZ77-compressed; "
                "writing raw words would overrun the compressed block"
            )
        words = [self.word(i) for i in range(len(self.values) // 2)]
        rom.write_u16s(words, self.address)
