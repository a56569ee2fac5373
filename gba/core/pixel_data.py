"""
GBA ROM Toolkit - Pixel Data

Indexed-color pixel data. Each pixel is a palette index packed into 1, 2, 4,
or 8 bits; within a byte the first pixel occupies the lowest bits.
"""

from enum import Enum
from typing import List

from . import lz77
from .errors import PixelIndexError
from .rom_buffer import RomBuffer


class PixelDepth(Enum):
    """Bits per pixel options available on the GBA."""

    BPP_1 = 1
    BPP_2 = 2
    BPP_4 = 4
    BPP_8 = 8

    @property
    def pixels_per_byte(self) -> int:
        return 8 // self.value


class PixelData:
    """A map of how each pixel corresponds to a palette's colors."""

    def __init__(
        self, values: bytes, depth: PixelDepth = PixelDepth.BPP_4, compressed: bool = False
    ):
        """
        Args:
            values: Packed pixel bytes
            depth: Bits per pixel
            compressed: Whether the data was stored as an LZ77 block
        """
        self.values: List[int] = list(values)
        self.depth = depth
        self.compressed = compressed

    @classmethod
    def read(
        cls,
        rom: RomBuffer,
        address: int,
        depth: PixelDepth = PixelDepth.BPP_4,
        size: int | None = None,
    ) -> "PixelData":
        """
        Read pixel data from the ROM.

        Args:
            rom: Buffer to read
            address: Address of pixel data
            depth: Bits per pixel
            size: Byte length of uncompressed data (ignored for LZ77 blocks)

        Returns:
            Loaded pixel data

        Raises:
            ValueError: If the data is not compressed and no size is given
        """
        if lz77.is_compressed(rom, address):
            return cls(lz77.decompress(rom, address), depth, compressed=True)
        if size is None:
            raise ValueError(
                f"Pixel data at 0x{address:X} is not compressed; a byte size is required"
            )
        return cls(rom.read_bytes(size, address), depth)

    @property
    def pixel_count(self) -> int:
        return len(self.values) * self.depth.pixels_per_byte

    def pixel(self, index: int) -> int:
        """
        Get the palette index of a pixel.

        At 4bpp this is the low nibble for even indices and the high nibble
        for odd ones.

        Raises:
            PixelIndexError: If index is outside the pixel data
        """
        if index < 0 or index >= self.pixel_count:
            raise PixelIndexError(index, self.pixel_count)

        per_byte = self.depth.pixels_per_byte
        raw = self.values[index // per_byte]
        shift = (index % per_byte) * self.depth.value
        return (raw >> shift) & ((1 << self.depth.value) - 1)
