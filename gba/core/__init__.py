"""
Core GBA ROM functionality.

This package contains the ROM buffer, Poketext character table, LZ77
decompression, and palette/pixel data decoding.
"""

from .charset import CharacterTable, load_character_table
from .errors import (
    ColorIndexError,
    CompressionError,
    EndOfBufferError,
    InvalidBackReferenceError,
    InvalidDimensionsError,
    InvalidOpcodeError,
    OutOfBoundsError,
    PixelIndexError,
    RomError,
    UnmappableCharacterError,
    UnsupportedWriteError,
)
from .header import RomHeader
from .palette import Palette
from .pixel_data import PixelData, PixelDepth
from .rom_buffer import RomBuffer
from .savable import Savable

__all__ = [
    "CharacterTable",
    "load_character_table",
    "RomBuffer",
    "RomHeader",
    "Palette",
    "PixelData",
    "PixelDepth",
    "Savable",
    "RomError",
    "OutOfBoundsError",
    "PixelIndexError",
    "ColorIndexError",
    "EndOfBufferError",
    "CompressionError",
    "InvalidOpcodeError",
    "InvalidBackReferenceError",
    "UnmappableCharacterError",
    "InvalidDimensionsError",
    "UnsupportedWriteError",
]
