"""
GBA ROM Toolkit - Exceptions

Errors raised while reading, decompressing, or decoding ROM data.
All of them indicate malformed input data or bad address/length arguments,
so callers should not retry.
"""


class RomError(Exception):
    """Base class for all ROM toolkit errors."""

    pass


class OutOfBoundsError(RomError):
    """Raised when an access falls outside the ROM buffer."""

    def __init__(self, address: int, width: int, size: int):
        self.address = address
        self.width = width
        self.size = size
        super().__init__(
            f"Access of {width} byte(s) at 0x{address:X} is out of bounds "
            f"(buffer is 0x{size:X} bytes)"
        )


class EndOfBufferError(RomError):
    """Raised when a text scan reaches the end of the buffer before a terminator."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"No text terminator found after 0x{address:X}")


class CompressionError(RomError):
    """Raised when a compressed block cannot be decoded."""

    pass


class InvalidOpcodeError(CompressionError):
    """Raised when a block does not start with the LZ77 opcode."""

    def __init__(self, address: int, opcode: int):
        self.address = address
        self.opcode = opcode
        super().__init__(
            f"Invalid LZ77 opcode 0x{opcode:02X} at 0x{address:X} (expected 0x10)"
        )


class InvalidBackReferenceError(CompressionError):
    """Raised when a back-reference points before the start of the output."""

    def __init__(self, offset: int, position: int):
        self.offset = offset
        self.position = position
        super().__init__(
            f"Back-reference offset {offset} reaches before start of output "
            f"(only {position} byte(s) written)"
        )


class UnmappableCharacterError(RomError):
    """Raised when text contains a character with no byte in the character table."""

    def __init__(self, character: str, index: int):
        self.character = character
        self.index = index
        super().__init__(f"Character {character!r} at index {index} has no mapping")


class InvalidDimensionsError(RomError):
    """Raised when image dimensions are not a positive multiple of the tile size."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"Bitmap image width and height must be divisible by 8 (got {width}x{height})"
        )


class UnsupportedWriteError(RomError):
    """Raised when data cannot be written back the way it was read."""

    pass


class PixelIndexError(OutOfBoundsError):
    """Raised when a pixel index is outside the pixel data."""

    def __init__(self, index: int, pixel_count: int):
        self.index = index
        self.pixel_count = pixel_count
        self.address = index
        self.width = 1
        self.size = pixel_count
        RomError.__init__(
            self, f"Pixel index {index} out of range (pixel data holds {pixel_count} pixels)"
        )


class ColorIndexError(RomError):
    """Raised when a palette index has no color in the palette."""

    def __init__(self, index: int, palette_size: int):
        self.index = index
        self.palette_size = palette_size
        super().__init__(
            f"Palette index {index} out of range (palette holds {palette_size} colors)"
        )
