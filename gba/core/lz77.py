"""
GBA ROM Toolkit - LZ77 Decompression

Decompresses the BIOS-compatible LZ77 (type 0x10) blocks used throughout GBA
games for palettes, tile graphics, and other assets.

Block layout:
    0x10                      opcode
    3 bytes, little-endian    decompressed length (0 => 4-byte length follows)
    repeated:
        1 flag byte           8 flags, most significant bit first
        8 x segment           flag clear: 1 literal byte
                              flag set:   2 bytes, length (4 bits) + 3 and
                                          distance (12 bits) + 1
"""

from .errors import (
    CompressionError,
    InvalidBackReferenceError,
    InvalidOpcodeError,
    OutOfBoundsError,
)
from .rom_buffer import RomBuffer

LZ77_OPCODE = 0x10

# Back-references copy at least this many bytes
MIN_COPY_LENGTH = 3


def is_compressed(rom: RomBuffer, address: int) -> bool:
    """Check whether the byte at address is the LZ77 opcode."""
    return rom.read_u8(address) == LZ77_OPCODE


def _read_length(rom: RomBuffer) -> int:
    """Read the decompressed length that follows the opcode."""
    length = 0
    for i in range(3):
        length |= rom.read_u8() << (i * 8)
    # Zero marks the extended header used by blocks of 16MB and more
    if length == 0:
        length = rom.read_u32()
    return length


def decompress(rom: RomBuffer, address: int) -> bytes:
    """
    Decompress the LZ77 block at address.

    The ROM cursor is left just past the last byte consumed.

    Args:
        rom: Buffer to read from
        address: Address of the opcode byte

    Returns:
        Decompressed data, exactly the length declared in the header

    Raises:
        InvalidOpcodeError: If the block does not start with 0x10
        InvalidBackReferenceError: If a back-reference reaches before the output start
        OutOfBoundsError: If the block runs past the end of the ROM
    """
    opcode = rom.read_u8(address)
    if opcode != LZ77_OPCODE:
        raise InvalidOpcodeError(address, opcode)

    length = _read_length(rom)
    data = bytearray(length)
    position = 0

    while position < length:
        flags = rom.read_u8()
        for i in range(8):
            # Output complete and nothing left to read as padding
            if position >= length and rom.position >= len(rom):
                break

            if flags & (0x80 >> i):
                value = rom.read_u8()
                copy_length = (value >> 4) + MIN_COPY_LENGTH
                offset = ((value & 0x0F) << 8) | rom.read_u8()

                if offset >= position:
                    raise InvalidBackReferenceError(offset, position)

                # Byte by byte: source and destination overlap when offset < copy_length
                for _ in range(copy_length):
                    if position < length:
                        data[position] = data[position - offset - 1]
                    position += 1
            else:
                value = rom.read_u8()
                if position < length:
                    data[position] = value
                    position += 1
                elif value == 0:
                    # Zero padding after the last segment
                    break

            if position > length:
                break

    return bytes(data)


def find_blocks(
    rom: RomBuffer,
    start: int = 0,
    end: int | None = None,
    alignment: int = 4,
    min_length: int = 0x20,
    max_length: int = 0x40000,
) -> list[tuple[int, int, int]]:
    """
    Scan a ROM region for blocks that decompress cleanly.

    GBA assets are word-aligned, so only aligned addresses are tried. A
    candidate counts when its declared length is within bounds and the whole
    block decodes without error.

    Args:
        rom: Buffer to scan
        start: First address to try
        end: Stop before this address (default: end of ROM)
        alignment: Address step
        min_length: Smallest declared length accepted
        max_length: Largest declared length accepted

    Returns:
        List of (address, compressed_size, decompressed_size) tuples
    """
    if end is None:
        end = len(rom)

    blocks = []
    for address in range(start, end - 4, alignment):
        if rom.data[address] != LZ77_OPCODE:
            continue
        declared = int.from_bytes(rom.data[address + 1 : address + 4], "little")
        if not min_length <= declared <= max_length:
            continue
        try:
            data = decompress(rom, address)
        except (CompressionError, OutOfBoundsError):
            continue
        blocks.append((address, rom.position - address, len(data)))

    return blocks


def decompress_bytes(block: bytes) -> bytes:
    """
    Decompress an LZ77 block held in memory.

    Args:
        block: Bytes starting with the 0x10 opcode

    Returns:
        Decompressed data
    """
    return decompress(RomBuffer(block), 0)
