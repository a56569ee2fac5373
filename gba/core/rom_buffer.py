"""
GBA ROM Toolkit - ROM Buffer

Positioned, little-endian access to the bytes of a GBA ROM image.
Every get/put works directly on the in-memory buffer; nothing is written to
disk until save() is called.
"""

from pathlib import Path

from .charset import CharacterTable, load_character_table
from .errors import EndOfBufferError, OutOfBoundsError

# Pointers store a bank selector (0x08/0x09) in the top byte
POINTER_MASK = 0x1FFFFFF


class RomBuffer:
    """
    Mutable byte store for a ROM image with a read/write cursor.

    Methods taking an optional `address` move the cursor there first.
    Without an address they operate at the cursor. Either way the cursor
    ends just past the bytes consumed.

    Usage:
        rom = RomBuffer.from_file("firered.gba")
        ptr = rom.read_pointer(0x3D37A0)
        name = rom.read_text_until_end(ptr)
    """

    def __init__(self, data: bytes, charset: CharacterTable | None = None):
        """
        Args:
            data: ROM image bytes (copied)
            charset: Poketext table. If None, the packaged default is used.
        """
        self.data = bytearray(data)
        self.charset = charset if charset is not None else load_character_table()
        self.position = 0

    @classmethod
    def from_file(cls, rom_path: str, charset: CharacterTable | None = None) -> "RomBuffer":
        """
        Load a ROM image from disk.

        Args:
            rom_path: Path to ROM file
            charset: Poketext table (optional)

        Returns:
            New buffer holding the file contents
        """
        with open(rom_path, "rb") as f:
            rom = cls(f.read(), charset)

        print(f"ROM loaded: {len(rom) // 1024}KB")
        return rom

    def save(self, output_path: str):
        """Write the buffer to disk."""
        Path(output_path).write_bytes(self.data)
        print(f"Wrote modified ROM to: {output_path}")

    def __len__(self) -> int:
        return len(self.data)

    def seek(self, address: int):
        """
        Move the cursor.

        Raises:
            OutOfBoundsError: If address is outside the buffer
        """
        if address < 0 or address > len(self.data):
            raise OutOfBoundsError(address, 0, len(self.data))
        self.position = address

    # ------------------------------------------------------------------
    # Core access
    # ------------------------------------------------------------------

    def _begin(self, address: int | None, width: int) -> int:
        """Resolve the access address and check that width bytes fit."""
        if address is None:
            address = self.position
        if address < 0 or address + width > len(self.data):
            raise OutOfBoundsError(address, width, len(self.data))
        return address

    def _read(self, address: int | None, width: int) -> int:
        start = self._begin(address, width)
        self.position = start + width
        return int.from_bytes(self.data[start : start + width], "little")

    def _write(self, address: int | None, width: int, value: int):
        start = self._begin(address, width)
        mask = (1 << (width * 8)) - 1
        self.data[start : start + width] = (value & mask).to_bytes(width, "little")
        self.position = start + width

    def read_bytes(self, length: int, address: int | None = None) -> bytes:
        """
        Read a raw run of bytes.

        Args:
            length: Number of bytes to read
            address: Position to read (default: cursor)

        Returns:
            Requested bytes
        """
        start = self._begin(address, length)
        self.position = start + length
        return bytes(self.data[start : start + length])

    # ------------------------------------------------------------------
    # Scalar reads
    # ------------------------------------------------------------------

    def read_u8(self, address: int | None = None) -> int:
        """Read an unsigned byte."""
        return self._read(address, 1)

    def read_u16(self, address: int | None = None) -> int:
        """Read an unsigned 16-bit little-endian value."""
        return self._read(address, 2)

    def read_u32(self, address: int | None = None) -> int:
        """Read an unsigned 32-bit little-endian value."""
        return self._read(address, 4)

    def read_pointer(self, address: int | None = None) -> int:
        """
        Read a pointer.

        Pointers are 32-bit values whose top byte selects the bank; only the
        low 25 bits are the ROM offset.
        """
        return self._read(address, 4) & POINTER_MASK

    # ------------------------------------------------------------------
    # Bulk reads
    # ------------------------------------------------------------------

    def _read_many(self, count: int, address: int | None, width: int) -> list[int]:
        self.position = self._begin(address, width * count)
        return [self._read(None, width) for _ in range(count)]

    def read_u8s(self, count: int, address: int | None = None) -> list[int]:
        """Read `count` unsigned bytes."""
        return self._read_many(count, address, 1)

    def read_u16s(self, count: int, address: int | None = None) -> list[int]:
        """Read `count` 16-bit values at 2-byte stride."""
        return self._read_many(count, address, 2)

    def read_u32s(self, count: int, address: int | None = None) -> list[int]:
        """Read `count` 32-bit values at 4-byte stride."""
        return self._read_many(count, address, 4)

    def read_pointers(self, count: int, address: int | None = None) -> list[int]:
        """Read `count` pointers at 4-byte stride."""
        return [value & POINTER_MASK for value in self._read_many(count, address, 4)]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def write_u8(self, value: int, address: int | None = None):
        """Write a byte."""
        self._write(address, 1, value)

    def write_u16(self, value: int, address: int | None = None):
        """Write a 16-bit little-endian value."""
        self._write(address, 2, value)

    def write_u32(self, value: int, address: int | None = None):
        """Write a 32-bit little-endian value."""
        self._write(address, 4, value)

    def _write_many(self, values, address: int | None, width: int):
        values = list(values)
        self.position = self._begin(address, width * len(values))
        for value in values:
            self._write(None, width, value)

    def write_u8s(self, values, address: int | None = None):
        """Write a sequence of bytes."""
        self._write_many(values, address, 1)

    def write_u16s(self, values, address: int | None = None):
        """Write a sequence of 16-bit values at 2-byte stride."""
        self._write_many(values, address, 2)

    def write_u32s(self, values, address: int | None = None):
        """Write a sequence of 32-bit values at 4-byte stride."""
        self._write_many(values, address, 4)

    # ------------------------------------------------------------------
    # Poketext
    # ------------------------------------------------------------------

    def read_text(self, length: int, address: int | None = None) -> str:
        """
        Read a fixed number of Poketext characters.

        Args:
            length: Number of bytes to decode
            address: Position to read (default: cursor)

        Returns:
            Decoded text (terminators included as their marker glyph)
        """
        return "".join(self.charset.decode(b) for b in self.read_bytes(length, address))

    def read_text_until_end(self, address: int | None = None) -> str:
        """
        Read Poketext until the terminator byte.

        The cursor ends just past the terminator. Trailing whitespace is
        stripped from the result.

        Raises:
            EndOfBufferError: If the buffer ends before a terminator
        """
        start = self._begin(address, 0)
        self.position = start

        parts = []
        while True:
            if self.position >= len(self.data):
                raise EndOfBufferError(start)
            glyph = self.charset.decode(self.read_u8())
            if self.charset.is_terminator(glyph):
                break
            parts.append(glyph)

        return "".join(parts).rstrip()

    def read_text_list(self, count: int, address: int | None = None) -> list[str]:
        """
        Read `count` consecutive terminated strings.

        Raises:
            EndOfBufferError: If the buffer ends before the last terminator
        """
        if address is not None:
            self.seek(address)
        return [self.read_text_until_end() for _ in range(count)]

    def write_text(self, text: str, address: int | None = None):
        """
        Encode text as Poketext and write it.

        No terminator is appended; include one explicitly if needed.

        Raises:
            UnmappableCharacterError: If a character has no byte mapping
        """
        self.write_u8s(self.charset.encode(text), address)
