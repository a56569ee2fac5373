"""
GBA ROM Toolkit - Hex String Utilities

Utilities for parsing and formatting hex strings used by the dump tools and
by tests that describe ROM contents.
"""

from typing import Iterable, List


def parse_hex_row(row_str: str) -> List[int]:
    """
    Read a whitespace-separated run of byte values, as written in tests and
    dump output (e.g. an LZ77 header "10 04 00 00").

    Raises:
        ValueError: If a token is not hex or does not fit in a byte
    """
    values = [int(token, 16) for token in row_str.split()]
    for value in values:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"0x{value:X} is not a byte value")
    return values


def parse_hex_bytes(hex_str: str) -> bytes:
    """Parse a hex string (spaces and newlines allowed) into bytes."""
    return bytes(parse_hex_row(hex_str))


def format_hex_row(row: Iterable[int]) -> str:
    """Render bytes the way parse_hex_row() reads them: "10 04 00 00"."""
    return " ".join(f"{b:02X}" for b in row)


def format_hex_dump(data: bytes, width: int = 16, base_address: int = 0) -> List[str]:
    """
    Format data as hex dump lines with addresses.

    Args:
        data: Bytes to dump
        width: Bytes per line
        base_address: Address printed for the first byte

    Returns:
        Lines like "0x000100: 10 04 00 00 ..."
    """
    lines = []
    for offset in range(0, len(data), width):
        chunk = data[offset : offset + width]
        lines.append(f"0x{base_address + offset:06X}: {format_hex_row(chunk)}")
    return lines
