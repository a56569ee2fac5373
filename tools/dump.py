#!/usr/bin/env python3
"""
GBA ROM Toolkit - Data Dumper

Prints ROM data as hex (decompressing LZ77 blocks) or as Poketext strings.
"""

import argparse
import sys

from gba.core import lz77
from gba.core.charset import load_character_table
from gba.core.errors import RomError
from gba.core.header import RomHeader
from gba.core.rom_buffer import RomBuffer
from gba.formats.hex_utils import format_hex_dump


def dump_block(rom: RomBuffer, address: int, length: int, raw: bool):
    """Print a hex dump of the data at address."""
    if not raw and lz77.is_compressed(rom, address):
        data = lz77.decompress(rom, address)
        print(
            f"LZ77 block at 0x{address:06X}: "
            f"{rom.position - address} bytes -> {len(data)} bytes"
        )
        base = 0
    else:
        data = rom.read_bytes(length, address)
        base = address

    for line in format_hex_dump(data, base_address=base):
        print(line)


def dump_text(rom: RomBuffer, address: int, count: int):
    """Print terminated Poketext strings starting at address."""
    for i, text in enumerate(rom.read_text_list(count, address)):
        print(f"{i:4d}: {text!r}")


def main():
    parser = argparse.ArgumentParser(
        description="Dump GBA ROM data as hex or Poketext",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Show the ROM header:
    python tools/dump.py firered.gba

  Hex dump (LZ77 blocks are decompressed automatically):
    python tools/dump.py firered.gba 0x100000

  Dump 10 strings:
    python tools/dump.py firered.gba 0x200000 --text --count 10
        """,
    )
    parser.add_argument("rom", help="Path to GBA ROM file")
    parser.add_argument(
        "address", nargs="?", type=lambda v: int(v, 16), help="Address to dump (hex)"
    )
    parser.add_argument(
        "-n", "--length", type=int, default=256, help="Bytes to dump if not compressed"
    )
    parser.add_argument("--raw", action="store_true", help="Do not decompress LZ77 blocks")
    parser.add_argument("--text", action="store_true", help="Decode Poketext strings")
    parser.add_argument("--count", type=int, default=1, help="Number of strings (with --text)")
    parser.add_argument("--charset", help="Path to a custom character table")

    args = parser.parse_args()

    try:
        rom = RomBuffer.from_file(args.rom, load_character_table(args.charset))

        if args.address is None:
            header = RomHeader.read(rom)
            print(f"Title:   {header.title}")
            print(f"Code:    {header.game_code}")
            print(f"Version: {header.version}")
        elif args.text:
            dump_text(rom, args.address, args.count)
        else:
            dump_block(rom, args.address, args.length, args.raw)
    except (RomError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
