#!/usr/bin/env python3
"""
GBA ROM Toolkit - LZ77 Block Analysis

Scans a ROM for LZ77 blocks and reports size and compression statistics.
Usage: python tools/analyze.py <rom> [--start HEX] [--end HEX]
"""

import argparse
import sys

import numpy as np

from gba.core import lz77
from gba.core.rom_buffer import RomBuffer


def percentile_stats(values):
    """
    Summarize block sizes or ratios as quartiles.

    Raises:
        ValueError: If no blocks were found
    """
    if not values:
        raise ValueError("No values to summarize")
    arr = np.asarray(values, dtype=float)
    low, q1, median, q3, high = np.percentile(arr, [0, 25, 50, 75, 100])
    return {
        "min": float(low),
        "25th": float(q1),
        "50th": float(median),
        "75th": float(q3),
        "max": float(high),
        "count": len(values),
    }


def print_stats(title: str, stats: dict):
    print(f"\n{title} (n={stats['count']}):")
    print(f"  Min:  {stats['min']:.2f}")
    print(f"  25th: {stats['25th']:.2f}")
    print(f"  50th: {stats['50th']:.2f}")
    print(f"  75th: {stats['75th']:.2f}")
    print(f"  Max:  {stats['max']:.2f}")


def main():
    parser = argparse.ArgumentParser(description="Scan a GBA ROM for LZ77 blocks")
    parser.add_argument("rom", help="Path to GBA ROM file")
    parser.add_argument("--start", type=lambda v: int(v, 16), default=0, help="Start address (hex)")
    parser.add_argument("--end", type=lambda v: int(v, 16), help="End address (hex)")
    parser.add_argument("--list", action="store_true", help="Print every block found")

    args = parser.parse_args()

    rom = RomBuffer.from_file(args.rom)
    print(f"Scanning 0x{args.start:06X}-0x{(args.end or len(rom)):06X}...")
    blocks = lz77.find_blocks(rom, args.start, args.end)

    if not blocks:
        print("No LZ77 blocks found")
        sys.exit(1)

    print(f"Found {len(blocks)} LZ77 blocks\n")

    if args.list:
        for address, compressed, decompressed in blocks:
            print(f"  0x{address:06X}: {compressed:6d} -> {decompressed:6d} bytes")

    print("=" * 60)
    print("LZ77 BLOCK STATISTICS")
    print("=" * 60)
    print_stats("Decompressed size (bytes)", percentile_stats([b[2] for b in blocks]))
    ratios = [compressed / decompressed for _, compressed, decompressed in blocks]
    print_stats("Compression ratio", percentile_stats(ratios))
    print(f"\nAverage ratio: {np.mean(ratios):.4f}")
    print(f"Std dev:       {np.std(ratios):.4f}")


if __name__ == "__main__":
    main()
