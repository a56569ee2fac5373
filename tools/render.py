#!/usr/bin/env python3
"""
GBA ROM Toolkit - Image Renderer

Renders tiled indexed-color graphics from a ROM as PNG images.
"""

import argparse
import sys

from gba.core.errors import RomError
from gba.core.palette import Palette
from gba.core.pixel_data import PixelData, PixelDepth
from gba.core.rom_buffer import RomBuffer
from gba.rendering.pil_image import to_pil_image
from gba.rendering.tiled_image import TiledImage


def parse_address(value: str) -> int:
    """Parse a ROM address given as hex (0x prefix optional) or pointer."""
    return int(value, 16) & 0x1FFFFFF


def render_image(
    rom: RomBuffer,
    pixel_address: int,
    palette_address: int,
    width: int,
    height: int | None,
    depth: PixelDepth,
    palette_size: int,
    pixel_size: int | None,
) -> TiledImage:
    """Load pixel and palette data and build the tiled image."""
    pixels = PixelData.read(rom, pixel_address, depth, pixel_size)
    palette = Palette.read(rom, palette_address, palette_size)

    print(
        f"Pixels: {len(pixels.values)} bytes at 0x{pixel_address:06X}"
        f"{' (LZ77)' if pixels.compressed else ''}"
    )
    print(
        f"Palette: {len(palette)} colors at 0x{palette_address:06X}"
        f"{' (LZ77)' if palette.compressed else ''}"
    )
    return TiledImage(pixels, palette, width, height)


def main():
    parser = argparse.ArgumentParser(
        description="Render GBA tiled graphics from a ROM as PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render a compressed 4bpp sprite sheet (64px wide):
    python tools/render.py firered.gba 0x100000 0x100800 -w 64 sheet.png

  Render uncompressed 8bpp graphics with a 256-color palette:
    python tools/render.py rom.gba 0x100000 0x120000 -w 128 -d 8 \\
        --palette-size 256 --pixel-size 16384 out.png

  Render a single mirrored tile at 8x scale:
    python tools/render.py rom.gba 0x100000 0x100800 -w 64 --tile 5 --flip-x -s 8 tile.png
        """,
    )
    parser.add_argument("rom", help="Path to GBA ROM file")
    parser.add_argument("pixels", type=parse_address, help="Address of pixel data (hex)")
    parser.add_argument("palette", type=parse_address, help="Address of palette data (hex)")
    parser.add_argument("output", help="Output PNG file")
    parser.add_argument("-w", "--width", type=int, required=True, help="Width in pixels")
    parser.add_argument(
        "--height", type=int, help="Height in pixels (default: derived from data size)"
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        choices=[1, 2, 4, 8],
        default=4,
        help="Bits per pixel (default: 4)",
    )
    parser.add_argument(
        "--palette-size",
        type=int,
        default=16,
        help="Colors to read for an uncompressed palette (default: 16)",
    )
    parser.add_argument(
        "--pixel-size",
        type=int,
        help="Bytes to read for uncompressed pixel data",
    )
    parser.add_argument("-s", "--scale", type=int, default=1, help="Scale factor (default: 1)")
    parser.add_argument("--tile", type=int, help="Render only this tile id")
    parser.add_argument("--flip-x", action="store_true", help="Mirror the tile horizontally")
    parser.add_argument("--flip-y", action="store_true", help="Mirror the tile vertically")

    args = parser.parse_args()

    try:
        rom = RomBuffer.from_file(args.rom)
        image = render_image(
            rom,
            args.pixels,
            args.palette,
            args.width,
            args.height,
            PixelDepth(args.depth),
            args.palette_size,
            args.pixel_size,
        )
        surface = image
        if args.tile is not None:
            surface = image.tile(args.tile, args.flip_x, args.flip_y)
        elif args.flip_x or args.flip_y:
            print("Warning: --flip-x/--flip-y only apply with --tile")

        img = to_pil_image(surface, args.scale)
    except (RomError, ValueError, IndexError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    img.save(args.output)
    print(f"Saved: {args.output} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
