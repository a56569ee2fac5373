"""
GBA ROM Toolkit - Tiled Bitmap Images

Builds an RGBA image from pixel data and a palette. GBA graphics are stored
as a sequence of 8x8 tiles, left to right and top to bottom, with each
tile's pixels stored row-major.
"""

from typing import Dict

from ..core.errors import InvalidDimensionsError
from ..core.palette import Palette
from ..core.pixel_data import PixelData
from .surface import PixelSink, Surface

# Each bitmap image is comprised of 8x8 tiles
TILE_SIZE = 8


def calculate_height(pixels: PixelData, width: int) -> int:
    """
    Derive image height from the pixel data length, depth, and width.

    Args:
        pixels: Pixel data
        width: Width in pixels

    Returns:
        Height in pixels
    """
    return (len(pixels.values) // width) * pixels.depth.pixels_per_byte


class TiledImage(Surface):
    """
    An image in the ROM built from pixel data and palette data.

    Palette index 0 is transparent. Tiles are extracted on demand; plain
    tiles are cached, mirrored ones are created fresh on each call.
    """

    def __init__(
        self,
        pixels: PixelData,
        palette: Palette,
        width: int,
        height: int | None = None,
    ):
        """
        Args:
            pixels: Pixel data
            palette: Color data
            width: Width in pixels
            height: Height in pixels (default: derived from the pixel data)

        Raises:
            InvalidDimensionsError: If width or height is not a positive multiple of 8
            PixelIndexError: If the pixel data is shorter than the image
            ColorIndexError: If a pixel refers to a color the palette lacks
        """
        if width <= 0:
            raise InvalidDimensionsError(width, height or 0)
        if not height:
            height = calculate_height(pixels, width)
        if width % TILE_SIZE != 0 or height % TILE_SIZE != 0 or height <= 0:
            raise InvalidDimensionsError(width, height)

        super().__init__(width, height)
        self.pixel_data = pixels
        self.palette = palette
        self._tiles: Dict[int, Surface] = {}

        self._build()

    @property
    def tiles_per_row(self) -> int:
        return self.width // TILE_SIZE

    @property
    def tile_count(self) -> int:
        return self.tiles_per_row * (self.height // TILE_SIZE)

    def _build(self):
        index = 0
        # Tile rows, then tile columns, then the 8x8 pixels inside each tile
        for y_tile in range(self.height // TILE_SIZE):
            for x_tile in range(self.tiles_per_row):
                for y_pixel in range(TILE_SIZE):
                    for x_pixel in range(TILE_SIZE):
                        color_index = self.pixel_data.pixel(index)
                        red, green, blue = self.palette.color(color_index)
                        alpha = 0 if color_index == 0 else 255
                        self.set_pixel(
                            x_tile * TILE_SIZE + x_pixel,
                            y_tile * TILE_SIZE + y_pixel,
                            (red, green, blue, alpha),
                        )
                        index += 1

    def tile_origin(self, tile_id: int) -> tuple[int, int]:
        """Top-left pixel of a tile."""
        x = (tile_id % self.tiles_per_row) * TILE_SIZE
        y = (tile_id // self.tiles_per_row) * TILE_SIZE
        return (x, y)

    def tile(self, tile_id: int, flip_x: bool = False, flip_y: bool = False) -> Surface:
        """
        Get an 8x8 tile of this image by tile id (as used by tilesets and maps).

        Args:
            tile_id: Index of tile
            flip_x: Mirror horizontally (reverse column order)
            flip_y: Mirror vertically (reverse row order)

        Returns:
            8x8 surface; the cached tile when no flip is requested
        """
        if tile_id not in self._tiles:
            if tile_id < 0 or tile_id >= self.tile_count:
                raise IndexError(f"Tile {tile_id} outside image ({self.tile_count} tiles)")
            x, y = self.tile_origin(tile_id)
            self._tiles[tile_id] = self.crop(x, y, TILE_SIZE, TILE_SIZE)

        tile = self._tiles[tile_id]
        if flip_x:
            tile = tile.flipped_x()
        if flip_y:
            tile = tile.flipped_y()
        return tile

    def draw_tile_to(
        self,
        sink: PixelSink,
        tile_id: int,
        x: int,
        y: int,
        flip_x: bool = False,
        flip_y: bool = False,
    ):
        """Draw one (optionally mirrored) tile into an external sink at (x, y)."""
        self.tile(tile_id, flip_x, flip_y).draw_to(sink, x, y)
