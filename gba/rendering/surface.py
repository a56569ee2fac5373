"""
GBA ROM Toolkit - Pixel Surfaces

A minimal RGBA pixel grid and the sink interface image builders draw into.
Rendering-agnostic: toolkits (PIL, etc.) are reached through adapters that
implement PixelSink.
"""

from typing import List, Protocol, Tuple

# Type alias for RGBA color
RGBAColor = Tuple[int, int, int, int]

TRANSPARENT: RGBAColor = (0, 0, 0, 0)


class PixelSink(Protocol):
    """Anything that accepts per-pixel RGBA writes."""

    def set_pixel(self, x: int, y: int, color: RGBAColor) -> None: ...


class Surface:
    """In-memory RGBA image, stored row-major."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels: List[RGBAColor] = [TRANSPARENT] * (width * height)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        return y * self.width + x

    def set_pixel(self, x: int, y: int, color: RGBAColor) -> None:
        self.pixels[self._index(x, y)] = tuple(color)

    def get_pixel(self, x: int, y: int) -> RGBAColor:
        return self.pixels[self._index(x, y)]

    def rows(self) -> List[List[RGBAColor]]:
        """Pixels as a list of rows."""
        return [
            self.pixels[y * self.width : (y + 1) * self.width] for y in range(self.height)
        ]

    def crop(self, x: int, y: int, width: int, height: int) -> "Surface":
        """Copy a rectangular region into a new surface."""
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise IndexError(
                f"Region ({x}, {y}, {width}x{height}) outside {self.width}x{self.height} surface"
            )
        region = Surface(width, height)
        for row in range(height):
            start = (y + row) * self.width + x
            region.pixels[row * width : (row + 1) * width] = self.pixels[start : start + width]
        return region

    def flipped_x(self) -> "Surface":
        """Mirrored copy with column order reversed."""
        flipped = Surface(self.width, self.height)
        for y, row in enumerate(self.rows()):
            flipped.pixels[y * self.width : (y + 1) * self.width] = row[::-1]
        return flipped

    def flipped_y(self) -> "Surface":
        """Mirrored copy with row order reversed."""
        flipped = Surface(self.width, self.height)
        for y, row in enumerate(reversed(self.rows())):
            flipped.pixels[y * self.width : (y + 1) * self.width] = row
        return flipped

    def draw_to(self, sink: PixelSink, x: int = 0, y: int = 0):
        """
        Copy every pixel into another sink.

        Args:
            sink: Destination (modified in-place)
            x: Destination X offset in pixels
            y: Destination Y offset in pixels
        """
        for py in range(self.height):
            for px in range(self.width):
                sink.set_pixel(x + px, y + py, self.pixels[py * self.width + px])
