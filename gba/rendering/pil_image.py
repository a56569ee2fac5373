"""
GBA ROM Toolkit - PIL Image Adapter

Connects surfaces and tiled images to Pillow for PNG output.
"""

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from .surface import RGBAColor, Surface, TRANSPARENT


class PILSink:
    """PixelSink backed by a Pillow RGBA image."""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            raise ValueError(f"PILSink needs an RGBA image, got mode {image.mode}")
        self.image = image
        self._pixels = image.load()
        assert self._pixels is not None

    @classmethod
    def new(cls, width: int, height: int) -> "PILSink":
        """Create a sink over a new, fully transparent image."""
        return cls(Image.new("RGBA", (width, height), TRANSPARENT))

    def set_pixel(self, x: int, y: int, color: RGBAColor) -> None:
        self._pixels[x, y] = tuple(color)


def to_pil_image(surface: Surface, scale: int = 1) -> Image.Image:
    """
    Render a surface to a Pillow RGBA image.

    Args:
        surface: Surface or TiledImage to render
        scale: Integer scaling factor (nearest neighbor)

    Returns:
        PIL Image object
    """
    img = Image.new("RGBA", surface.size)
    img.putdata(surface.pixels)

    if scale != 1:
        img = img.resize(
            (surface.width * scale, surface.height * scale), Image.Resampling.NEAREST
        )
    return img
