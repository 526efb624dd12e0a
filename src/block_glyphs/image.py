"""Pillow-backed surfaces.

Lets the rasterizer and the alpha checks work directly on an in-memory
``PIL.Image.Image``, the way a text renderer keeps a glyph cache of
small cell images.

Example:
    from block_glyphs.image import ImageSurface
    from block_glyphs.glyphs import draw_glyph

    surface = ImageSurface.new(10, 20)
    draw_glyph(0x1FB05, 0xFFFFFF, 0x000000, surface)
    cell = surface.image
"""

from __future__ import annotations

from typing import Iterator

from block_glyphs.core.color import OPAQUE_ALPHA, alpha, split_rgb
from block_glyphs.core.surface import PixelBuffer

try:
    from PIL import Image
    HAS_PIL = True
except ImportError:
    HAS_PIL = False


SUPPORTED_MODES = ("RGB", "RGBA")


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image surfaces. "
            "Install with: uv pip install block-glyphs[image]"
        )


class ImageSurface:
    """
    Surface adapter over a Pillow image.

    Only RGB and RGBA images are accepted. Images without an alpha
    band report every pixel as opaque.
    """

    def __init__(self, image: "Image.Image"):
        _check_pil()
        assert image is not None
        if image.mode not in SUPPORTED_MODES:
            raise ValueError(
                f"Unsupported image mode {image.mode!r}, expected one of {SUPPORTED_MODES}"
            )
        self.image = image

    @classmethod
    def new(cls, width: int, height: int, mode: str = "RGBA") -> ImageSurface:
        """Create a surface over a new, fully transparent (or black) image."""
        _check_pil()
        return cls(Image.new(mode, (width, height)))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def has_alpha(self) -> bool:
        return "A" in self.image.getbands()

    def _pil_color(self, argb: int) -> tuple[int, ...]:
        if self.has_alpha:
            return (*split_rgb(argb), alpha(argb))
        return split_rgb(argb)

    def fill_rect(self, x: int, y: int, w: int, h: int, argb: int) -> None:
        """Paste a solid color box, clipped to the image."""
        x0 = max(x, 0)
        y0 = max(y, 0)
        x1 = min(x + w, self.width)
        y1 = min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.image.paste(self._pil_color(argb), (x0, y0, x1, y1))

    def alphas(self) -> Iterator[int]:
        if not self.has_alpha:
            return iter([OPAQUE_ALPHA] * (self.width * self.height))
        return iter(self.image.getchannel("A").tobytes())

    def to_pixel_buffer(self) -> PixelBuffer:
        """Copy the image into a PixelBuffer of packed ARGB pixels."""
        data = self.image.convert("RGBA").tobytes()
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                i = (y * self.width + x) * 4
                r, g, b, a = data[i:i + 4]
                row.append((a << 24) | (r << 16) | (g << 8) | b)
            rows.append(row)
        if not rows:
            return PixelBuffer(self.width, self.height)
        return PixelBuffer.from_rows(rows)
