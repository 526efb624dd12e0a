"""Surfaces - rectangular pixel targets for glyph rasterization."""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, runtime_checkable

from block_glyphs.core.color import TRANSPARENT_ALPHA, alpha


@runtime_checkable
class Surface(Protocol):
    """
    The minimal capability a rasterizer needs from a drawing target.

    Implementations own their pixels; callers pass a surface in for the
    duration of a single call and nothing keeps a reference afterwards.
    """

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def fill_rect(self, x: int, y: int, w: int, h: int, argb: int) -> None:
        """Fill a rectangle with a packed ARGB color. Empty rectangles are no-ops."""
        ...

    def alphas(self) -> Iterable[int]:
        """Yield the alpha value of every pixel in row-major order."""
        ...


class PixelBuffer:
    """
    An in-memory grid of packed ARGB pixels.

    Pixels are stored row-major. A fresh buffer is fully transparent
    black unless a fill color is given.
    """

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int, fill: int = TRANSPARENT_ALPHA):
        if width < 0 or height < 0:
            raise ValueError(f"Buffer size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: list[int] = [fill] * (width * height)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> PixelBuffer:
        """Build a buffer from a list of equal-length pixel rows."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same width")
        buffer = cls(width, height)
        buffer._pixels = [pixel for row in rows for pixel in row]
        return buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        if x < 0 or x >= self._width:
            raise IndexError(f"x={x} out of bounds (width={self._width})")
        if y < 0 or y >= self._height:
            raise IndexError(f"y={y} out of bounds (height={self._height})")
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> int:
        """Get the packed ARGB pixel at (x, y)."""
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, argb: int) -> None:
        """Set the packed ARGB pixel at (x, y)."""
        self._pixels[self._index(x, y)] = argb

    def __getitem__(self, pos: tuple[int, int]) -> int:
        """Get pixel using indexing: buffer[x, y]."""
        x, y = pos
        return self.get_pixel(x, y)

    def __setitem__(self, pos: tuple[int, int], argb: int) -> None:
        """Set pixel using indexing: buffer[x, y] = argb."""
        x, y = pos
        self.set_pixel(x, y, argb)

    def fill_rect(self, x: int, y: int, w: int, h: int, argb: int) -> None:
        """Fill a rectangle, clipped to the buffer bounds."""
        x0 = max(x, 0)
        y0 = max(y, 0)
        x1 = min(x + w, self._width)
        y1 = min(y + h, self._height)
        if x0 >= x1 or y0 >= y1:
            return
        span = [argb] * (x1 - x0)
        for row in range(y0, y1):
            start = row * self._width
            self._pixels[start + x0:start + x1] = span

    def fill(self, argb: int) -> None:
        """Fill the whole buffer with one color."""
        self._pixels = [argb] * (self._width * self._height)

    def alphas(self) -> Iterator[int]:
        return (alpha(pixel) for pixel in self._pixels)

    def rows(self) -> Iterator[list[int]]:
        """Iterate over rows of pixels, top to bottom."""
        for y in range(self._height):
            start = y * self._width
            yield self._pixels[start:start + self._width]

    def copy(self) -> PixelBuffer:
        """Create an independent copy of this buffer."""
        buffer = PixelBuffer(self._width, self._height)
        buffer._pixels = list(self._pixels)
        return buffer

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"
