"""Core data structures: packed colors and pixel surfaces."""

from block_glyphs.core.color import parse_color, rgb_distance, rgb_move
from block_glyphs.core.surface import PixelBuffer, Surface
from block_glyphs.core.transparency import is_fully_opaque, is_fully_transparent

__all__ = [
    "PixelBuffer",
    "Surface",
    "is_fully_opaque",
    "is_fully_transparent",
    "parse_color",
    "rgb_distance",
    "rgb_move",
]
