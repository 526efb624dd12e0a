"""
block-glyphs: pixel cell rasterization for block-drawing glyphs

Paint half blocks, the full block and the 60 Unicode sextants into a
small RGBA pixel cell, plus the color helpers a text-mode renderer needs
around them.

Quick Start:
    >>> import block_glyphs as bg
    >>> cell = bg.PixelBuffer(10, 12)
    >>> bg.draw_glyph(0x1FB00, 0xFFFFFF, 0x000000, cell)
    >>> bg.is_fully_opaque(cell)
    True

Features:
    - Half blocks (▀ ▄ ▌ ▐), full block and sextants U+1FB00..U+1FB3B
    - Declarative fill table, independent of any drawing surface
    - In-memory PixelBuffer and Pillow-backed ImageSurface
    - RGB distance and truncating linear color blend
    - Terminal preview and a small typer CLI
"""

__version__ = "0.1.0"

# Colors
from block_glyphs.core.color import parse_color, rgb_distance, rgb_move

# Surfaces
from block_glyphs.core.surface import PixelBuffer, Surface
from block_glyphs.core.transparency import is_fully_opaque, is_fully_transparent

# Glyphs
from block_glyphs.glyphs.rasterizer import can_draw, draw_glyph

__all__ = [
    # Version
    "__version__",
    # Colors
    "parse_color",
    "rgb_distance",
    "rgb_move",
    # Surfaces
    "PixelBuffer",
    "Surface",
    "is_fully_opaque",
    "is_fully_transparent",
    # Glyphs
    "can_draw",
    "draw_glyph",
]
