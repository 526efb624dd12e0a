"""Block-drawing glyph classification and rasterization."""

from block_glyphs.glyphs.rasterizer import (
    can_draw,
    draw_glyph,
    glyph_fills,
    glyph_spec,
    resolve_fills,
    supported_code_points,
)
from block_glyphs.glyphs.table import GLYPHS, GlyphKind, Role, sextant_mask

__all__ = [
    "GLYPHS",
    "GlyphKind",
    "Role",
    "can_draw",
    "draw_glyph",
    "glyph_fills",
    "glyph_spec",
    "resolve_fills",
    "sextant_mask",
    "supported_code_points",
]
