"""Paint block-drawing glyphs into a cell surface."""

from __future__ import annotations

import logging

from block_glyphs.core.color import OPAQUE_ALPHA, with_alpha
from block_glyphs.core.surface import Surface
from block_glyphs.glyphs.table import (
    GLYPHS,
    CellGeometry,
    Fill,
    GlyphSpec,
    Role,
)

logger = logging.getLogger(__name__)

GlyphLike = int | str


def _code_point(glyph: GlyphLike) -> int:
    """Accept either an integer code point or a single character."""
    if isinstance(glyph, str):
        if len(glyph) != 1:
            raise ValueError(f"Expected a single character, got {glyph!r}")
        return ord(glyph)
    return glyph


def can_draw(glyph: GlyphLike) -> bool:
    """Check if draw_glyph() can rasterize a character."""
    return _code_point(glyph) in GLYPHS


def supported_code_points() -> tuple[int, ...]:
    """All drawable code points in ascending order."""
    return tuple(GLYPHS)


def glyph_spec(glyph: GlyphLike) -> GlyphSpec | None:
    """Look up the table entry for a glyph, or None if unsupported."""
    return GLYPHS.get(_code_point(glyph))


def glyph_fills(glyph: GlyphLike) -> tuple[Fill, ...]:
    """The ordered fill sequence of a glyph; empty if unsupported."""
    spec = glyph_spec(glyph)
    return spec.fills if spec else ()


def resolve_fills(
    glyph: GlyphLike, width: int, height: int
) -> list[tuple[int, int, int, int, Role]]:
    """
    Resolve a glyph's fills to pixel rectangles for a given cell size.

    Returns:
        ``(x, y, w, h, role)`` tuples in paint order. Rectangles may be
        empty when the cell is too small to divide.
    """
    geometry = CellGeometry(width, height)
    return [
        (*geometry.resolve(fill), fill.role)
        for fill in glyph_fills(glyph)
    ]


def draw_glyph(glyph: GlyphLike, fore: int, back: int, surface: Surface) -> None:
    """
    Draw a block-drawing character onto a surface.

    The glyph is painted with fully opaque colors; any alpha bits in
    ``fore`` and ``back`` are ignored. Characters that can_draw() rejects
    leave the surface untouched.

    Args:
        glyph: Code point or single character to draw
        fore: Foreground color (packed RGB)
        back: Background color (packed RGB)
        surface: Target surface, modified in place
    """
    assert surface is not None

    spec = glyph_spec(glyph)
    if spec is None:
        logger.debug("No rasterization for %r, surface left unchanged", glyph)
        return

    colors = {
        Role.FORE: with_alpha(fore, OPAQUE_ALPHA),
        Role.BACK: with_alpha(back, OPAQUE_ALPHA),
    }
    geometry = CellGeometry(surface.width, surface.height)

    for fill in spec.fills:
        x, y, w, h = geometry.resolve(fill)
        if w <= 0 or h <= 0:
            continue
        surface.fill_rect(x, y, w, h, colors[fill.role])
