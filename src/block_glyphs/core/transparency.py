"""Whole-surface alpha checks."""

from block_glyphs.core.color import OPAQUE_ALPHA, TRANSPARENT_ALPHA
from block_glyphs.core.surface import Surface


def is_fully_transparent(surface: Surface) -> bool:
    """
    Check that no pixel of a surface has a non-zero alpha value.

    A surface with no pixels counts as fully transparent.
    """
    assert surface is not None
    return all(a == TRANSPARENT_ALPHA for a in surface.alphas())


def is_fully_opaque(surface: Surface) -> bool:
    """
    Check that every pixel of a surface has full alpha.

    A surface with no pixels also counts as fully opaque, so an empty
    surface is reported as both transparent and opaque.
    """
    assert surface is not None
    return all(a == OPAQUE_ALPHA for a in surface.alphas())
