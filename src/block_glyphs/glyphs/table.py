"""Fill table for the block-drawing glyphs the rasterizer understands.

Every glyph is a fixed sequence of solid rectangles painted in order;
later fills overwrite earlier ones. Rectangles are expressed on the
cell's grid lines rather than in pixels so the same table serves any
cell size:

    columns:  0 .. width // 2 .. width
    halves:   0 .. height // 2 .. height
    thirds:   0 .. height // 3 .. 2 * (height // 3) .. height

The last column and row absorb the integer-division remainder.

Sextants (U+1FB00..U+1FB3B) split the cell into 2 columns by 3 rows.
Cells are numbered 1-6 left to right, top to bottom, and a glyph's
name lists its foreground cells ("Block Sextant-135"). The two masks
for a whole left or right column are skipped by Unicode because they
are already encoded as U+258C and U+2590.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Role(Enum):
    """Which of the two glyph colors a fill uses."""
    FORE = "fore"
    BACK = "back"


class RowGrid(Enum):
    """Horizontal grid lines a fill's row span refers to."""
    HALVES = 2
    THIRDS = 3


class GlyphKind(Enum):
    """Families of supported glyphs."""
    SPACE = "space"
    HALF_BLOCK = "half"
    FULL_BLOCK = "full"
    SEXTANT = "sextant"


@dataclass(frozen=True, slots=True)
class Fill:
    """
    One colored rectangle of a glyph.

    ``cols`` indexes the column lines (0, 1, 2) and ``rows`` the row
    lines of ``grid``; both are half-open ``(start, end)`` pairs.
    """
    role: Role
    cols: tuple[int, int]
    rows: tuple[int, int]
    grid: RowGrid = RowGrid.THIRDS


@dataclass(frozen=True, slots=True)
class CellGeometry:
    """Grid lines of a width x height cell."""
    width: int
    height: int

    @property
    def half_width(self) -> int:
        return self.width // 2

    @property
    def half_height(self) -> int:
        return self.height // 2

    @property
    def third_height(self) -> int:
        return self.height // 3

    def column_lines(self) -> tuple[int, int, int]:
        return (0, self.half_width, self.width)

    def row_lines(self, grid: RowGrid) -> tuple[int, ...]:
        if grid is RowGrid.HALVES:
            return (0, self.half_height, self.height)
        third = self.third_height
        return (0, third, 2 * third, self.height)

    def resolve(self, fill: Fill) -> tuple[int, int, int, int]:
        """Return the pixel rectangle ``(x, y, w, h)`` covered by a fill."""
        cols = self.column_lines()
        rows = self.row_lines(fill.grid)
        x0, x1 = cols[fill.cols[0]], cols[fill.cols[1]]
        y0, y1 = rows[fill.rows[0]], rows[fill.rows[1]]
        return (x0, y0, x1 - x0, y1 - y0)


@dataclass(frozen=True, slots=True)
class GlyphSpec:
    """A supported glyph: its name, family and fill sequence."""
    code_point: int
    name: str
    kind: GlyphKind
    fills: tuple[Fill, ...]

    @property
    def char(self) -> str:
        return chr(self.code_point)


# Column spans
LEFT = (0, 1)
RIGHT = (1, 2)
WIDE = (0, 2)

# Row spans on the thirds grid
TOP = (0, 1)
MIDDLE = (1, 2)
BOTTOM = (2, 3)
UPPER = (0, 2)   # top two thirds
LOWER = (1, 3)   # bottom two thirds
TALL = (0, 3)

# Row spans on the halves grid
TOP_HALF = (0, 1)
BOTTOM_HALF = (1, 2)
FULL_HALVES = (0, 2)

SEXTANT_FIRST = 0x1FB00
SEXTANT_LAST = 0x1FB3B

SPACE = 0x20
UPPER_HALF_BLOCK = 0x2580
LOWER_HALF_BLOCK = 0x2584
FULL_BLOCK = 0x2588
LEFT_HALF_BLOCK = 0x258C
RIGHT_HALF_BLOCK = 0x2590

# Masks of the whole left (cells 1, 3, 5) and right (2, 4, 6) columns
_LEFT_COLUMN_MASK = 0b010101
_RIGHT_COLUMN_MASK = 0b101010


def _fore(cols: tuple[int, int], rows: tuple[int, int],
          grid: RowGrid = RowGrid.THIRDS) -> Fill:
    return Fill(Role.FORE, cols, rows, grid)


def _back(cols: tuple[int, int], rows: tuple[int, int],
          grid: RowGrid = RowGrid.THIRDS) -> Fill:
    return Fill(Role.BACK, cols, rows, grid)


_FORE_CELL = _fore(WIDE, TALL)
_BACK_CELL = _back(WIDE, TALL)


def sextant_mask(code_point: int) -> int:
    """
    Return the 6-bit cell mask of a sextant code point.

    Bit 0 is the top-left cell, bit 1 top-right, bit 2 middle-left and so
    on down to bit 5 for bottom-right.

    Raises:
        ValueError: If the code point is not a sextant
    """
    if not SEXTANT_FIRST <= code_point <= SEXTANT_LAST:
        raise ValueError(f"U+{code_point:04X} is not a sextant")
    mask = code_point - SEXTANT_FIRST + 1
    if mask >= _LEFT_COLUMN_MASK:
        mask += 1
    if mask >= _RIGHT_COLUMN_MASK:
        mask += 1
    return mask


def sextant_name(code_point: int) -> str:
    """Unicode name of a sextant, e.g. ``Block Sextant-135``."""
    mask = sextant_mask(code_point)
    cells = "".join(str(bit + 1) for bit in range(6) if mask & (1 << bit))
    return f"Block Sextant-{cells}"


_BLOCK_FILLS: dict[int, tuple[str, GlyphKind, tuple[Fill, ...]]] = {
    SPACE: ("Space", GlyphKind.SPACE, (
        _back(WIDE, FULL_HALVES, RowGrid.HALVES),
    )),
    UPPER_HALF_BLOCK: ("Upper Half Block", GlyphKind.HALF_BLOCK, (
        _fore(WIDE, TOP_HALF, RowGrid.HALVES),
        _back(WIDE, BOTTOM_HALF, RowGrid.HALVES),
    )),
    LEFT_HALF_BLOCK: ("Left Half Block", GlyphKind.HALF_BLOCK, (
        _fore(LEFT, FULL_HALVES, RowGrid.HALVES),
        _back(RIGHT, FULL_HALVES, RowGrid.HALVES),
    )),
    RIGHT_HALF_BLOCK: ("Right Half Block", GlyphKind.HALF_BLOCK, (
        _back(LEFT, FULL_HALVES, RowGrid.HALVES),
        _fore(RIGHT, FULL_HALVES, RowGrid.HALVES),
    )),
    LOWER_HALF_BLOCK: ("Lower Half Block", GlyphKind.HALF_BLOCK, (
        _back(WIDE, TOP_HALF, RowGrid.HALVES),
        _fore(WIDE, BOTTOM_HALF, RowGrid.HALVES),
    )),
    FULL_BLOCK: ("Full Block", GlyphKind.FULL_BLOCK, (
        _fore(WIDE, FULL_HALVES, RowGrid.HALVES),
    )),
}

# Mostly-background sextants start from a background cell and paint their
# foreground cells; mostly-foreground ones do the reverse. Adjacent cells
# of the same color are merged into one rectangle where possible.
_SEXTANT_FILLS: dict[int, tuple[Fill, ...]] = {
    0x1FB00: (_BACK_CELL, _fore(LEFT, TOP)),
    0x1FB01: (_BACK_CELL, _fore(RIGHT, TOP)),
    0x1FB02: (_BACK_CELL, _fore(WIDE, TOP)),
    0x1FB03: (_BACK_CELL, _fore(LEFT, MIDDLE)),
    0x1FB04: (_BACK_CELL, _fore(LEFT, UPPER)),
    0x1FB05: (_BACK_CELL, _fore(RIGHT, TOP), _fore(LEFT, MIDDLE)),
    0x1FB06: (_BACK_CELL, _fore(WIDE, TOP), _fore(LEFT, MIDDLE)),
    0x1FB07: (_BACK_CELL, _fore(RIGHT, MIDDLE)),
    0x1FB08: (_BACK_CELL, _fore(LEFT, TOP), _fore(RIGHT, MIDDLE)),
    0x1FB09: (_BACK_CELL, _fore(RIGHT, UPPER)),
    0x1FB0A: (_BACK_CELL, _fore(WIDE, TOP), _fore(RIGHT, MIDDLE)),
    0x1FB0B: (_BACK_CELL, _fore(WIDE, MIDDLE)),
    0x1FB0C: (_BACK_CELL, _fore(LEFT, TOP), _fore(WIDE, MIDDLE)),
    0x1FB0D: (_BACK_CELL, _fore(RIGHT, TOP), _fore(WIDE, MIDDLE)),
    # Two full-width bands, no base fill
    0x1FB0E: (_fore(WIDE, UPPER), _back(WIDE, BOTTOM)),
    0x1FB0F: (_BACK_CELL, _fore(LEFT, BOTTOM)),
    0x1FB10: (_BACK_CELL, _fore(LEFT, TOP), _fore(LEFT, BOTTOM)),
    0x1FB11: (_BACK_CELL, _fore(RIGHT, TOP), _fore(LEFT, BOTTOM)),
    0x1FB12: (_BACK_CELL, _fore(WIDE, TOP), _fore(LEFT, BOTTOM)),
    0x1FB13: (_BACK_CELL, _fore(LEFT, LOWER)),
    0x1FB14: (_BACK_CELL, _fore(RIGHT, TOP), _fore(LEFT, LOWER)),
    0x1FB15: (_FORE_CELL, _back(RIGHT, LOWER)),
    0x1FB16: (_BACK_CELL, _fore(RIGHT, MIDDLE), _fore(LEFT, BOTTOM)),
    0x1FB17: (_BACK_CELL, _fore(LEFT, TOP), _fore(RIGHT, MIDDLE),
              _fore(LEFT, BOTTOM)),
    0x1FB18: (_BACK_CELL, _fore(RIGHT, UPPER), _fore(LEFT, BOTTOM)),
    0x1FB19: (_FORE_CELL, _back(LEFT, MIDDLE), _back(RIGHT, BOTTOM)),
    0x1FB1A: (_BACK_CELL, _fore(WIDE, MIDDLE), _fore(LEFT, BOTTOM)),
    0x1FB1B: (_FORE_CELL, _back(RIGHT, TOP), _back(RIGHT, BOTTOM)),
    0x1FB1C: (_FORE_CELL, _back(LEFT, TOP), _back(RIGHT, BOTTOM)),
    0x1FB1D: (_FORE_CELL, _back(RIGHT, BOTTOM)),
    0x1FB1E: (_BACK_CELL, _fore(RIGHT, BOTTOM)),
    0x1FB1F: (_BACK_CELL, _fore(LEFT, TOP), _fore(RIGHT, BOTTOM)),
    0x1FB20: (_BACK_CELL, _fore(RIGHT, TOP), _fore(RIGHT, BOTTOM)),
    0x1FB21: (_BACK_CELL, _fore(WIDE, TOP), _fore(RIGHT, BOTTOM)),
    0x1FB22: (_BACK_CELL, _fore(LEFT, MIDDLE), _fore(RIGHT, BOTTOM)),
    0x1FB23: (_BACK_CELL, _fore(LEFT, UPPER), _fore(RIGHT, BOTTOM)),
    0x1FB24: (_BACK_CELL, _fore(RIGHT, TOP), _fore(LEFT, MIDDLE),
              _fore(RIGHT, BOTTOM)),
    0x1FB25: (_FORE_CELL, _back(RIGHT, MIDDLE), _back(LEFT, BOTTOM)),
    0x1FB26: (_BACK_CELL, _fore(RIGHT, LOWER)),
    0x1FB27: (_BACK_CELL, _fore(LEFT, TOP), _fore(RIGHT, LOWER)),
    0x1FB28: (_FORE_CELL, _back(LEFT, MIDDLE), _back(LEFT, BOTTOM)),
    0x1FB29: (_BACK_CELL, _fore(WIDE, MIDDLE), _fore(RIGHT, BOTTOM)),
    0x1FB2A: (_FORE_CELL, _back(RIGHT, TOP), _back(LEFT, BOTTOM)),
    0x1FB2B: (_FORE_CELL, _back(LEFT, TOP), _back(LEFT, BOTTOM)),
    0x1FB2C: (_FORE_CELL, _back(LEFT, BOTTOM)),
    0x1FB2D: (_BACK_CELL, _fore(WIDE, BOTTOM)),
    0x1FB2E: (_BACK_CELL, _fore(LEFT, TOP), _fore(WIDE, BOTTOM)),
    0x1FB2F: (_BACK_CELL, _fore(RIGHT, TOP), _fore(WIDE, BOTTOM)),
    0x1FB30: (_BACK_CELL, _fore(WIDE, TOP), _fore(WIDE, BOTTOM)),
    0x1FB31: (_BACK_CELL, _fore(LEFT, MIDDLE), _fore(WIDE, BOTTOM)),
    0x1FB32: (_FORE_CELL, _back(RIGHT, UPPER)),
    0x1FB33: (_FORE_CELL, _back(LEFT, TOP), _back(RIGHT, MIDDLE)),
    0x1FB34: (_FORE_CELL, _back(RIGHT, MIDDLE)),
    0x1FB35: (_FORE_CELL, _back(WIDE, TOP), _back(LEFT, MIDDLE)),
    0x1FB36: (_FORE_CELL, _back(RIGHT, TOP), _back(LEFT, MIDDLE)),
    0x1FB37: (_FORE_CELL, _back(LEFT, UPPER)),
    0x1FB38: (_FORE_CELL, _back(LEFT, MIDDLE)),
    0x1FB39: (_FORE_CELL, _back(WIDE, TOP)),
    0x1FB3A: (_FORE_CELL, _back(RIGHT, TOP)),
    0x1FB3B: (_FORE_CELL, _back(LEFT, TOP)),
}


def _build_table() -> Mapping[int, GlyphSpec]:
    table: dict[int, GlyphSpec] = {}
    for code_point, (name, kind, fills) in _BLOCK_FILLS.items():
        table[code_point] = GlyphSpec(code_point, name, kind, fills)
    for code_point, fills in _SEXTANT_FILLS.items():
        table[code_point] = GlyphSpec(
            code_point, sextant_name(code_point), GlyphKind.SEXTANT, fills
        )
    return MappingProxyType(dict(sorted(table.items())))


GLYPHS: Mapping[int, GlyphSpec] = _build_table()
