"""Shared fixtures for rasterizer and color tests."""

import pytest

from block_glyphs.core.surface import PixelBuffer

# Cell sizes: evenly divisible, remainder in the last row, odd everywhere
CELL_SIZES = [(12, 12), (10, 12), (7, 11), (9, 20)]


@pytest.fixture
def cell() -> PixelBuffer:
    """A fresh, fully transparent 10x12 cell."""
    return PixelBuffer(10, 12)


@pytest.fixture
def patterned_cell() -> PixelBuffer:
    """A 10x12 cell where every pixel has a distinct value."""
    rows = [[(y << 8) | x | (0x80 << 24) for x in range(10)] for y in range(12)]
    return PixelBuffer.from_rows(rows)


@pytest.fixture(params=CELL_SIZES, ids=lambda size: f"{size[0]}x{size[1]}")
def cell_size(request: pytest.FixtureRequest) -> tuple[int, int]:
    return request.param
