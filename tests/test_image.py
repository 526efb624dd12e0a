"""Tests for the Pillow-backed ImageSurface."""

import pytest

Image = pytest.importorskip("PIL.Image")

from block_glyphs.core.surface import PixelBuffer, Surface
from block_glyphs.core.transparency import is_fully_opaque, is_fully_transparent
from block_glyphs.glyphs import draw_glyph, supported_code_points
from block_glyphs.image import ImageSurface


class TestImageSurface:
    """Tests for ImageSurface."""

    def test_new_is_transparent(self) -> None:
        surface = ImageSurface.new(6, 9)
        assert surface.width == 6
        assert surface.height == 9
        assert surface.has_alpha
        assert is_fully_transparent(surface) is True
        assert is_fully_opaque(surface) is False

    def test_rgb_image_is_opaque(self) -> None:
        surface = ImageSurface(Image.new("RGB", (4, 4)))
        assert surface.has_alpha is False
        assert is_fully_opaque(surface) is True
        assert is_fully_transparent(surface) is False

    def test_empty_image(self) -> None:
        surface = ImageSurface.new(0, 0)
        assert is_fully_opaque(surface) is True
        assert is_fully_transparent(surface) is True

    def test_unsupported_mode(self) -> None:
        with pytest.raises(ValueError):
            ImageSurface(Image.new("L", (4, 4)))

    def test_satisfies_surface_protocol(self) -> None:
        assert isinstance(ImageSurface.new(1, 1), Surface)

    def test_fill_rect(self) -> None:
        surface = ImageSurface.new(4, 4)
        surface.fill_rect(1, 2, 2, 2, 0xFF102030)
        assert surface.image.getpixel((1, 2)) == (0x10, 0x20, 0x30, 0xFF)
        assert surface.image.getpixel((2, 3)) == (0x10, 0x20, 0x30, 0xFF)
        assert surface.image.getpixel((0, 0)) == (0, 0, 0, 0)
        assert surface.image.getpixel((3, 3)) == (0, 0, 0, 0)

    def test_fill_rect_rgb_image(self) -> None:
        surface = ImageSurface(Image.new("RGB", (2, 2)))
        surface.fill_rect(0, 0, 2, 1, 0xFF00FF00)
        assert surface.image.getpixel((1, 0)) == (0, 255, 0)
        assert surface.image.getpixel((1, 1)) == (0, 0, 0)

    def test_fill_rect_empty(self) -> None:
        surface = ImageSurface.new(3, 3)
        surface.fill_rect(1, 1, 0, 2, 0xFFFFFFFF)
        assert is_fully_transparent(surface)

    def test_to_pixel_buffer(self) -> None:
        surface = ImageSurface.new(2, 1)
        surface.fill_rect(1, 0, 1, 1, 0xFFABCDEF)
        assert surface.to_pixel_buffer() == PixelBuffer.from_rows([[0, 0xFFABCDEF]])

    @pytest.mark.parametrize("code_point", supported_code_points(), ids=hex)
    def test_matches_pixel_buffer(self, code_point: int) -> None:
        surface = ImageSurface.new(9, 14)
        buffer = PixelBuffer(9, 14)
        draw_glyph(code_point, 0xC0FFEE, 0x202020, surface)
        draw_glyph(code_point, 0xC0FFEE, 0x202020, buffer)
        assert surface.to_pixel_buffer() == buffer

    def test_unsupported_glyph_leaves_image(self) -> None:
        surface = ImageSurface.new(5, 5)
        draw_glyph("A", 0xFFFFFF, 0x000000, surface)
        assert is_fully_transparent(surface)
