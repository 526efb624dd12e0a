"""Tests for the typer command line interface."""

import pytest

pytest.importorskip("typer")
pytest.importorskip("rich")

from typer.testing import CliRunner

from block_glyphs.cli.app import create_app, parse_code_point
from block_glyphs.render.terminal import UPPER_HALF

runner = CliRunner()


@pytest.fixture(scope="module")
def app():
    return create_app()


class TestParseCodePoint:
    """Tests for parse_code_point."""

    @pytest.mark.parametrize("text,expected", [
        ("U+1FB00", 0x1FB00),
        ("u+2580", 0x2580),
        ("0x258c", 0x258C),
        ("9608", 0x2588),
        ("▐", 0x2590),
        (" ", 0x20),
    ])
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_code_point(text) == expected

    @pytest.mark.parametrize("text", ["U+XYZ", "0x", "twelve"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_code_point(text)


class TestCommands:
    """Tests for CLI commands."""

    def test_list(self, app) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "U+1FB00" in result.output
        assert "U+1FB3B" in result.output
        assert "U+2580" in result.output

    def test_list_by_kind(self, app) -> None:
        result = runner.invoke(app, ["list", "--kind", "half"])
        assert result.exit_code == 0
        assert "U+258C" in result.output
        assert "U+1FB00" not in result.output

    def test_draw(self, app) -> None:
        result = runner.invoke(app, ["draw", "U+2580", "--fg", "red", "--bg", "blue"])
        assert result.exit_code == 0
        assert "Upper Half Block" in result.output
        assert UPPER_HALF in result.output
        assert "\x1b[38;2;255;0;0m" in result.output

    def test_draw_custom_size(self, app) -> None:
        result = runner.invoke(app, ["draw", "0x1FB00", "-w", "4", "-H", "6", "-s", "1"])
        assert result.exit_code == 0
        assert "(4x6)" in result.output

    def test_draw_space_character(self, app) -> None:
        result = runner.invoke(app, ["draw", " "])
        assert result.exit_code == 0
        assert "Space" in result.output

    def test_draw_unsupported(self, app) -> None:
        result = runner.invoke(app, ["draw", "A"])
        assert result.exit_code == 1
        assert "No rasterization for U+0041" in result.output

    def test_draw_bad_color(self, app) -> None:
        result = runner.invoke(app, ["draw", "U+2588", "--fg", "not-a-color"])
        assert result.exit_code == 1
        assert "Cannot parse color" in result.output

    def test_inspect(self, app) -> None:
        result = runner.invoke(app, ["inspect", "U+1FB15"])
        assert result.exit_code == 0
        assert "fore" in result.output
        assert "back" in result.output
        assert "Opaque: True" in result.output

    def test_distance(self, app) -> None:
        result = runner.invoke(app, ["distance", "black", "white"])
        assert result.exit_code == 0
        assert result.output.strip() == "441"

    def test_blend(self, app) -> None:
        result = runner.invoke(app, ["blend", "#000000", "#FFFFFF", "0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "#7F7F7F"

    def test_blend_endpoint(self, app) -> None:
        result = runner.invoke(app, ["blend", "red", "blue", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "#0000FF"
