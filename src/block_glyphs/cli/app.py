"""Typer CLI application."""

from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from block_glyphs.core.color import parse_color, rgb_distance, rgb_move, to_hex
from block_glyphs.core.surface import PixelBuffer
from block_glyphs.core.transparency import is_fully_opaque, is_fully_transparent
from block_glyphs.glyphs.rasterizer import (
    draw_glyph,
    glyph_spec,
    resolve_fills,
    supported_code_points,
)
from block_glyphs.glyphs.table import GlyphKind, sextant_mask
from block_glyphs.render.terminal import TerminalRenderer


def parse_code_point(text: str) -> int:
    """Parse ``U+1FB00``, ``0x1FB00``, a decimal number or a single character."""
    if len(text) == 1:
        return ord(text)
    lowered = text.strip().lower()
    try:
        if lowered.startswith("u+"):
            return int(lowered[2:], 16)
        if lowered.startswith("0x"):
            return int(lowered[2:], 16)
        return int(lowered, 10)
    except ValueError:
        raise ValueError(f"Cannot parse code point: {text!r}") from None


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install block-glyphs[cli]")

    app = typer.Typer(
        name="block-glyphs",
        help="Rasterize block-drawing and sextant glyphs into pixel cells.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def _code_or_exit(text: str) -> int:
        try:
            code_point = parse_code_point(text)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)
        if glyph_spec(code_point) is None:
            console.print(f"[red]No rasterization for U+{code_point:04X}[/]")
            raise typer.Exit(1)
        return code_point

    def _color_or_exit(text: str) -> int:
        try:
            return parse_color(text)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

    @app.command("list")
    def list_glyphs(
        kind: Annotated[
            Optional[GlyphKind],
            typer.Option("--kind", "-k", help="Only show one glyph family"),
        ] = None,
    ) -> None:
        """List every glyph that can be rasterized."""
        table = Table(title="Drawable glyphs")
        table.add_column("Code")
        table.add_column("Char")
        table.add_column("Name")
        table.add_column("Mask")

        for code_point in supported_code_points():
            spec = glyph_spec(code_point)
            if kind is not None and spec.kind is not kind:
                continue
            mask = f"{sextant_mask(code_point):06b}" if spec.kind is GlyphKind.SEXTANT else ""
            table.add_row(f"U+{code_point:04X}", spec.char, spec.name, mask)

        console.print(table)

    @app.command()
    def draw(
        code: Annotated[str, typer.Argument(help="Glyph: U+1FB00, 0x2580, decimal or the character")],
        fg: Annotated[str, typer.Option("--fg", help="Foreground color")] = "white",
        bg: Annotated[str, typer.Option("--bg", help="Background color")] = "black",
        width: Annotated[int, typer.Option("--width", "-w", min=0, help="Cell width in pixels")] = 10,
        height: Annotated[int, typer.Option("--height", "-H", min=0, help="Cell height in pixels")] = 12,
        scale: Annotated[int, typer.Option("--scale", "-s", min=1, help="Horizontal magnification")] = 2,
    ) -> None:
        """Rasterize one glyph and preview it in the terminal."""
        code_point = _code_or_exit(code)
        buffer = PixelBuffer(width, height)
        draw_glyph(code_point, _color_or_exit(fg), _color_or_exit(bg), buffer)

        spec = glyph_spec(code_point)
        console.print(f"[bold]U+{code_point:04X}[/] {spec.name} ({width}x{height})")
        print(TerminalRenderer(scale_x=scale).render(buffer))

    @app.command()
    def inspect(
        code: Annotated[str, typer.Argument(help="Glyph: U+1FB00, 0x2580, decimal or the character")],
        width: Annotated[int, typer.Option("--width", "-w", min=0, help="Cell width in pixels")] = 10,
        height: Annotated[int, typer.Option("--height", "-H", min=0, help="Cell height in pixels")] = 12,
    ) -> None:
        """Show the fill rectangles a glyph resolves to for a cell size."""
        code_point = _code_or_exit(code)

        table = Table(title=f"U+{code_point:04X} at {width}x{height}")
        for column in ("#", "Role", "X", "Y", "W", "H"):
            table.add_column(column)
        for i, (x, y, w, h, role) in enumerate(resolve_fills(code_point, width, height), 1):
            style = "dim" if w <= 0 or h <= 0 else None
            table.add_row(str(i), role.value, str(x), str(y), str(w), str(h), style=style)
        console.print(table)

        buffer = PixelBuffer(width, height)
        draw_glyph(code_point, 0xFFFFFF, 0x000000, buffer)
        console.print(f"Opaque: {is_fully_opaque(buffer)}  Transparent: {is_fully_transparent(buffer)}")

    @app.command()
    def distance(
        first: Annotated[str, typer.Argument(help="First color")],
        second: Annotated[str, typer.Argument(help="Second color")],
    ) -> None:
        """Print the RGB distance between two colors (0-441)."""
        console.print(rgb_distance(_color_or_exit(first), _color_or_exit(second)))

    @app.command()
    def blend(
        start: Annotated[str, typer.Argument(help="Starting color")],
        end: Annotated[str, typer.Argument(help="Ending color")],
        fraction: Annotated[float, typer.Argument(help="0.0 (start) to 1.0 (end)")],
    ) -> None:
        """Print the color a fraction of the way from START to END."""
        console.print(to_hex(rgb_move(_color_or_exit(start), _color_or_exit(end), fraction)))

    return app
