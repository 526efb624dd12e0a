"""Render a pixel buffer to terminal escape sequences."""

from block_glyphs.core.color import alpha, split_rgb
from block_glyphs.core.surface import PixelBuffer

UPPER_HALF = "▀"  # FG = top pixel, BG = bottom pixel
LOWER_HALF = "▄"  # FG = bottom pixel, BG = top pixel

RESET = "\x1b[0m"
DEFAULT_BG = "\x1b[49m"


class TerminalRenderer:
    """
    Render a PixelBuffer with half-block characters and 24-bit color.

    Each text row shows two pixel rows. Pixels with alpha below
    ``alpha_threshold`` show the terminal's default background. SGR codes
    are only emitted when a color changes.
    """

    def __init__(self, scale_x: int = 1, alpha_threshold: int = 128, reset_at_end: bool = True):
        if scale_x < 1:
            raise ValueError(f"scale_x must be at least 1, got {scale_x}")
        self.scale_x = scale_x
        self.alpha_threshold = alpha_threshold
        self.reset_at_end = reset_at_end

    def _visible(self, pixel: int | None) -> bool:
        return pixel is not None and alpha(pixel) >= self.alpha_threshold

    def render(self, buffer: PixelBuffer) -> str:
        """Render buffer to ANSI string."""
        rows = list(buffer.rows())
        lines: list[str] = []

        for y in range(0, len(rows), 2):
            top_row = rows[y]
            bottom_row = rows[y + 1] if y + 1 < len(rows) else None
            line_parts: list[str] = []
            last_fg: tuple[int, int, int] | None = None
            last_bg: tuple[int, int, int] | None = None
            bg_is_default = True

            for x, top in enumerate(top_row):
                bottom = bottom_row[x] if bottom_row is not None else None
                show_top = self._visible(top)
                show_bottom = self._visible(bottom)

                if show_top and show_bottom:
                    char, fg, bg = UPPER_HALF, split_rgb(top), split_rgb(bottom)
                elif show_top:
                    char, fg, bg = UPPER_HALF, split_rgb(top), None
                elif show_bottom:
                    char, fg, bg = LOWER_HALF, split_rgb(bottom), None
                else:
                    char, fg, bg = " ", None, None

                if fg is not None and fg != last_fg:
                    line_parts.append(f"\x1b[38;2;{fg[0]};{fg[1]};{fg[2]}m")
                    last_fg = fg

                if bg is None:
                    if not bg_is_default:
                        line_parts.append(DEFAULT_BG)
                        bg_is_default = True
                        last_bg = None
                elif bg != last_bg:
                    line_parts.append(f"\x1b[48;2;{bg[0]};{bg[1]};{bg[2]}m")
                    last_bg = bg
                    bg_is_default = False

                line_parts.append(char * self.scale_x)

            # Reset at end of each line to prevent color bleeding
            if last_fg is not None or not bg_is_default:
                line_parts.append(RESET)

            lines.append("".join(line_parts))

        result = "\n".join(lines)

        if self.reset_at_end:
            result += RESET

        return result
