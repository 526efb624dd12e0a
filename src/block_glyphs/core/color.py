"""Packed color helpers.

Colors are plain integers: bits [23:16] red, [15:8] green, [7:0] blue,
with an optional alpha channel in bits [31:24].
"""

import math
import re

OPAQUE_ALPHA = 0xFF
TRANSPARENT_ALPHA = 0x00

RGB_MASK = 0xFFFFFF

# Named colors accepted by parse_color()
NAMED_COLORS: dict[str, int] = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "magenta": 0xFF00FF,
    "cyan": 0x00FFFF,
    "yellow": 0xFFFF00,
}

_TRIPLE_PATTERN = re.compile(r'^(\d+)[,\s]+(\d+)[,\s]+(\d+)$')


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def split_rgb(color: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) channels of a packed color."""
    return red(color), green(color), blue(color)


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a 24-bit color."""
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
    return (r << 16) | (g << 8) | b


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack alpha and three color channels into a 32-bit color."""
    if not 0 <= a <= 255:
        raise ValueError(f"Alpha must be 0-255, got {a}")
    return (a << 24) | pack_rgb(r, g, b)


def with_alpha(color: int, a: int) -> int:
    """Replace the alpha channel of a packed color."""
    if not 0 <= a <= 255:
        raise ValueError(f"Alpha must be 0-255, got {a}")
    return (a << 24) | (color & RGB_MASK)


def rgb_distance(first: int, second: int) -> int:
    """
    Report the distance in RGB space between two colors.

    The Euclidean distance over the red, green and blue channels,
    truncated to an integer. Alpha is ignored.

    Args:
        first: The first packed color
        second: The second packed color

    Returns:
        Distance between 0 (same color) and 441 (black to white)
    """
    r1, g1, b1 = split_rgb(first)
    r2, g2, b2 = split_rgb(second)
    diff = (r2 - r1) ** 2 + (g2 - g1) ** 2 + (b2 - b1) ** 2
    return math.isqrt(diff)


def rgb_move(start: int, end: int, fraction: float) -> int:
    """
    Move from one point in RGB space toward another by a fraction.

    Each channel moves by ``int(fraction * (end - start))``, truncating
    toward zero, so intermediate results lean toward ``start``.

    Args:
        start: The starting color
        end: The ending color
        fraction: 0.0 (start) to 1.0 (end)

    Returns:
        ``start`` or ``end`` unchanged at or beyond the bounds, otherwise a
        24-bit RGB color with no alpha.
    """
    if fraction <= 0:
        return start
    if fraction >= 1:
        return end

    # NaN moves nowhere: start's RGB channels come back without alpha
    if math.isnan(fraction):
        fraction = 0.0

    channels = []
    for s, e in zip(split_rgb(start), split_rgb(end)):
        c = s + int(fraction * (e - s))
        channels.append(min(max(c, 0), 255))

    r, g, b = channels
    return (r << 16) | (g << 8) | b


def to_hex(color: int) -> str:
    """Format the RGB part of a color as ``#RRGGBB``."""
    return f"#{color & RGB_MASK:06X}"


def parse_color(text: str) -> int:
    """Parse a color string to a 24-bit packed color.

    Accepts:
        - Named colors: "black", "white", "red", "green", "blue", "magenta", "cyan", "yellow"
        - Hex colors: "#FF00FF", "FF00FF", "0xFF00FF", "#F0F", "F0F"
        - RGB triples: "255,0,255" or "255 0 255"
    """
    color = text.strip().lower()

    if color in NAMED_COLORS:
        return NAMED_COLORS[color]

    match = _TRIPLE_PATTERN.match(color)
    if match:
        r, g, b = (int(group) for group in match.groups())
        return pack_rgb(r, g, b)

    digits = color
    if digits.startswith("#"):
        digits = digits[1:]
    elif digits.startswith("0x"):
        digits = digits[2:]
    if len(digits) == 3:
        # Short form: F0F -> FF00FF
        digits = digits[0] * 2 + digits[1] * 2 + digits[2] * 2
    if len(digits) == 6 and all(ch in "0123456789abcdef" for ch in digits):
        return int(digits, 16)

    raise ValueError(f"Cannot parse color: {text!r}")
