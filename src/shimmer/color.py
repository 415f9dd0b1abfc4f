"""Color engine for the shimmer wave.

Pure functions: parse a base color, lighten channels toward white, and build
the symmetric brightness ramp that sweeps across the text.

    base → brighter → peak → brighter → base
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, TypeAlias

from shimmer.constants import FALLBACK_RGB
from shimmer.enums import Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

RGB: TypeAlias = tuple[int, int, int]

_HEX_DIGITS = frozenset(string.hexdigits)


def is_valid_color(value: str) -> bool:
    """Check for six hex digits with an optional leading ``#``."""
    digits = value.removeprefix("#")
    return len(digits) == 6 and _HEX_DIGITS.issuperset(digits)


def parse_color(value: str) -> RGB:
    """Parse a hex color like ``"#FFC000"`` or ``"FFC000"``.

    Malformed input (wrong length or non-hex characters) yields the fallback
    green instead of raising.
    """
    if not is_valid_color(value):
        return FALLBACK_RGB
    digits = value.removeprefix("#")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_hex(rgb: RGB) -> str:
    """Format an RGB triple as ``#RRGGBB``."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_color(value: str) -> str:
    """Return ``value`` as uppercase ``#RRGGBB``, or the fallback color."""
    return format_hex(parse_color(value))


def lighten(value: int, percent: int) -> int:
    """Blend a 0-255 channel toward white by ``percent`` of the remaining distance."""
    return min(value + (255 - value) * percent // 100, 255)


def generate_wave(base: str, wave_width: int, peak_light: int) -> tuple[str, ...]:
    """Build the ramp 0 → peak → 0 used as the moving highlight."""
    r, g, b = parse_color(base)
    steps = max(wave_width, 2)
    mid = steps // 2

    colors: list[str] = []
    for i in range(steps):
        if i <= mid:
            ratio = i / mid if mid else 1.0
        else:
            ratio = (steps - 1 - i) / (steps - 1 - mid)
        percent = int(ratio * peak_light)
        colors.append(format_hex((lighten(r, percent), lighten(g, percent), lighten(b, percent))))
    return tuple(colors)


def color_for_index(
    position: int,
    index: int,
    text_length: int,
    wave_colors: Sequence[str],
    direction: Direction,
    base_color: str,
) -> str:
    """Color of the character at ``index`` while the wave sits at ``position``."""
    if direction == Direction.REVERSE:
        distance = position - (text_length - 1 - index)
    else:
        distance = position - index

    if 0 <= distance < len(wave_colors):
        return wave_colors[distance]
    return base_color
