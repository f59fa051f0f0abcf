"""
Pure-Python color conversion for token output.

Every color enters as a hex string, is normalized to ``#RRGGBB`` and is
rendered in the configured output format. OKLCH conversion follows the
OKLab reference matrices; no external color libraries required.
"""

from __future__ import annotations

import colorsys
import math
import re

from .errors import InvalidColorError
from .ir.config import ColorFormat

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Chroma below this renders as achromatic: "oklch(L 0 0)"
ACHROMATIC_CHROMA = 1e-4


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _trim_number(value: float, places: int = 1) -> str:
    """Format with at most ``places`` decimals, dropping trailing zeros."""
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def normalize_hex(value: str) -> str:
    """Normalize a hex color to ``#RRGGBB`` uppercase.

    Accepts 3- or 6-digit hex with or without a leading ``#``; shorthand is
    expanded by digit duplication.

    Raises:
        InvalidColorError: For any other input.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = _HEX_RE.match(value)
    if not match:
        raise InvalidColorError(value)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def hex_to_rgb_tuple(value: str) -> tuple[int, int, int]:
    """Parse a hex color into 0-255 channel values."""
    digits = normalize_hex(value)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _srgb_to_linear(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def hex_to_oklch_values(value: str) -> tuple[float, float, float]:
    """Convert a hex color to raw OKLCH components.

    Returns:
        (L, C, H) with L in 0-1, C >= 0 and H in [0, 360). H is 0 for
        achromatic colors.
    """
    r, g, b = (_srgb_to_linear(c / 255) for c in hex_to_rgb_tuple(value))

    lms_l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    lms_m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    lms_s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_ = math.cbrt(lms_l)
    m_ = math.cbrt(lms_m)
    s_ = math.cbrt(lms_s)

    lightness = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    ok_a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    ok_b = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.hypot(ok_a, ok_b)
    if chroma < ACHROMATIC_CHROMA:
        return lightness, 0.0, 0.0
    hue = math.degrees(math.atan2(ok_b, ok_a)) % 360
    return lightness, chroma, hue


def hex_to_oklch(value: str) -> str:
    """Format a hex color as ``oklch(L C H)``.

    L has 2 decimals, C 3 decimals and H is an integer. Achromatic colors
    render as ``oklch(L 0 0)``.
    """
    lightness, chroma, hue = hex_to_oklch_values(value)
    l_fmt = f"{max(lightness, 0.0):.2f}"
    if chroma == 0.0:
        return f"oklch({l_fmt} 0 0)"
    h_fmt = round_half_up(hue) % 360
    return f"oklch({l_fmt} {chroma:.3f} {h_fmt})"


def hex_to_hsl(value: str) -> str:
    """Format a hex color as ``hsl(H S% L%)``."""
    r, g, b = (c / 255 for c in hex_to_rgb_tuple(value))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return (
        f"hsl({_trim_number(hue * 360)} "
        f"{_trim_number(saturation * 100)}% "
        f"{_trim_number(lightness * 100)}%)"
    )


def hex_to_rgb(value: str) -> str:
    """Format a hex color as legacy ``rgb(r, g, b)``."""
    r, g, b = hex_to_rgb_tuple(value)
    return f"rgb({r}, {g}, {b})"


def format_color(value: str, fmt: ColorFormat | str) -> str:
    """Render a hex color in the requested output format."""
    fmt = ColorFormat(fmt)
    if fmt == ColorFormat.OKLCH:
        return hex_to_oklch(value)
    if fmt == ColorFormat.HSL:
        return hex_to_hsl(value)
    if fmt == ColorFormat.RGB:
        return hex_to_rgb(value)
    return normalize_hex(value)


def get_hue(value: str) -> float:
    """Get the OKLCH hue of a color in degrees.

    Returns 0 for achromatic colors. Used to tint shadows, not for display.
    """
    _, _, hue = hex_to_oklch_values(value)
    return hue
