"""
Material tonal palette CSS generator.

Renders ramps x tone stops as ``--{palette}-palette-{ramp}-{tone}``
variables inside a single ``:root`` block.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from .colors import format_color, hex_to_oklch, normalize_hex
from .css import generate_header
from .ir.config import ColorFormat, Prefixes

# Ramp order is the output order; error is emitted only when present
PALETTE_ORDER: tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "error",
    "neutral",
    "neutral-variant",
)

# Tone stops in output order; the stride widens from 5 to 10 above 40
TONE_STEPS: tuple[int, ...] = (0, 5, 10, 15, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 95, 98, 99, 100)

Palettes = Mapping[str, Mapping[str, str]]


def palette_title(name: str) -> str:
    """'neutral-variant' -> 'Neutral Variant'."""
    return " ".join(part.capitalize() for part in name.split("-"))


def generate_palettes_css(
    palettes: Palettes,
    seed_hex: str,
    prefixes: Prefixes,
    fmt: ColorFormat | str,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Generate palettes.css content.

    Args:
        palettes: Ramp name -> tone stop ("0".."100") -> hex color.
        seed_hex: Seed color, shown in the header.
        prefixes: CSS variable prefixes (uses ``palette``).
        fmt: Color output format.
        generated_at: Header timestamp.

    Returns:
        CSS text.
    """
    seed = normalize_hex(seed_hex)
    header = generate_header(
        "Material Design Palettes (Tier 1 Primitives)",
        "material-color-utilities tonal palettes",
        f"Seed color: {seed} ({hex_to_oklch(seed)})\n"
        f"Naming: --{prefixes.palette}-palette-[ramp]-[tone]",
        generated_at=generated_at,
    )

    lines = [header, "", ":root {"]
    first = True
    for name in PALETTE_ORDER:
        tones = palettes.get(name)
        if not tones:
            continue

        if not first:
            lines.append("")
        first = False
        lines.append(f"  /* {palette_title(name)} palette */")

        for step in TONE_STEPS:
            value = tones.get(str(step))
            if value is None:
                continue
            lines.append(
                f"  --{prefixes.palette}-palette-{name}-{step}: {format_color(value, fmt)};"
            )

    lines.append("}")
    lines.append("")
    return "\n".join(lines)
