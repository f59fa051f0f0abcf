"""
Material tonal palettes and color schemes from a seed color.

Wraps materialyoucolor (a Python port of Material Color Utilities): the
seed is expanded into tonal palettes for the requested scheme variant,
and light/dark role colors are read from fixed tones of those palettes.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, NamedTuple

from materialyoucolor.hct import Hct

from .colors import hex_to_rgb_tuple, normalize_hex
from .errors import ConfigError
from .palettes import TONE_STEPS

logger = logging.getLogger(__name__)

# Variant name -> (module under materialyoucolor.scheme, class name)
SCHEME_VARIANTS: dict[str, tuple[str, str]] = {
    "tonal-spot": ("scheme_tonal_spot", "SchemeTonalSpot"),
    "expressive": ("scheme_expressive", "SchemeExpressive"),
    "vibrant": ("scheme_vibrant", "SchemeVibrant"),
    "fidelity": ("scheme_fidelity", "SchemeFidelity"),
    "content": ("scheme_content", "SchemeContent"),
    "neutral": ("scheme_neutral", "SchemeNeutral"),
    "monochrome": ("scheme_monochrome", "SchemeMonochrome"),
    "rainbow": ("scheme_rainbow", "SchemeRainbow"),
    "fruit-salad": ("scheme_fruit_salad", "SchemeFruitSalad"),
}

DEFAULT_SCHEME = "tonal-spot"

# Palette name -> attribute on the materialyoucolor scheme
_PALETTE_ATTRS: tuple[tuple[str, str], ...] = (
    ("primary", "primary_palette"),
    ("secondary", "secondary_palette"),
    ("tertiary", "tertiary_palette"),
    ("error", "error_palette"),
    ("neutral", "neutral_palette"),
    ("neutral-variant", "neutral_variant_palette"),
)


class RoleTone(NamedTuple):
    role: str
    palette: str
    light: int
    dark: int


# Material 3 role tones (light, dark)
ROLE_TONES: tuple[RoleTone, ...] = (
    RoleTone("primary", "primary", 40, 80),
    RoleTone("onPrimary", "primary", 100, 20),
    RoleTone("primaryContainer", "primary", 90, 30),
    RoleTone("onPrimaryContainer", "primary", 10, 90),
    RoleTone("secondary", "secondary", 40, 80),
    RoleTone("onSecondary", "secondary", 100, 20),
    RoleTone("secondaryContainer", "secondary", 90, 30),
    RoleTone("onSecondaryContainer", "secondary", 10, 90),
    RoleTone("tertiary", "tertiary", 40, 80),
    RoleTone("onTertiary", "tertiary", 100, 20),
    RoleTone("tertiaryContainer", "tertiary", 90, 30),
    RoleTone("onTertiaryContainer", "tertiary", 10, 90),
    RoleTone("error", "error", 40, 80),
    RoleTone("onError", "error", 100, 20),
    RoleTone("errorContainer", "error", 90, 30),
    RoleTone("onErrorContainer", "error", 10, 90),
    RoleTone("background", "neutral", 98, 6),
    RoleTone("onBackground", "neutral", 10, 90),
    RoleTone("surface", "neutral", 98, 6),
    RoleTone("onSurface", "neutral", 10, 90),
    RoleTone("surfaceVariant", "neutral-variant", 90, 30),
    RoleTone("onSurfaceVariant", "neutral-variant", 30, 80),
    RoleTone("surfaceDim", "neutral", 87, 6),
    RoleTone("surfaceBright", "neutral", 98, 24),
    RoleTone("surfaceContainerLowest", "neutral", 100, 4),
    RoleTone("surfaceContainerLow", "neutral", 96, 10),
    RoleTone("surfaceContainer", "neutral", 94, 12),
    RoleTone("surfaceContainerHigh", "neutral", 92, 17),
    RoleTone("surfaceContainerHighest", "neutral", 90, 22),
    RoleTone("outline", "neutral-variant", 50, 60),
    RoleTone("outlineVariant", "neutral-variant", 80, 30),
    RoleTone("shadow", "neutral", 0, 0),
    RoleTone("scrim", "neutral", 0, 0),
    RoleTone("inverseSurface", "neutral", 20, 90),
    RoleTone("inverseOnSurface", "neutral", 95, 20),
    RoleTone("inversePrimary", "primary", 80, 40),
    RoleTone("surfaceTint", "primary", 40, 80),
)


@dataclass(frozen=True)
class MaterialTheme:
    """Palettes plus light and dark schemes derived from one seed."""

    seed: str
    variant: str
    palettes: dict[str, dict[str, str]]
    light: dict[str, str]
    dark: dict[str, str]


def argb_to_hex(argb: int) -> str:
    """0xAARRGGBB -> '#RRGGBB'."""
    return f"#{argb & 0xFFFFFF:06X}"


def hex_to_argb(value: str) -> int:
    r, g, b = hex_to_rgb_tuple(value)
    return (0xFF << 24) | (r << 16) | (g << 8) | b


def _scheme_class(variant: str) -> Any:
    if variant not in SCHEME_VARIANTS:
        known = ", ".join(SCHEME_VARIANTS)
        raise ConfigError(f"Unknown scheme variant '{variant}' (expected one of: {known})")
    module_name, class_name = SCHEME_VARIANTS[variant]
    module = importlib.import_module(f"materialyoucolor.scheme.{module_name}")
    return getattr(module, class_name)


def _tone_hex(palette: Any, tone: int) -> str:
    return argb_to_hex(palette.tone(tone))


def generate_material_theme(seed: str, variant: str = DEFAULT_SCHEME) -> MaterialTheme:
    """Expand a seed color into palettes and light/dark schemes.

    Args:
        seed: Seed color as hex.
        variant: Scheme variant name (see SCHEME_VARIANTS).

    Returns:
        MaterialTheme with hex values throughout.

    Raises:
        InvalidColorError: If the seed is not a valid hex color.
        ConfigError: If the variant is unknown.
    """
    seed_hex = normalize_hex(seed)
    scheme_cls = _scheme_class(variant)
    source = Hct.from_int(hex_to_argb(seed_hex))
    # Palettes do not depend on the brightness of the scheme
    scheme = scheme_cls(source, False, 0.0)

    tonal: dict[str, Any] = {}
    for name, attr in _PALETTE_ATTRS:
        palette = getattr(scheme, attr, None)
        if palette is None:
            logger.debug(f"Scheme variant {variant} has no {name} palette")
            continue
        tonal[name] = palette

    palettes = {
        name: {str(step): _tone_hex(palette, step) for step in TONE_STEPS}
        for name, palette in tonal.items()
    }

    light: dict[str, str] = {}
    dark: dict[str, str] = {}
    for entry in ROLE_TONES:
        palette = tonal.get(entry.palette)
        if palette is None:
            continue
        light[entry.role] = _tone_hex(palette, entry.light)
        dark[entry.role] = _tone_hex(palette, entry.dark)

    return MaterialTheme(
        seed=seed_hex,
        variant=variant,
        palettes=palettes,
        light=light,
        dark=dark,
    )
