"""
Semantic CSS generator.

Builds semantic.css: the ``--ui-*`` application API. Colors are emitted as
``light-dark()`` pairs from the light and dark Material schemes; every
other category references an Open Props primitive or a raw literal.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import NamedTuple

from .colors import format_color, round_half_up
from .css import generate_header
from .ir.config import ColorFormat, Prefixes, SemanticConfig

THEME_LAYER = "ui.theme"

SchemeColors = Mapping[str, str]


class ColorRole(NamedTuple):
    scheme_key: str
    semantic_name: str
    group: str


# Material camelCase role -> semantic kebab-case name. Order is output order.
COLOR_ROLES: tuple[ColorRole, ...] = (
    # Primary
    ColorRole("primary", "primary", "Primary"),
    ColorRole("onPrimary", "primary-on", "Primary"),
    ColorRole("primaryContainer", "primary-container", "Primary"),
    ColorRole("onPrimaryContainer", "primary-container-on", "Primary"),
    # Secondary
    ColorRole("secondary", "secondary", "Secondary"),
    ColorRole("onSecondary", "secondary-on", "Secondary"),
    ColorRole("secondaryContainer", "secondary-container", "Secondary"),
    ColorRole("onSecondaryContainer", "secondary-container-on", "Secondary"),
    # Tertiary
    ColorRole("tertiary", "tertiary", "Tertiary"),
    ColorRole("onTertiary", "tertiary-on", "Tertiary"),
    ColorRole("tertiaryContainer", "tertiary-container", "Tertiary"),
    ColorRole("onTertiaryContainer", "tertiary-container-on", "Tertiary"),
    # Surface
    ColorRole("surface", "surface", "Surface"),
    ColorRole("onSurface", "surface-on", "Surface"),
    ColorRole("surfaceVariant", "surface-variant", "Surface"),
    ColorRole("onSurfaceVariant", "surface-variant-on", "Surface"),
    ColorRole("surfaceContainer", "surface-container", "Surface"),
    ColorRole("surfaceContainerLow", "surface-container-low", "Surface"),
    ColorRole("surfaceContainerLowest", "surface-container-lowest", "Surface"),
    ColorRole("surfaceContainerHigh", "surface-container-high", "Surface"),
    ColorRole("surfaceContainerHighest", "surface-container-highest", "Surface"),
    ColorRole("surfaceDim", "surface-dim", "Surface"),
    ColorRole("surfaceBright", "surface-bright", "Surface"),
    # Background
    ColorRole("background", "background", "Background"),
    ColorRole("onBackground", "background-on", "Background"),
    # Error
    ColorRole("error", "error", "Error"),
    ColorRole("onError", "error-on", "Error"),
    ColorRole("errorContainer", "error-container", "Error"),
    ColorRole("onErrorContainer", "error-container-on", "Error"),
    # Outline
    ColorRole("outline", "outline", "Outline"),
    ColorRole("outlineVariant", "outline-variant", "Outline"),
    # Inverse
    ColorRole("inverseSurface", "inverse-surface", "Inverse"),
    ColorRole("inverseOnSurface", "inverse-surface-on", "Inverse"),
    ColorRole("inversePrimary", "inverse-primary", "Inverse"),
    # Utility
    ColorRole("scrim", "scrim", "Utility"),
    ColorRole("shadow", "shadow-color", "Utility"),
    ColorRole("surfaceTint", "surface-tint", "Utility"),
)

# Comment title per category; output order is SemanticConfig.categories()
CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "space": "Spacing Scale",
    "space-fluid": "Fluid Spacing",
    "type-size": "Typography Sizes",
    "leading": "Line Heights",
    "weight": "Font Weights",
    "font": "Font Families",
    "radius": "Border Radii",
    "border": "Border Widths",
    "shadow": "Shadows",
    "layer": "Z-Index Layers",
    "ease": "Easings",
    "duration": "Durations",
    "content-width": "Content Widths",
    "breakpoint": "Breakpoints",
}

# =============================================================================
# Key ordering
# =============================================================================

TSHIRT_SIZE_ORDER: dict[str, int] = {
    "xxs": 1,
    "xs": 2,
    "sm": 3,
    "base": 4,
    "md": 5,
    "lg": 6,
    "xl": 7,
    "2xl": 8,
    "3xl": 9,
    "4xl": 10,
    "5xl": 11,
}

WEIGHT_ORDER: dict[str, int] = {
    "thin": 1,
    "light": 2,
    "normal": 3,
    "medium": 4,
    "semibold": 5,
    "bold": 6,
    "extrabold": 7,
    "black": 8,
}

LEADING_ORDER: dict[str, int] = {
    "none": 1,
    "tight": 2,
    "snug": 3,
    "normal": 4,
    "relaxed": 5,
    "loose": 6,
}

LAYER_ORDER: dict[str, int] = {
    "base": 1,
    "raised": 2,
    "dropdown": 3,
    "sticky": 4,
    "modal": 5,
}

# Categories without an entry (font, ease) sort alphabetically
CATEGORY_ORDERS: dict[str, dict[str, int]] = {
    "space": TSHIRT_SIZE_ORDER,
    "space-fluid": TSHIRT_SIZE_ORDER,
    "type-size": TSHIRT_SIZE_ORDER,
    "radius": TSHIRT_SIZE_ORDER,
    "shadow": TSHIRT_SIZE_ORDER,
    "border": TSHIRT_SIZE_ORDER,
    "duration": TSHIRT_SIZE_ORDER,
    "breakpoint": TSHIRT_SIZE_ORDER,
    "content-width": TSHIRT_SIZE_ORDER,
    "weight": WEIGHT_ORDER,
    "leading": LEADING_ORDER,
    "layer": LAYER_ORDER,
}


def sort_semantic_keys(group: Iterable[str], category: str) -> list[str]:
    """Sort role keys in a logical order for the category.

    Known keys come first in their ranked order; unknown keys follow,
    alphabetically.
    """
    keys = list(group)
    order = CATEGORY_ORDERS.get(category)
    if order is None:
        return sorted(keys)

    def rank(key: str) -> tuple[int, int, str]:
        if key in order:
            return (0, order[key], "")
        return (1, 0, key)

    return sorted(keys, key=rank)


# =============================================================================
# Value formatting
# =============================================================================

_DIGIT_RE = re.compile(r"^\d")


def format_semantic_value(value: str, primitives_prefix: str) -> str:
    """Format a raw semantic value for CSS output.

    - ``0`` / ``none`` -> as is
    - quoted (``'"1"'``) -> quotes stripped, raw number
    - starts with a digit (``150ms``) -> as is
    - anything else -> ``var(--{prefix}-{value})``
    """
    if value in ("0", "none"):
        return value
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    if _DIGIT_RE.match(value):
        return value
    return f"var(--{primitives_prefix}-{value})"


def get_color_group(role: str) -> str:
    """Get the display group of a semantic color role name."""
    for prefix in (
        "primary",
        "secondary",
        "tertiary",
        "surface",
        "background",
        "error",
        "outline",
        "inverse",
    ):
        if role.startswith(prefix):
            return prefix.capitalize()
    if role in ("scrim", "shadow-color"):
        return "Utility"
    return "Other"


# =============================================================================
# Generation
# =============================================================================


def _color_lines(
    light: SchemeColors, dark: SchemeColors, prefixes: Prefixes, fmt: ColorFormat | str
) -> list[str]:
    lines: list[str] = []
    current_group = ""
    for role in COLOR_ROLES:
        light_value = light.get(role.scheme_key)
        dark_value = dark.get(role.scheme_key)
        if not light_value or not dark_value:
            continue

        if role.group != current_group:
            if current_group:
                lines.append("")
            lines.append(f"    /* {role.group} */")
            current_group = role.group

        lines.append(
            f"    --{prefixes.semantic}-color-{role.semantic_name}: "
            f"light-dark({format_color(light_value, fmt)}, {format_color(dark_value, fmt)});"
        )
    return lines


def _category_lines(semantic: SemanticConfig, prefixes: Prefixes) -> list[str]:
    lines: list[str] = []
    for category, tokens in semantic.categories():
        if not tokens:
            continue

        lines.append("")
        lines.append(f"    /* {CATEGORY_DISPLAY_NAMES[category]} */")
        for key in sort_semantic_keys(tokens, category):
            value = format_semantic_value(tokens[key], prefixes.primitives)
            lines.append(f"    --{prefixes.semantic}-{category}-{key}: {value};")
    return lines


def generate_semantic_css(
    light_scheme: SchemeColors,
    dark_scheme: SchemeColors,
    semantic: SemanticConfig,
    prefixes: Prefixes,
    fmt: ColorFormat | str,
    seed_hue: float,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Generate semantic.css content.

    Args:
        light_scheme: Material role -> hex for light mode.
        dark_scheme: Material role -> hex for dark mode.
        semantic: Category tables.
        prefixes: CSS variable prefixes.
        fmt: Color output format.
        seed_hue: Seed hue in degrees, exposed as ``--ui-shadow-hue``.
        generated_at: Header timestamp.

    Returns:
        CSS text.
    """
    header = generate_header(
        "Semantic Tokens (Tier 2) - THE APPLICATION API",
        "Generated from seed color",
        f"Naming: --{prefixes.semantic}-[category]-[role]\n"
        "\n"
        "This is the ONLY file developers should reference.\n"
        f"All tokens start with --{prefixes.semantic}-\n"
        "\n"
        "Uses CSS light-dark() for reactive theming.",
        generated_at=generated_at,
    )

    lines = [header, f"@layer {THEME_LAYER} {{", "  :root {", "    color-scheme: light dark;", ""]

    lines.extend(_color_lines(light_scheme, dark_scheme, prefixes, fmt))

    lines.append("")
    lines.append("    /* Shadow Color (for atomic shadows) */")
    lines.append(
        f"    --{prefixes.semantic}-color-shadow: "
        "light-dark(oklch(0 0 0 / 0.1), oklch(0 0 0 / 0.6));"
    )
    lines.append("")
    lines.append("    /* Shadow Hue (derived from seed color) */")
    lines.append(f"    --{prefixes.semantic}-shadow-hue: {round_half_up(seed_hue)};")

    lines.extend(_category_lines(semantic, prefixes))

    lines.append("  }")
    lines.append("")
    lines.append("  /* Theme Toggles */")
    lines.append('  :root[data-theme="light"] { color-scheme: light; }')
    lines.append('  :root[data-theme="dark"] { color-scheme: dark; }')
    lines.append("}")
    lines.append("")
    return "\n".join(lines)
