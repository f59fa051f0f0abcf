"""
Token configuration IR types.

Defines the resolved configuration that drives one generation run:
color format, CSS variable prefixes, output layout, Open Props sources,
and the fourteen semantic category tables.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ColorFormat(StrEnum):
    """Output format for every emitted color value."""

    OKLCH = "oklch"
    HEX = "hex"
    HSL = "hsl"
    RGB = "rgb"


# =============================================================================
# Semantic category tables
# =============================================================================

# Declared category order; this order is also the output order of semantic.css
SEMANTIC_CATEGORIES: tuple[str, ...] = (
    "space",
    "space-fluid",
    "type-size",
    "leading",
    "weight",
    "font",
    "radius",
    "border",
    "shadow",
    "layer",
    "ease",
    "duration",
    "content-width",
    "breakpoint",
)

# Quoted values ('"1"') are raw CSS numbers, digit-led values are literals,
# everything else names an Open Props primitive.
DEFAULT_SEMANTIC: dict[str, dict[str, str]] = {
    "space": {
        "xs": "size-2",
        "sm": "size-3",
        "md": "size-4",
        "lg": "size-5",
        "xl": "size-6",
        "2xl": "size-7",
    },
    "space-fluid": {
        "xs": "size-fluid-1",
        "sm": "size-fluid-2",
        "md": "size-fluid-3",
        "lg": "size-fluid-4",
        "xl": "size-fluid-5",
        "2xl": "size-fluid-6",
    },
    "type-size": {
        "xs": "font-size-0",
        "sm": "font-size-1",
        "base": "font-size-2",
        "md": "font-size-3",
        "lg": "font-size-4",
        "xl": "font-size-5",
        "2xl": "font-size-6",
        "3xl": "font-size-7",
        "4xl": "font-size-8",
    },
    "leading": {
        "none": '"1"',
        "tight": "font-lineheight-1",
        "snug": "font-lineheight-2",
        "normal": "font-lineheight-3",
        "relaxed": "font-lineheight-4",
        "loose": "font-lineheight-5",
    },
    "weight": {
        "light": "font-weight-3",
        "normal": "font-weight-4",
        "medium": "font-weight-5",
        "semibold": "font-weight-6",
        "bold": "font-weight-7",
    },
    "font": {
        "body": "font-sans",
        "heading": "font-sans",
        "code": "font-mono",
    },
    "radius": {
        "none": "0",
        "sm": "radius-2",
        "md": "radius-3",
        "lg": "radius-4",
        "full": "radius-round",
    },
    "border": {
        "none": "0",
        "sm": "border-size-1",
        "md": "border-size-2",
        "lg": "border-size-3",
    },
    "shadow": {
        "sm": "shadow-2",
        "md": "shadow-3",
        "lg": "shadow-4",
        "xl": "shadow-5",
    },
    "layer": {
        "base": '"1"',
        "raised": '"10"',
        "dropdown": '"100"',
        "sticky": '"500"',
        "modal": '"1000"',
    },
    "ease": {
        "linear": "ease-1",
        "default": "ease-2",
        "in": "ease-in-2",
        "out": "ease-out-2",
        "in-out": "ease-in-out-2",
    },
    "duration": {
        "instant": "0ms",
        "fast": "150ms",
        "normal": "300ms",
        "slow": "500ms",
    },
    "content-width": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
    },
    "breakpoint": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
    },
}


def _default_category(category: str):
    return lambda: dict(DEFAULT_SEMANTIC[category])


# =============================================================================
# Sections
# =============================================================================


class Prefixes(BaseModel):
    """Namespace prefixes used to build CSS variable names."""

    model_config = ConfigDict(frozen=True)

    primitives: str = Field(default="op", description="Open Props primitives: --op-*")
    palette: str = Field(default="md", description="Material palettes: --md-palette-*")
    semantic: str = Field(default="ui", description="Semantic tokens: --ui-*")


class OutputConfig(BaseModel):
    """Output directory layout."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dir: str = Field(default="./tokens", description="Root output directory")
    palette_subdir: str = Field(
        default="material",
        alias="paletteSubdir",
        description="Subdirectory for palettes.css",
    )
    openprops_subdir: str = Field(
        default="open-props",
        alias="openpropsSubdir",
        description="Subdirectory for Open Props files",
    )


class OpenPropsConfig(BaseModel):
    """Where Open Props primitive CSS is fetched from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(
        default="https://raw.githubusercontent.com/argyleink/open-props/main/src",
        alias="baseUrl",
        description="Base URL of the Open Props src/ directory",
    )
    files: tuple[str, ...] = Field(
        default=("fonts", "sizes", "shadows", "borders", "easings"),
        description="Primitive files to fetch, by logical name",
    )


class SemanticConfig(BaseModel):
    """Role tables for the fourteen semantic token categories.

    Each category maps a role key (``sm``, ``base``, ``bold`` ...) to a raw
    value string. Hyphenated category names are the field aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    space: dict[str, str] = Field(default_factory=_default_category("space"))
    space_fluid: dict[str, str] = Field(
        default_factory=_default_category("space-fluid"), alias="space-fluid"
    )
    type_size: dict[str, str] = Field(
        default_factory=_default_category("type-size"), alias="type-size"
    )
    leading: dict[str, str] = Field(default_factory=_default_category("leading"))
    weight: dict[str, str] = Field(default_factory=_default_category("weight"))
    font: dict[str, str] = Field(default_factory=_default_category("font"))
    radius: dict[str, str] = Field(default_factory=_default_category("radius"))
    border: dict[str, str] = Field(default_factory=_default_category("border"))
    shadow: dict[str, str] = Field(default_factory=_default_category("shadow"))
    layer: dict[str, str] = Field(default_factory=_default_category("layer"))
    ease: dict[str, str] = Field(default_factory=_default_category("ease"))
    duration: dict[str, str] = Field(default_factory=_default_category("duration"))
    content_width: dict[str, str] = Field(
        default_factory=_default_category("content-width"), alias="content-width"
    )
    breakpoint: dict[str, str] = Field(default_factory=_default_category("breakpoint"))

    def get(self, category: str) -> dict[str, str]:
        """Get a category table by its hyphenated name (e.g. 'type-size')."""
        if category not in SEMANTIC_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category.replace("-", "_"))

    def categories(self) -> Iterator[tuple[str, dict[str, str]]]:
        """Yield (category, table) pairs in declared order."""
        for category in SEMANTIC_CATEGORIES:
            yield category, self.get(category)


# =============================================================================
# Root Model
# =============================================================================


class TokenConfig(BaseModel):
    """Resolved configuration for one generation run.

    Built once per run by ``merge_config`` and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    format: ColorFormat = Field(default=ColorFormat.OKLCH, description="Color output format")
    prefixes: Prefixes = Field(default_factory=Prefixes, description="CSS variable prefixes")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output layout")
    openprops: OpenPropsConfig = Field(
        default_factory=OpenPropsConfig,
        description="Open Props source configuration",
    )
    semantic: SemanticConfig = Field(
        default_factory=SemanticConfig,
        description="Semantic category tables",
    )
