"""Core basetoken functionality: config, color conversion, CSS generators, generation."""

from . import ir
from .colors import format_color, get_hue, hex_to_hsl, hex_to_oklch, hex_to_rgb, normalize_hex
from .config import DEFAULT_CONFIG, merge_config
from .css import generate_app_css, generate_header, generate_index_css
from .errors import BasetokenError, ConfigError, FetchError, InvalidColorError
from .openprops import (
    OpenPropsFetcher,
    generate_open_props_css,
    prefix_open_props_css,
    transform_open_props_css,
)
from .palettes import generate_palettes_css
from .semantic import (
    format_semantic_value,
    generate_semantic_css,
    get_color_group,
    sort_semantic_keys,
)

__all__ = [
    "ir",
    # Config
    "DEFAULT_CONFIG",
    "merge_config",
    # Colors
    "format_color",
    "get_hue",
    "hex_to_hsl",
    "hex_to_oklch",
    "hex_to_rgb",
    "normalize_hex",
    # Generators
    "generate_app_css",
    "generate_header",
    "generate_index_css",
    "generate_open_props_css",
    "generate_palettes_css",
    "generate_semantic_css",
    "prefix_open_props_css",
    "transform_open_props_css",
    "OpenPropsFetcher",
    "format_semantic_value",
    "get_color_group",
    "sort_semantic_keys",
    # Errors
    "BasetokenError",
    "ConfigError",
    "FetchError",
    "InvalidColorError",
]
