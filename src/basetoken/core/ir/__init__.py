"""
basetoken Intermediate Representation (IR) types.

All configuration types are re-exported from this package.
"""

from .config import (
    DEFAULT_SEMANTIC,
    SEMANTIC_CATEGORIES,
    ColorFormat,
    OpenPropsConfig,
    OutputConfig,
    Prefixes,
    SemanticConfig,
    TokenConfig,
)

__all__ = [
    "ColorFormat",
    "DEFAULT_SEMANTIC",
    "OpenPropsConfig",
    "OutputConfig",
    "Prefixes",
    "SEMANTIC_CATEGORIES",
    "SemanticConfig",
    "TokenConfig",
]
