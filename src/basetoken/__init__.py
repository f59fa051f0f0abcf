"""
basetoken - tiered CSS design tokens from a single seed color.

Generates Open Props primitives, a Material tonal palette and a semantic
light-dark() theme API as plain CSS custom-property files.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.errors import BasetokenError, ConfigError, FetchError, InvalidColorError


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("basetoken")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "BasetokenError",
    "InvalidColorError",
    "ConfigError",
    "FetchError",
]
