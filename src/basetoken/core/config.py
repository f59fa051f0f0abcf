"""
Token generator configuration.

Opinionated defaults plus the merge rules used to lay a user's partial
configuration over them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import ConfigError
from .ir.config import SEMANTIC_CATEGORIES, TokenConfig

logger = logging.getLogger(__name__)

# Default configuration - opinionated, ready to use
DEFAULT_CONFIG = TokenConfig()

# Sections merged key-by-key with their defaults
_NESTED_SECTIONS: tuple[str, ...] = ("prefixes", "output", "openprops")


def _field_names(model: type[BaseModel]) -> dict[str, str]:
    """Map both field names and aliases of a model to the field name."""
    names: dict[str, str] = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def _section(partial: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = partial.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"Config section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def _merge_section(
    model: type[BaseModel], defaults: dict[str, Any], overrides: Mapping[str, Any]
) -> dict[str, Any]:
    names = _field_names(model)
    merged = dict(defaults)
    for key, value in overrides.items():
        if key not in names:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        merged[names[key]] = value
    return merged


def _merge_semantic(defaults: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Replace whole categories; categories are never merged key-by-key."""
    merged = dict(defaults)
    for category, table in overrides.items():
        if category not in SEMANTIC_CATEGORIES:
            logger.warning(f"Ignoring unknown semantic category: {category}")
            continue
        if table is None:
            table = {}
        if not isinstance(table, Mapping):
            raise ConfigError(f"Semantic category '{category}' must be a mapping")
        merged[category.replace("-", "_")] = {str(k): str(v) for k, v in table.items()}
    return merged


def merge_config(partial: Mapping[str, Any] | None = None) -> TokenConfig:
    """Merge a user config with the defaults.

    Top-level keys are merged shallowly, ``prefixes``, ``output`` and
    ``openprops`` key-by-key, and ``semantic`` category-by-category: a
    category present in ``partial`` fully replaces the default one.
    Unknown top-level keys are ignored.

    Args:
        partial: User configuration, e.g. as loaded from YAML.

    Returns:
        Resolved TokenConfig.

    Raises:
        ConfigError: If a section has the wrong structural shape.
    """
    if not partial:
        # Callers get their own tables; the defaults stay untouched
        return DEFAULT_CONFIG.model_copy(deep=True)

    defaults = DEFAULT_CONFIG.model_dump()
    merged: dict[str, Any] = dict(defaults)

    if partial.get("format") is not None:
        merged["format"] = partial["format"]

    for key in _NESTED_SECTIONS:
        model = type(getattr(DEFAULT_CONFIG, key))
        merged[key] = _merge_section(model, defaults[key], _section(partial, key))

    merged["semantic"] = _merge_semantic(defaults["semantic"], _section(partial, "semantic"))

    try:
        return TokenConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
