"""
Configuration persistence for basetoken.

Reads and writes basetoken.yaml in the project root. The file holds a
partial configuration; anything it leaves out falls back to the defaults.

Default location: {project_root}/basetoken.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .config import DEFAULT_CONFIG, merge_config
from .errors import ConfigError
from .ir.config import TokenConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "basetoken.yaml"

SCAFFOLD_HEADER = """\
# basetoken configuration
# Any section left out falls back to the built-in defaults.
# A semantic category given here replaces the default category entirely.
# Values: '"1"' is a raw number, 150ms is a literal, size-3 is var(--op-size-3).

"""


def get_config_path(project_root: Path) -> Path:
    """Get the basetoken.yaml file path."""
    return project_root / CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    """Check if a basetoken.yaml exists in the project."""
    return get_config_path(project_root).exists()


def load_config_file(path: Path) -> TokenConfig:
    """Load and resolve a config file at an explicit path.

    Raises:
        ConfigError: If the file is missing, not YAML, or structurally invalid.
    """
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        logger.warning(f"Empty config at {path}, using defaults")
        return merge_config(None)
    if not isinstance(data, dict):
        raise ConfigError(f"Config in {path} must be a mapping")

    return merge_config(data)


def load_config(project_root: Path, *, use_defaults: bool = True) -> TokenConfig:
    """Load the project's basetoken.yaml.

    Args:
        project_root: Project directory.
        use_defaults: If True, return the defaults when no file exists.

    Raises:
        ConfigError: If the file is missing (when use_defaults=False) or invalid.
    """
    path = get_config_path(project_root)
    if not path.exists():
        if use_defaults:
            logger.debug("No basetoken.yaml found, using defaults")
            return merge_config(None)
        raise ConfigError(f"Config not found: {path}")
    return load_config_file(path)


def save_config(project_root: Path, config: TokenConfig) -> Path:
    """Write a full config to basetoken.yaml."""
    path = get_config_path(project_root)
    data = config.model_dump(mode="json", by_alias=True)
    path.write_text(
        SCAFFOLD_HEADER
        + yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved config to {path}")
    return path


def scaffold_config(project_root: Path, *, overwrite: bool = False) -> Path | None:
    """Create basetoken.yaml holding the defaults.

    Returns:
        Path to the created file, or None if one already exists.
    """
    path = get_config_path(project_root)
    if path.exists() and not overwrite:
        logger.debug(f"Skipping existing config: {path}")
        return None
    return save_config(project_root, DEFAULT_CONFIG)
