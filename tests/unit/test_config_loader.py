"""Tests for basetoken.yaml loading and scaffolding."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from basetoken.core.config import DEFAULT_CONFIG
from basetoken.core.config_loader import (
    CONFIG_FILE,
    config_exists,
    get_config_path,
    load_config,
    load_config_file,
    save_config,
    scaffold_config,
)
from basetoken.core.errors import ConfigError
from basetoken.core.ir.config import ColorFormat


def _write(project: Path, text: str) -> Path:
    path = project / CONFIG_FILE
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        assert load_config(tmp_path) == DEFAULT_CONFIG

    def test_defaults_are_a_copy(self, tmp_path):
        config = load_config(tmp_path)
        config.semantic.layer["modal"] = '"9999"'
        assert DEFAULT_CONFIG.semantic.layer["modal"] == '"1000"'

    def test_missing_without_defaults(self, tmp_path):
        with pytest.raises(ConfigError, match="Config not found"):
            load_config(tmp_path, use_defaults=False)

    def test_partial_config(self, tmp_path):
        _write(
            tmp_path,
            "format: hex\n"
            "prefixes:\n"
            "  semantic: app\n"
            "output:\n"
            "  paletteSubdir: palettes\n"
            "semantic:\n"
            "  type-size:\n"
            "    body: font-size-1\n",
        )
        config = load_config(tmp_path)
        assert config.format == ColorFormat.HEX
        assert config.prefixes.semantic == "app"
        assert config.prefixes.primitives == "op"
        assert config.output.palette_subdir == "palettes"
        assert config.semantic.type_size == {"body": "font-size-1"}
        assert config.semantic.space == DEFAULT_CONFIG.semantic.space

    def test_empty_file(self, tmp_path):
        _write(tmp_path, "")
        assert load_config(tmp_path) == DEFAULT_CONFIG

    def test_invalid_yaml(self, tmp_path):
        _write(tmp_path, "format: [hex\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        _write(tmp_path, "- hex\n- oklch\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(tmp_path)

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("format: rgb\n")
        assert load_config_file(path).format == ColorFormat.RGB

    def test_load_explicit_path_missing(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config_file(tmp_path / "missing.yaml")


class TestScaffoldConfig:
    def test_creates_file(self, tmp_path):
        path = scaffold_config(tmp_path)
        assert path == get_config_path(tmp_path)
        assert config_exists(tmp_path)
        assert path.read_text().startswith("# basetoken configuration")

    def test_uses_aliases(self, tmp_path):
        data = yaml.safe_load(scaffold_config(tmp_path).read_text())
        assert data["format"] == "oklch"
        assert "paletteSubdir" in data["output"]
        assert "baseUrl" in data["openprops"]
        assert "type-size" in data["semantic"]

    def test_round_trip(self, tmp_path):
        scaffold_config(tmp_path)
        assert load_config(tmp_path) == DEFAULT_CONFIG

    def test_does_not_overwrite(self, tmp_path):
        _write(tmp_path, "format: hex\n")
        assert scaffold_config(tmp_path) is None
        assert load_config(tmp_path).format == ColorFormat.HEX

    def test_overwrite(self, tmp_path):
        _write(tmp_path, "format: hex\n")
        assert scaffold_config(tmp_path, overwrite=True) is not None
        assert load_config(tmp_path).format == ColorFormat.OKLCH

    def test_save_custom_config(self, tmp_path):
        config = DEFAULT_CONFIG.model_copy(update={"format": ColorFormat.HSL})
        save_config(tmp_path, config)
        assert load_config(tmp_path).format == ColorFormat.HSL
