"""Tests for config models, defaults and merge rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from basetoken.core.config import DEFAULT_CONFIG, merge_config
from basetoken.core.errors import ConfigError
from basetoken.core.ir.config import SEMANTIC_CATEGORIES, ColorFormat, TokenConfig


class TestDefaultConfig:
    def test_default_format(self):
        assert DEFAULT_CONFIG.format == ColorFormat.OKLCH
        assert DEFAULT_CONFIG.format == "oklch"

    def test_default_prefixes(self):
        assert DEFAULT_CONFIG.prefixes.primitives == "op"
        assert DEFAULT_CONFIG.prefixes.palette == "md"
        assert DEFAULT_CONFIG.prefixes.semantic == "ui"

    def test_default_output(self):
        assert DEFAULT_CONFIG.output.dir == "./tokens"
        assert DEFAULT_CONFIG.output.palette_subdir == "material"
        assert DEFAULT_CONFIG.output.openprops_subdir == "open-props"

    def test_default_openprops_files(self):
        assert DEFAULT_CONFIG.openprops.files == ("fonts", "sizes", "shadows", "borders", "easings")
        assert DEFAULT_CONFIG.openprops.base_url.endswith("/open-props/main/src")

    def test_all_fourteen_categories(self):
        categories = [name for name, _ in DEFAULT_CONFIG.semantic.categories()]
        assert categories == list(SEMANTIC_CATEGORIES)
        assert len(categories) == 14

    def test_space_defaults(self):
        assert DEFAULT_CONFIG.semantic.space == {
            "xs": "size-2",
            "sm": "size-3",
            "md": "size-4",
            "lg": "size-5",
            "xl": "size-6",
            "2xl": "size-7",
        }

    def test_hyphenated_category_lookup(self):
        assert DEFAULT_CONFIG.semantic.get("type-size")["base"] == "font-size-2"
        assert DEFAULT_CONFIG.semantic.get("space-fluid")["sm"] == "size-fluid-2"
        assert DEFAULT_CONFIG.semantic.get("content-width")["xl"] == "1280px"

    def test_unknown_category_lookup(self):
        with pytest.raises(KeyError):
            DEFAULT_CONFIG.semantic.get("colors")

    def test_quoted_raw_numbers(self):
        assert DEFAULT_CONFIG.semantic.leading["none"] == '"1"'
        assert DEFAULT_CONFIG.semantic.layer["base"] == '"1"'
        assert DEFAULT_CONFIG.semantic.layer["modal"] == '"1000"'

    def test_font_defaults(self):
        assert DEFAULT_CONFIG.semantic.font == {
            "body": "font-sans",
            "heading": "font-sans",
            "code": "font-mono",
        }

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.format = ColorFormat.HEX  # type: ignore[misc]


class TestMergeConfig:
    def test_empty_returns_defaults(self):
        assert merge_config({}) == DEFAULT_CONFIG
        assert merge_config(None) == DEFAULT_CONFIG

    def test_override_format(self):
        result = merge_config({"format": "hex"})
        assert result.format == ColorFormat.HEX
        assert result.prefixes == DEFAULT_CONFIG.prefixes

    def test_partial_prefixes(self):
        result = merge_config({"prefixes": {"primitives": "custom"}})
        assert result.prefixes.primitives == "custom"
        assert result.prefixes.palette == "md"
        assert result.prefixes.semantic == "ui"

    def test_partial_output_with_camel_case_keys(self):
        result = merge_config({"output": {"dir": "./custom-dir", "paletteSubdir": "m3"}})
        assert result.output.dir == "./custom-dir"
        assert result.output.palette_subdir == "m3"
        assert result.output.openprops_subdir == "open-props"

    def test_partial_output_with_snake_case_keys(self):
        result = merge_config({"output": {"openprops_subdir": "op"}})
        assert result.output.openprops_subdir == "op"

    def test_openprops_files_replaced(self):
        result = merge_config({"openprops": {"files": ["sizes"]}})
        assert result.openprops.files == ("sizes",)
        assert result.openprops.base_url == DEFAULT_CONFIG.openprops.base_url

    def test_semantic_category_replaced_not_merged(self):
        result = merge_config({"semantic": {"space": {"sm": "size-1", "md": "size-2"}}})
        assert result.semantic.space == {"sm": "size-1", "md": "size-2"}
        assert result.semantic.radius == DEFAULT_CONFIG.semantic.radius

    def test_hyphenated_semantic_category(self):
        result = merge_config({"semantic": {"type-size": {"base": "font-size-3"}}})
        assert result.semantic.get("type-size") == {"base": "font-size-3"}

    def test_empty_category_override(self):
        result = merge_config({"semantic": {"ease": {}}})
        assert result.semantic.ease == {}
        assert result.semantic.get("ease") == {}

    def test_non_string_values_coerced(self):
        result = merge_config({"semantic": {"radius": {"none": 0}}})
        assert result.semantic.radius == {"none": "0"}

    def test_unknown_keys_ignored(self):
        result = merge_config({"colors": {"primary": "#fff"}, "semantic": {"palette": {}}})
        assert result == DEFAULT_CONFIG

    def test_does_not_mutate_defaults(self):
        merge_config({"semantic": {"space": {"sm": "size-1"}}})
        assert DEFAULT_CONFIG.semantic.space["sm"] == "size-3"
        assert "xs" in DEFAULT_CONFIG.semantic.space

    def test_default_result_is_independent(self):
        result = merge_config(None)
        assert result is not DEFAULT_CONFIG
        result.semantic.space["sm"] = "size-9"
        assert DEFAULT_CONFIG.semantic.space["sm"] == "size-3"
        assert merge_config({}).semantic.space["sm"] == "size-3"

    def test_invalid_section_shape(self):
        with pytest.raises(ConfigError):
            merge_config({"prefixes": ["op", "md"]})

    def test_invalid_format(self):
        with pytest.raises(ConfigError):
            merge_config({"format": "cmyk"})

    def test_returns_token_config(self):
        assert isinstance(merge_config({"format": "rgb"}), TokenConfig)
