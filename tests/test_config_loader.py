#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for config_loader module.
"""

import pytest
import yaml

from ziran_compare.config_loader import ConfigLoader, deep_merge, load_yaml_mapping
from ziran_compare.config_schema import DEFAULT_CONFIG_TEMPLATE, REQUIRED_SECTIONS


class TestLoadYamlMapping:
    """Test load_yaml_mapping."""

    def test_mapping(self, write_config):
        path = write_config("compare:\n  chinese_number_policy: first\n")
        assert load_yaml_mapping(path) == {"compare": {"chinese_number_policy": "first"}}

    def test_empty_file(self, write_config):
        assert load_yaml_mapping(write_config("")) == {}

    def test_non_mapping_root(self, write_config):
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_yaml_mapping(write_config("- a\n- b\n"))

    def test_invalid_yaml(self, write_config):
        with pytest.raises(yaml.YAMLError):
            load_yaml_mapping(write_config("compare: [unclosed\n"))


class TestDeepMerge:
    """Test deep_merge."""

    def test_nested_override(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        override = {"a": {"y": 20}}
        assert deep_merge(base, override) == {"a": {"x": 1, "y": 20}, "b": 3}

    def test_inputs_unchanged(self):
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}

    def test_non_dict_replaces(self):
        assert deep_merge({"a": {"x": 1}}, {"a": 5}) == {"a": 5}


class TestConfigLoader:
    """Test ConfigLoader."""

    def test_default_template_is_complete(self):
        defaults = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        assert set(defaults) == set(REQUIRED_SECTIONS)
        assert defaults["compare"] == {"number_string_policy": "numberFirst", "chinese_number_policy": "mixed"}
        assert defaults["sorting"]["skip_empty"] is True
        assert defaults["input"]["fallback_encodings"] == ["utf-8", "gb18030", "big5", "utf-16"]

    def test_missing_file_returns_defaults(self, tmp_path):
        loader = ConfigLoader(tmp_path / "missing.yml")
        assert loader.load_config() == loader.get_default_config()
        assert loader.get_config_lines() == []
        assert not (tmp_path / "missing.yml").exists()

    def test_empty_file_returns_defaults(self, write_config):
        loader = ConfigLoader(write_config("# nothing here\n"))
        assert loader.load_config() == loader.get_default_config()

    def test_loads_file_and_lines(self, write_config):
        loader = ConfigLoader(write_config("sorting:\n  reverse: true\n"))
        assert loader.load_config() == {"sorting": {"reverse": True}}
        assert loader.get_config_lines()[:2] == ["sorting:", "  reverse: true"]

    def test_merge_with_defaults(self, tmp_path):
        loader = ConfigLoader(tmp_path / "unused.yml")
        merged = loader.merge_with_defaults({"sorting": {"reverse": True}})
        assert merged["sorting"]["reverse"] is True
        assert merged["sorting"]["unique"] is False
        assert merged["compare"]["chinese_number_policy"] == "mixed"

    def test_write_default_config(self, tmp_path):
        path = tmp_path / "ziran_config.yml"
        loader = ConfigLoader(path)
        assert loader.write_default_config() is True
        assert path.read_text(encoding="utf-8") == DEFAULT_CONFIG_TEMPLATE

        path.write_text("sorting:\n  reverse: true\n", encoding="utf-8")
        assert loader.write_default_config() is False
        assert "reverse: true" in path.read_text(encoding="utf-8")

        assert loader.write_default_config(overwrite=True) is True
        assert path.read_text(encoding="utf-8") == DEFAULT_CONFIG_TEMPLATE
