#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for config_validator module.
"""

import copy

import pytest
import yaml

from ziran_compare.config_schema import DEFAULT_CONFIG_TEMPLATE
from ziran_compare.config_validator import ConfigValidator, find_line_number


@pytest.fixture
def defaults():
    return yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)


@pytest.fixture
def validator():
    return ConfigValidator()


class TestFindLineNumber:
    """Test find_line_number."""

    LINES = [
        "# comment",
        "compare:",
        "  number_string_policy: numberFirst",
        "",
        "sorting:",
        "  reverse: true",
    ]

    def test_nested_key(self):
        assert find_line_number("compare.number_string_policy", self.LINES) == 3
        assert find_line_number("sorting.reverse", self.LINES) == 6

    def test_section(self):
        assert find_line_number("sorting", self.LINES) == 5

    def test_not_found(self):
        assert find_line_number("input.encoding", self.LINES) is None
        assert find_line_number("compare", []) is None


class TestValidateConfigFirstError:
    """Test ConfigValidator.validate_config_first_error."""

    def test_defaults_are_valid(self, validator, defaults):
        assert validator.validate_config_first_error(defaults, defaults, []) is None

    def test_unknown_section(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["colors"] = {}
        error = validator.validate_config_first_error(config, defaults, ["colors:"])
        assert error["type"] == "unknown_key"
        assert error["line"] == 1

    def test_missing_section(self, validator, defaults):
        config = copy.deepcopy(defaults)
        del config["input"]
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "missing_section"
        assert error["section"] == "input"

    def test_section_not_a_mapping(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["sorting"] = "yes"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "invalid_type"
        assert error["path"] == "sorting"

    def test_unknown_nested_key(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["compare"]["case_sensitive"] = True
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "unknown_key"
        assert error["key"] == "compare.case_sensitive"

    def test_invalid_policy(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["compare"]["chinese_number_policy"] = "sometimes"
        lines = ["compare:", "  chinese_number_policy: sometimes"]
        error = validator.validate_config_first_error(config, defaults, lines)
        assert error["type"] == "invalid_value"
        assert error["line"] == 2
        assert "mixed, first, last" in error["message"]

    def test_snake_case_policy_names_accepted(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["compare"]["number_string_policy"] = "string_first"
        config["compare"]["chinese_number_policy"] = "LAST"
        assert validator.validate_config_first_error(config, defaults, []) is None

    def test_non_string_policy(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["compare"]["number_string_policy"] = 1
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "invalid_value"
        assert error["path"] == "compare.number_string_policy"

    def test_invalid_log_level(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["logging"]["level"] = "LOUD"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "logging.level"

    def test_invalid_bool(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["sorting"]["reverse"] = "yes please"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "invalid_type"
        assert error["path"] == "sorting.reverse"

    def test_bool_is_not_a_number(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["input"]["confidence_threshold"] = True
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "input.confidence_threshold"

    def test_int_threshold_accepted(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["input"]["confidence_threshold"] = 1
        assert validator.validate_config_first_error(config, defaults, []) is None

    def test_reports_only_first_error(self, validator, defaults):
        config = copy.deepcopy(defaults)
        config["compare"]["number_string_policy"] = "bad"
        config["logging"]["level"] = "bad"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "compare.number_string_policy"


class TestReportSingleError:
    """Test ConfigValidator.report_single_error."""

    def test_with_line(self, validator, capsys):
        lines = ["compare:", "  chinese_number_policy: [sometimes]"]
        error = {"type": "invalid_value", "line": 2, "message": "Invalid value"}
        validator.report_single_error(error, lines)
        err = capsys.readouterr().err
        assert "line 2:" in err
        assert "chinese_number_policy: [sometimes]" in err

    def test_without_line(self, validator, capsys):
        validator.report_single_error({"type": "missing_section", "line": None, "message": "Expected section"}, [])
        assert "Configuration error: Expected section" in capsys.readouterr().err
