#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to validate ziran-sort configuration
# - Validation stops at the first error and reports it with its line number
#

"""
config_validator.py - Configuration validation utilities for ziran-sort
"""

from __future__ import annotations

import logging
from typing import Any

from rich.markup import escape

from .common_print_utils import safe_print
from .compare_options import CompareOptions
from .config_schema import REQUIRED_SECTIONS, VALID_VALUES, VALUE_TYPES

_MISSING = object()


class ConfigValidationError(ValueError):
    """A configuration error that has already been reported on the console."""


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the line number of a configuration key in the YAML file.

    Args:
        key_path: Dot-separated path to key
        config_lines: Configuration file lines

    Returns:
        1-based line number or None if not found
    """
    if not config_lines:
        return None

    keys = key_path.split(".")
    depth = 0

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = len(line) - len(line.lstrip())
        # 2-space YAML indentation
        if indent == depth * 2 and stripped.startswith(f"{keys[depth]}:"):
            if depth == len(keys) - 1:
                return i
            depth += 1

    return None


def _lookup(config: dict[str, Any], key_path: str) -> Any:
    value: Any = config
    for key in key_path.split("."):
        if not isinstance(value, dict) or key not in value:
            return _MISSING
        value = value[key]
    return value


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def validate_config_first_error(
        self,
        config: dict[str, Any],
        defaults: dict[str, Any],
        config_lines: list[str],
    ) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration to validate
            defaults: Default configuration for reference
            config_lines: Configuration file lines for error reporting

        Returns:
            First error found or None if valid
        """
        for key in config:
            if key not in defaults:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "line": find_line_number(key, config_lines),
                    "message": f"Unknown or malformed key '{key}' found.",
                }

        for section, description in REQUIRED_SECTIONS.items():
            if section not in config:
                return {
                    "type": "missing_section",
                    "section": section,
                    "line": None,
                    "message": f"Expected section '{section}' not found ({description}).",
                }
            if not isinstance(config[section], dict):
                return {
                    "type": "invalid_type",
                    "path": section,
                    "line": find_line_number(section, config_lines),
                    "message": f"Section '{section}' must be a mapping of settings.",
                }

        for section, values in config.items():
            for key in values:
                if key not in defaults.get(section, {}):
                    path = f"{section}.{key}"
                    return {
                        "type": "unknown_key",
                        "key": path,
                        "line": find_line_number(path, config_lines),
                        "message": f"Unknown or malformed key '{path}' found.",
                    }

        for key, value in config["compare"].items():
            try:
                CompareOptions.from_dict({key: value})
            except ValueError as e:
                path = f"compare.{key}"
                return {
                    "type": "invalid_value",
                    "path": path,
                    "value": value,
                    "line": find_line_number(path, config_lines),
                    "message": str(e),
                }

        for path, valid_values in VALID_VALUES.items():
            value = _lookup(config, path)
            if value is not _MISSING and value not in valid_values:
                return {
                    "type": "invalid_value",
                    "path": path,
                    "value": value,
                    "valid_values": valid_values,
                    "line": find_line_number(path, config_lines),
                    "message": f"Invalid value '{value}' for {path}. Must be one of: {', '.join(valid_values)}",
                }

        for path, expected_type in VALUE_TYPES.items():
            value = _lookup(config, path)
            # bool is an int subclass; reject it for numeric settings
            is_bool_for_number = isinstance(value, bool) and expected_type is not bool
            if value is not _MISSING and (not isinstance(value, expected_type) or is_bool_for_number):
                return {
                    "type": "invalid_type",
                    "path": path,
                    "value": value,
                    "line": find_line_number(path, config_lines),
                    "message": f"Invalid type for {path}: got {type(value).__name__}",
                }

        return None

    def report_single_error(self, error: dict[str, Any], config_lines: list[str]) -> None:
        """
        Report a single validation error on the console.

        Args:
            error: Error information from validate_config_first_error
            config_lines: Configuration file lines
        """
        line = error.get("line")
        self.logger.error(f"Configuration error: {error['message']}")

        if line is None:
            safe_print(f"[bold red]Configuration error:[/bold red] {escape(error['message'])}")
            return

        safe_print(f"[bold red]line {line}:[/bold red] {escape(error['message'])}")
        if 0 < line <= len(config_lines):
            safe_print(f"  {config_lines[line - 1].strip()}", markup=False)
