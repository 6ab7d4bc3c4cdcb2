#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created configuration facade for ziran-sort
# - Uses config_loader for loading and config_validator for validation
# - Command-line arguments are merged over the file values
#

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
config_manager.py - Configuration management for ziran-sort
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from .compare_options import CompareOptions
from .config_loader import ConfigLoader
from .config_schema import CONFIG_FILENAME
from .config_validator import ConfigValidationError, ConfigValidator

# Command-line argument name -> configuration dot path
ARG_MAPPING = {
    "number_string_policy": "compare.number_string_policy",
    "chinese_number_policy": "compare.chinese_number_policy",
    "reverse": "sorting.reverse",
    "unique": "sorting.unique",
    "strip": "sorting.strip",
    "keep_empty": "sorting.skip_empty",
    "encoding": "input.encoding",
}

# Flags whose presence means False for the mapped setting
_INVERTED_ARGS = {"keep_empty"}


class ConfigManager:
    """Manages configuration for ziran-sort."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: ziran_config.yml)
            logger: Logger instance

        Raises:
            ValueError: If the configuration file is malformed or invalid
                (ConfigValidationError once the error has been printed)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = config_path or Path(CONFIG_FILENAME)

        self.loader = ConfigLoader(self.config_path, self.logger)
        self.validator = ConfigValidator(self.logger)

        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load, validate and merge configuration."""
        try:
            config = self.loader.load_config()
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark is not None else ""
            raise ValueError(f"Failed to parse {self.config_path}{where}: {getattr(e, 'problem', None) or e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read configuration file {self.config_path}: {e}") from e

        defaults = self.loader.get_default_config()
        merged = self.loader.merge_with_defaults(config)

        # Validate the merged view so partial files only need the keys they change
        first_error = self.validator.validate_config_first_error(merged, defaults, self.loader.get_config_lines())
        if first_error:
            self.validator.report_single_error(first_error, self.loader.get_config_lines())
            raise ConfigValidationError(first_error["message"])

        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'compare.number_string_policy')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_compare_options(self) -> CompareOptions:
        """Build CompareOptions from the 'compare' section."""
        return CompareOptions.from_dict(self.get("compare", {}))

    def update_with_args(self, args: Any) -> dict[str, Any]:
        """
        Update configuration with command-line arguments.
        Arguments left at None keep the file value; flags given as --no-<flag>
        arrive as False and override it.

        Args:
            args: Parsed command-line arguments

        Returns:
            Updated configuration dictionary
        """
        config = copy.deepcopy(self.config)

        for arg_name, key_path in ARG_MAPPING.items():
            value = getattr(args, arg_name, None)
            if value is None:
                continue
            if arg_name in _INVERTED_ARGS:
                value = not value

            section, key = key_path.split(".")
            config[section][key] = value
            self.logger.debug(f"Command-line override: {key_path} = {value}")

        self.config = config
        return config
