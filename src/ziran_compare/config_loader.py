#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to handle configuration loading and merging
# - Missing configuration files fall back to the built-in defaults
# - Default file is only written on request (write_default_config)
#

"""
config_loader.py - Configuration loading and merging utilities for ziran-sort
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .config_schema import DEFAULT_CONFIG_TEMPLATE


def load_yaml_mapping(yaml_path: str | Path) -> dict[str, Any]:
    """
    Load a YAML file whose root must be a mapping.

    Args:
        yaml_path: Path to the YAML file

    Returns:
        Loaded dictionary, empty for an empty file

    Raises:
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the root is not a mapping
        OSError: If the file cannot be read
    """
    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"{yaml_path} must contain a mapping at the root level, got {type(data).__name__}")

    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge two nested dictionaries, values from override win.

    Args:
        base: Base configuration
        override: Overriding configuration

    Returns:
        New merged dictionary
    """
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """Handles loading and merging of configuration files."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file
            logger: Logger instance
        """
        self.config_path = config_path
        self.logger = logger or logging.getLogger(__name__)
        self._config_lines: list[str] = []

    def load_config(self) -> dict[str, Any]:
        """
        Load configuration from file, or the defaults if there is no file.

        Returns:
            Configuration dictionary (not yet merged with defaults)

        Raises:
            yaml.YAMLError: If the file is not valid YAML
            ValueError: If the file root is not a mapping
        """
        if not self.config_path.exists():
            self.logger.debug(f"Configuration file {self.config_path} not found. Using defaults.")
            return self.get_default_config()

        config = load_yaml_mapping(self.config_path)
        self._config_lines = self.config_path.read_text(encoding="utf-8").split("\n")

        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()

        return config

    def write_default_config(self, overwrite: bool = False) -> bool:
        """
        Write the commented default configuration file.

        Args:
            overwrite: Replace an existing file

        Returns:
            True if the file was written, False if it already existed
        """
        if self.config_path.exists() and not overwrite:
            self.logger.info(f"Configuration file already exists: {self.config_path}")
            return False

        self.config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
        self.logger.info(f"Default configuration file created at: {self.config_path}")
        return True

    def get_default_config(self) -> dict[str, Any]:
        """Get the default configuration as a dictionary."""
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge user config over the defaults so every key exists."""
        return deep_merge(self.get_default_config(), config)

    def get_config_lines(self) -> list[str]:
        """Configuration file lines, used to point errors at a line number."""
        return self._config_lines
