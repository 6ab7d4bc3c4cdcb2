#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created setup helpers for configuration and logging of ziran-sort
#

"""
cli_setup.py - CLI setup and initialization
==========================================

Handles initialization of configuration and logging for the ziran-sort
command line tool.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Tuple

from rich.markup import escape

from .common_print_utils import safe_print
from .config_manager import ConfigManager
from .config_validator import ConfigValidationError


def setup_configuration(config_path: str | Path) -> Tuple[ConfigManager, dict[str, Any]]:
    """Load and validate configuration from the config file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Tuple of (ConfigManager instance, configuration dictionary)
    """
    try:
        config_manager = ConfigManager(config_path=Path(config_path))
        return config_manager, config_manager.config
    except ConfigValidationError:
        # Already printed with its line number
        safe_print("Please fix the configuration file or delete it to use the defaults.")
        sys.exit(1)
    except ValueError as e:
        safe_print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        safe_print("Please fix the configuration file or delete it to use the defaults.")
        sys.exit(1)


def setup_logging(config: dict[str, Any], verbose: bool = False) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary
        verbose: Force DEBUG level

    Returns:
        Configured logger instance
    """
    log_level = logging.DEBUG if verbose else getattr(logging, config["logging"]["level"], logging.WARNING)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format, stream=sys.stderr)
    logger = logging.getLogger("ziran_compare")
    logger.setLevel(log_level)

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"], encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")

    return logger
