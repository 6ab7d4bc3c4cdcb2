#!/usr/bin/env python3
# -*- coding: utf-8 -*-

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
ziran_cli.py - ziran-sort command line entry point
==================================================

Sorts the lines of text files (or stdin) in natural order, or compares two
strings with --compare.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from rich.markup import escape

from .cli_parser import create_parser, validate_args
from .cli_setup import setup_configuration, setup_logging
from .common_print_utils import safe_print, write_lines
from .compare_options import CompareOptions
from .comparator import compare, natural_sorted
from .config_loader import ConfigLoader
from .file_handler import read_lines


def sort_lines(
    lines: Iterable[str],
    options: CompareOptions,
    reverse: bool = False,
    unique: bool = False,
    strip: bool = False,
    skip_empty: bool = True,
) -> list[str]:
    """
    Apply the sorting settings to a list of lines.

    Args:
        lines: Input lines
        options: Comparison options
        reverse: Sort descending
        unique: Keep only the first copy of identical lines
        strip: Strip surrounding whitespace first
        skip_empty: Drop blank lines

    Returns:
        Sorted lines
    """
    prepared = [line.strip() if strip else line for line in lines]
    if skip_empty:
        prepared = [line for line in prepared if line.strip()]

    result = natural_sorted(prepared, options, reverse=reverse)
    if unique:
        result = list(dict.fromkeys(result))
    return result


def _collect_lines(files: list[str], config: dict[str, Any], logger: logging.Logger) -> list[str]:
    """Read all input files, exiting with status 1 on the first failure."""
    input_config = config["input"]
    lines: list[str] = []
    for source in files:
        try:
            lines.extend(
                read_lines(
                    source,
                    encoding=input_config["encoding"],
                    detector=input_config["encoding_detector"],
                    confidence_threshold=input_config["confidence_threshold"],
                    fallback_encodings=input_config["fallback_encodings"],
                )
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {source}: {e}")
            safe_print(f"[bold red]Cannot read {escape(str(source))}:[/bold red] {escape(str(e))}")
            sys.exit(1)
    return lines


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the ziran-sort CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    validate_args(args, parser)

    if args.init_config:
        written = ConfigLoader(Path(args.config)).write_default_config()
        if written:
            safe_print(f"[green]Default configuration written to {args.config}[/green]")
        else:
            safe_print(f"[yellow]{args.config} already exists, not overwritten[/yellow]")
        return

    config_manager, _ = setup_configuration(args.config)
    logger = setup_logging(config_manager.config, verbose=args.verbose)
    config = config_manager.update_with_args(args)
    options = config_manager.get_compare_options()
    logger.debug(f"Compare options: {options.to_dict()}")

    if args.compare:
        a, b = args.compare
        write_lines([str(compare(a, b, options))])
        return

    lines = _collect_lines(args.files, config, logger)
    sorting = config["sorting"]
    result = sort_lines(
        lines,
        options,
        reverse=sorting["reverse"],
        unique=sorting["unique"],
        strip=sorting["strip"],
        skip_empty=sorting["skip_empty"],
    )
    logger.info(f"Sorted {len(result)} lines from {len(args.files)} input(s)")
    write_lines(result)


if __name__ == "__main__":
    main()
