#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created command-line parsing for ziran-sort
# - Split parser construction into _add_input_args, _add_compare_args, _add_sorting_args
# - Sorting flags accept --no- forms to override the configuration file
#

"""
cli_parser.py - Command-line argument parsing for ziran-sort
============================================================

Handles parsing and validation of command-line arguments. Policy and
sorting options default to None so that unset options keep the values from
the configuration file; sorting flags also take a --no- form (--no-reverse)
to switch off a setting the configuration file turns on.
"""

from __future__ import annotations

import argparse

from .compare_options import ChineseNumberPolicy, NumberStringPolicy
from .config_schema import CONFIG_FILENAME


def get_epilog_text() -> str:
    """Usage examples shown at the end of --help."""
    return """
USAGE EXAMPLES:

  Sort the lines of a file:
    $ ziran-sort chapters.txt

  Sort stdin, Chinese numerals before Arabic ones, descending:
    $ cat titles.txt | ziran-sort - --chinese-number-policy first --reverse

  Compare two strings (prints -1, 0 or 1):
    $ ziran-sort --compare 第九章 第十章

  Write a commented default configuration file:
    $ ziran-sort --init-config
"""


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    """Add input and configuration arguments to the parser.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument(
        "files",
        nargs="*",
        help="Text files whose lines are sorted. Use '-' for stdin",
    )

    parser.add_argument(
        "--compare",
        nargs=2,
        metavar=("A", "B"),
        help="Compare two strings and print -1, 0 or 1 instead of sorting",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=CONFIG_FILENAME,
        help=f"Path to configuration file (default: {CONFIG_FILENAME})",
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the default configuration file to --config and exit",
    )

    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Character encoding of input files, e.g. utf-8, gb18030, big5 (default: detect)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )


def _add_compare_args(parser: argparse.ArgumentParser) -> None:
    """Add comparison policy arguments to the parser."""
    parser.add_argument(
        "--number-string-policy",
        choices=[policy.value for policy in NumberStringPolicy],
        default=None,
        help="Whether numbers sort before text (numberFirst) or after it (stringFirst)",
    )

    parser.add_argument(
        "--chinese-number-policy",
        choices=[policy.value for policy in ChineseNumberPolicy],
        default=None,
        help="mixed: compare by value; first: Chinese numerals first; last: Arabic numerals first",
    )


def _add_sorting_args(parser: argparse.ArgumentParser) -> None:
    """Add sorting behaviour arguments to the parser."""
    # --no-<flag> switches off a setting enabled in the configuration file
    parser.add_argument(
        "--reverse", "-r", action=argparse.BooleanOptionalAction, default=None, help="Sort in descending order"
    )
    parser.add_argument(
        "--unique", "-u", action=argparse.BooleanOptionalAction, default=None, help="Output each distinct line once"
    )
    parser.add_argument(
        "--strip", action=argparse.BooleanOptionalAction, default=None, help="Strip surrounding whitespace from lines"
    )
    parser.add_argument(
        "--keep-empty", action=argparse.BooleanOptionalAction, default=None, help="Keep blank lines in the output"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the ziran-sort argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="ziran-sort",
        description="Sort text in natural order, reading Chinese and Arabic numerals as numbers.",
        epilog=get_epilog_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_input_args(parser)
    _add_compare_args(parser)
    _add_sorting_args(parser)
    return parser


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate argument combinations, exiting through parser.error on misuse.

    Args:
        args: Parsed arguments
        parser: The parser, used for error reporting
    """
    if args.init_config:
        return

    if args.compare and args.files:
        parser.error("--compare cannot be combined with input files")

    if not args.compare and not args.files:
        parser.error("no input files given (use '-' to read stdin)")
