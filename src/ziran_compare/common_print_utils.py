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
Console output helpers.

Status and error messages go to stderr through rich; sorted data goes to
stdout untouched so that square brackets in user text are never read as
rich markup.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from rich.console import Console

# Messages for the user; stdout is reserved for results
console = Console(stderr=True)


def safe_print(*args: Any, markup: bool = True, **kwargs: Any) -> None:
    """Print a status message with rich formatting on stderr.

    Args:
        *args: Objects to print
        markup: Interpret [bold]...[/bold] style markup
        **kwargs: Extra keyword arguments for Console.print
    """
    console.print(*args, markup=markup, highlight=False, **kwargs)


def write_lines(lines: Iterable[str], stream: TextIO | None = None) -> int:
    """Write result lines verbatim, one per line.

    Args:
        lines: Lines without trailing newlines
        stream: Output stream (default: sys.stdout)

    Returns:
        Number of lines written
    """
    out = stream or sys.stdout
    count = 0
    for line in lines:
        out.write(line)
        out.write("\n")
        count += 1
    out.flush()
    return count
