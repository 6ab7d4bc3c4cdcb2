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

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module for validating and converting Chinese numeral runs
# - Runs of bare digit characters without a unit are rejected
# - Adjacent hundred/thousand units are rejected in any combination
#

"""
chinese_numerals.py - Chinese numeral run validation and conversion
===================================================================

Converts a run of Chinese numeral characters such as 一千零一十 or 贰拾叁 into
an integer. Runs that do not read as a deliberate numeral (unit words on
their own, doubled units, strings of bare digits) are rejected so that the
tokenizer can keep them as literal text.
"""

from __future__ import annotations

import re

from .numeral_constants import (
    CHINESE_NUMERAL_MAP,
    DIGIT_CHARS,
    HUNDRED_CLASS_CHARS,
    TEN_CHARS,
    ZERO_CHARS,
    is_unit_value,
)

_HUNDRED_CLASS = "".join(sorted(HUNDRED_CLASS_CHARS))

# 百, 千千, 佰仟 ... unit words alone are not numerals
_UNITS_ONLY_RE = re.compile(rf"^[{_HUNDRED_CLASS}]+$")

# 千千, 一千百 ... two hundred/thousand units next to each other
_REPEATED_UNITS_RE = re.compile(rf"[{_HUNDRED_CLASS}]{{2,}}")


def is_valid_chinese_number(run: str) -> bool:
    """
    Check whether a run of characters reads as a Chinese numeral.

    Args:
        run: Candidate run, normally a maximal run of numeral characters

    Returns:
        True if the run can be converted by parse_chinese_number
    """
    if not run:
        return False

    if any(char not in CHINESE_NUMERAL_MAP for char in run):
        return False

    if _UNITS_ONLY_RE.match(run):
        return False

    if _REPEATED_UNITS_RE.search(run):
        return False

    # 一二三 is a list of digits, not a number
    if len(run) > 1 and all(char in DIGIT_CHARS for char in run):
        return False

    return True


def parse_chinese_number(run: str) -> int | None:
    """
    Convert a Chinese numeral run to an integer.

    A unit multiplies the pending digit (an implicit one when there is none,
    so 十二 is 12) and a digit replaces the pending digit, which lets zero
    placeholders such as 一千零一十 fall out naturally.

    Args:
        run: Run of Chinese numeral characters

    Returns:
        The integer value, or None if the run is not a valid numeral
    """
    if not is_valid_chinese_number(run):
        return None

    if run in ZERO_CHARS:
        return 0
    if run in TEN_CHARS:
        return 10

    result = 0
    current = 0
    for char in run:
        value = CHINESE_NUMERAL_MAP[char]
        if is_unit_value(value):
            result += (current or 1) * value
            current = 0
        else:
            current = value

    return result + current
