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
numeral_constants.py - Chinese numeral character tables
=======================================================

Maps single Chinese numeral characters (common and financial forms) to
their digit or unit value. The tables are read-only module constants.
"""

from __future__ import annotations

from types import MappingProxyType

# Conversion tables
_DIGITS = {
    "零": 0,
    "〇": 0,
    "一": 1,
    "壹": 1,
    "二": 2,
    "贰": 2,
    "三": 3,
    "叁": 3,
    "四": 4,
    "肆": 4,
    "五": 5,
    "伍": 5,
    "六": 6,
    "陆": 6,
    "七": 7,
    "柒": 7,
    "八": 8,
    "捌": 8,
    "九": 9,
    "玖": 9,
}

_UNITS = {
    "十": 10,
    "拾": 10,
    "百": 100,
    "佰": 100,
    "千": 1000,
    "仟": 1000,
}

CHINESE_NUMERAL_MAP = MappingProxyType({**_DIGITS, **_UNITS})

DIGIT_CHARS = frozenset(_DIGITS)
UNIT_CHARS = frozenset(_UNITS)
ZERO_CHARS = frozenset(ch for ch, val in _DIGITS.items() if val == 0)
TEN_CHARS = frozenset(ch for ch, val in _UNITS.items() if val == 10)

# 百/佰/千/仟: units that never stand alone as a numeral
HUNDRED_CLASS_CHARS = frozenset(ch for ch, val in _UNITS.items() if val >= 100)

# Character class body for regex patterns, e.g. rf"[{NUMERAL_ALPHABET}]+"
NUMERAL_ALPHABET = "".join(CHINESE_NUMERAL_MAP)


def get_numeral_value(char: str) -> int | None:
    """
    Look up the value of a single Chinese numeral character.

    Args:
        char: A single character

    Returns:
        0-9 for digit characters, 10/100/1000 for unit characters,
        None when the character is not a Chinese numeral
    """
    if not isinstance(char, str) or len(char) != 1:
        return None
    return CHINESE_NUMERAL_MAP.get(char)


def is_numeral_char(char: str) -> bool:
    """Check whether a character belongs to the numeral alphabet."""
    return get_numeral_value(char) is not None


def is_unit_value(value: int) -> bool:
    """Units are 10, 100 and 1000; everything below ten is a digit."""
    return value >= 10
