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
tokenizer.py - Split strings into text and number tokens
========================================================

A single left-to-right scan recognizes runs of ASCII digits and runs of
Chinese numeral characters; everything between them is literal text.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .chinese_numerals import parse_chinese_number
from .models import NumberNotation, NumberToken, TextToken, Token
from .numeral_constants import NUMERAL_ALPHABET

logger = logging.getLogger(__name__)

# [0-9] rather than \d: full-width and other Unicode digits stay literal text
TOKENIZE_RE = re.compile(rf"(?P<arabic>[0-9]+)|(?P<chinese>[{NUMERAL_ALPHABET}]+)")


def _arabic_value(digits: str) -> int:
    # int() refuses very long digit strings (sys.get_int_max_str_digits)
    value = 0
    for start in range(0, len(digits), 1000):
        chunk = digits[start : start + 1000]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def tokenize(text: str) -> list[Token]:
    """
    Tokenize a string into alternating text and number tokens.

    Chinese numeral runs that fail validation are kept as literal text and
    merged with the surrounding text, so the result never holds two
    adjacent TextToken objects.

    Args:
        text: Input string

    Returns:
        List of tokens; empty for an empty string
    """
    tokens: list[Token] = []
    pending_text: list[str] = []
    last_index = 0

    def flush_text() -> None:
        if pending_text:
            tokens.append(TextToken("".join(pending_text)))
            pending_text.clear()

    for match in TOKENIZE_RE.finditer(text):
        if match.start() > last_index:
            pending_text.append(text[last_index : match.start()])
        last_index = match.end()

        arabic = match.group("arabic")
        if arabic:
            flush_text()
            tokens.append(NumberToken(_arabic_value(arabic), NumberNotation.ARABIC, arabic))
            continue

        chinese = match.group("chinese")
        value = parse_chinese_number(chinese)
        if value is None:
            logger.debug(f"Keeping '{chinese}' as text: not a valid Chinese numeral")
            pending_text.append(chinese)
        else:
            flush_text()
            tokens.append(NumberToken(value, NumberNotation.CHINESE, chinese))

    if last_index < len(text):
        pending_text.append(text[last_index:])
    flush_text()

    return tokens


def join_tokens(tokens: Iterable[Token]) -> str:
    """Rebuild the source string from its tokens."""
    return "".join(token.text for token in tokens)
