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
collator.py - Ordering of literal text spans
============================================

The comparator hands every text-vs-text token pair to a collator. The
default collator orders Chinese text by its pinyin reading, the way zh-CN
collation does, and falls back to the raw characters to break ties.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol

from pypinyin import Style, lazy_pinyin


class Collator(Protocol):
    """Anything that can rank two text spans."""

    def compare(self, a: str, b: str) -> int:
        """Return a negative number, zero or a positive number."""
        ...


@lru_cache(maxsize=4096)
def pinyin_reading(text: str) -> tuple[str, ...]:
    """
    Get the case-folded pinyin reading of a text span.

    Non-Chinese characters are kept as they are, grouped into runs, so
    'ID号' reads as ('id', 'hao').

    Args:
        text: Text span

    Returns:
        Tuple of syllables
    """
    return tuple(syllable.casefold() for syllable in lazy_pinyin(text, style=Style.NORMAL, errors="default"))


class PinyinCollator:
    """Collate text by pinyin reading, then by code point."""

    def compare(self, a: str, b: str) -> int:
        if a == b:
            return 0

        reading_a = pinyin_reading(a)
        reading_b = pinyin_reading(b)
        if reading_a != reading_b:
            return -1 if reading_a < reading_b else 1

        # Homophones and case variants: keep the order total
        return -1 if a < b else 1


DEFAULT_COLLATOR = PinyinCollator()
