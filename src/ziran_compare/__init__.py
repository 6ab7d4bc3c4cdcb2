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
ziran-compare - Natural order comparison for mixed Chinese/Arabic numeral text

Reads embedded numerals such as 10, 十 or 拾 as numbers so that 第九章 sorts
before 第十章 and 文件2 before 文件10.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

from .chinese_numerals import is_valid_chinese_number, parse_chinese_number
from .collator import DEFAULT_COLLATOR, Collator, PinyinCollator
from .compare_options import (
    DEFAULT_OPTIONS,
    ChineseNumberPolicy,
    CompareOptions,
    NumberStringPolicy,
)
from .comparator import (
    apply_heuristic_tokenization,
    compare,
    compare_tokens,
    natural_sorted,
    sort_key,
)
from .models import NumberNotation, NumberToken, TextToken, Token
from .numeral_constants import CHINESE_NUMERAL_MAP, get_numeral_value
from .tokenizer import join_tokens, tokenize

__all__ = [
    "compare",
    "compare_tokens",
    "apply_heuristic_tokenization",
    "natural_sorted",
    "sort_key",
    "CompareOptions",
    "NumberStringPolicy",
    "ChineseNumberPolicy",
    "DEFAULT_OPTIONS",
    "Collator",
    "PinyinCollator",
    "DEFAULT_COLLATOR",
    "tokenize",
    "join_tokens",
    "Token",
    "TextToken",
    "NumberToken",
    "NumberNotation",
    "parse_chinese_number",
    "is_valid_chinese_number",
    "get_numeral_value",
    "CHINESE_NUMERAL_MAP",
]
