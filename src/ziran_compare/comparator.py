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
# - Merged the two comparison implementations into one module
# - Added heuristic re-tokenization for single-text vs multi-token pairs
# - Added cmp_to_key based sort helpers
#

"""
comparator.py - Natural order comparison of mixed Chinese/Arabic numeral text
============================================================================

Compares two strings token by token, reading embedded numerals (1, 10, 十,
贰拾叁 ...) as integers so that 第九章 sorts before 第十章 and 文件2 before
文件10.

Example:
    >>> compare("文件2", "文件10")
    -1
    >>> natural_sorted(["第十章", "第二章", "第1章"])
    ['第1章', '第二章', '第十章']
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, TypeVar, Union

from .collator import DEFAULT_COLLATOR, Collator
from .compare_options import (
    DEFAULT_OPTIONS,
    ChineseNumberPolicy,
    CompareOptions,
    NumberStringPolicy,
)
from .models import NumberToken, TextToken, Token
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

T = TypeVar("T")

OptionsLike = Optional[Union[CompareOptions, Mapping[str, Any]]]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _resolve_options(options: OptionsLike) -> CompareOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, CompareOptions):
        return options
    return CompareOptions.from_dict(options)


def common_prefix_length(a: str, b: str) -> int:
    """Length of the longest common character prefix of two strings."""
    limit = min(len(a), len(b))
    for i in range(limit):
        if a[i] != b[i]:
            return i
    return limit


def _split_single(single: TextToken, first: TextToken) -> list[Token] | None:
    """Split a lone text token at its common prefix with another text token."""
    length = common_prefix_length(single.text, first.text)
    if length == 0:
        return None

    prefix = single.text[:length]
    suffix = single.text[length:]
    logger.debug(f"Heuristic split of '{single.text}' into '{prefix}' + '{suffix}'")
    if suffix:
        return [TextToken(prefix), TextToken(suffix)]
    return [TextToken(prefix)]


def _is_lone_text(tokens: Sequence[Token]) -> bool:
    return len(tokens) == 1 and not tokens[0].is_number


def _starts_multi_with_text(tokens: Sequence[Token]) -> bool:
    return len(tokens) > 1 and not tokens[0].is_number


def apply_heuristic_tokenization(
    tokens_a: list[Token],
    tokens_b: list[Token],
) -> tuple[list[Token], list[Token]]:
    """
    Align token boundaries when one side is a single text token.

    "文件a" tokenizes as one text token while "文件1" gives [文件, 1]. Splitting
    the single side at the common prefix ([文件, a]) lets the positions line
    up. At most one side is changed, and only once.

    Args:
        tokens_a: Tokens of the first string
        tokens_b: Tokens of the second string

    Returns:
        The (possibly adjusted) pair of token lists
    """
    if _is_lone_text(tokens_a) and _starts_multi_with_text(tokens_b):
        split = _split_single(tokens_a[0], tokens_b[0])  # type: ignore[arg-type]
        if split:
            return split, tokens_b

    if _is_lone_text(tokens_b) and _starts_multi_with_text(tokens_a):
        split = _split_single(tokens_b[0], tokens_a[0])  # type: ignore[arg-type]
        if split:
            return tokens_a, split

    return tokens_a, tokens_b


def _compare_numbers(a: NumberToken, b: NumberToken, policy: ChineseNumberPolicy) -> int:
    if policy is not ChineseNumberPolicy.MIXED and a.is_chinese != b.is_chinese:
        chinese_first = policy is ChineseNumberPolicy.FIRST
        return -1 if a.is_chinese == chinese_first else 1

    return _sign(a.value - b.value)


def compare_tokens(
    token_a: Token | None,
    token_b: Token | None,
    options: CompareOptions = DEFAULT_OPTIONS,
    collator: Collator = DEFAULT_COLLATOR,
) -> int:
    """
    Compare two tokens at the same position.

    Args:
        token_a: Token from the first string, None past its end
        token_b: Token from the second string, None past its end
        options: Tie-break policies
        collator: Ranks text against text

    Returns:
        -1, 0 or 1
    """
    if token_a is None and token_b is None:
        return 0
    if token_a is None:
        return -1
    if token_b is None:
        return 1

    a_is_text = not token_a.is_number
    b_is_text = not token_b.is_number

    if a_is_text and b_is_text:
        return _sign(collator.compare(token_a.text, token_b.text))

    if not a_is_text and not b_is_text:
        return _compare_numbers(token_a, token_b, options.chinese_number_policy)  # type: ignore[arg-type]

    number_first = options.number_string_policy is NumberStringPolicy.NUMBER_FIRST
    if a_is_text:
        return 1 if number_first else -1
    return -1 if number_first else 1


def compare(
    a: str,
    b: str,
    options: OptionsLike = None,
    collator: Collator | None = None,
) -> int:
    """
    Compare two strings in natural order.

    Args:
        a: First string
        b: Second string
        options: CompareOptions, a mapping accepted by CompareOptions.from_dict,
            or None for the defaults
        collator: Text collator, defaults to the pinyin collator

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they are order-equal

    Raises:
        TypeError: If a or b is not a string
        ValueError: If options is a mapping with invalid values
    """
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError(f"compare() expects two strings, got {type(a).__name__} and {type(b).__name__}")

    resolved = _resolve_options(options)
    text_collator = collator or DEFAULT_COLLATOR

    tokens_a, tokens_b = apply_heuristic_tokenization(tokenize(a), tokenize(b))

    for i in range(max(len(tokens_a), len(tokens_b))):
        token_a = tokens_a[i] if i < len(tokens_a) else None
        token_b = tokens_b[i] if i < len(tokens_b) else None
        result = compare_tokens(token_a, token_b, resolved, text_collator)
        if result != 0:
            return result

    return 0


def sort_key(options: OptionsLike = None, collator: Collator | None = None) -> Callable[[str], Any]:
    """
    Build a key function for sorted()/list.sort().

    Args:
        options: Comparison options
        collator: Text collator

    Returns:
        A functools.cmp_to_key key class
    """
    resolved = _resolve_options(options)

    def _cmp(a: str, b: str) -> int:
        return compare(a, b, resolved, collator)

    return functools.cmp_to_key(_cmp)


def natural_sorted(
    items: Iterable[T],
    options: OptionsLike = None,
    reverse: bool = False,
    collator: Collator | None = None,
    key: Callable[[T], str] | None = None,
) -> list[T]:
    """
    Return a new list sorted in natural order.

    Args:
        items: Strings, or arbitrary objects together with ``key``
        options: Comparison options
        reverse: Sort descending
        collator: Text collator
        key: Extracts the string to compare from each item

    Returns:
        Sorted list
    """
    cmp_key = sort_key(options, collator)
    if key is None:
        return sorted(items, key=cmp_key, reverse=reverse)  # type: ignore[arg-type]
    return sorted(items, key=lambda item: cmp_key(key(item)), reverse=reverse)
