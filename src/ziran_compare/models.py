#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Added NumberNotation enum
# - Added TextToken and NumberToken value classes
#

"""Token models produced by the tokenizer and consumed by the comparator."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class NumberNotation(enum.Enum):
    """How a numeric token was written in the source text."""

    ARABIC = "arabic"
    """Written with ASCII digits, e.g. 42."""
    CHINESE = "chinese"
    """Written with Chinese numeral characters, e.g. 四十二 or 肆拾贰."""


@dataclass(frozen=True)
class TextToken:
    """A literal span of text."""

    text: str

    @property
    def is_number(self) -> bool:
        return False


@dataclass(frozen=True)
class NumberToken:
    """
    A numeral span read as an integer.

    The raw source characters are kept in ``text`` so a token list can be
    joined back into the original string.
    """

    value: int
    notation: NumberNotation
    text: str

    @property
    def is_number(self) -> bool:
        return True

    @property
    def is_chinese(self) -> bool:
        return self.notation is NumberNotation.CHINESE


Token = Union[TextToken, NumberToken]
