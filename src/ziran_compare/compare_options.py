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

"""Comparison options and tie-break policies."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping


class NumberStringPolicy(enum.Enum):
    """Which token kind sorts first when a number meets text at the same position."""

    NUMBER_FIRST = "numberFirst"
    """Numbers sort before text: "1" < "a"."""
    STRING_FIRST = "stringFirst"
    """Text sorts before numbers: "a" < "1"."""


class ChineseNumberPolicy(enum.Enum):
    """Whether the notation of two numbers overrides their values."""

    MIXED = "mixed"
    """Compare by value only: 一 == 1."""
    FIRST = "first"
    """Chinese notation sorts before Arabic notation regardless of value."""
    LAST = "last"
    """Arabic notation sorts before Chinese notation regardless of value."""


def _coerce_policy(enum_cls: type[enum.Enum], value: Any, field_name: str) -> Any:
    """Accept an enum member, its value ('numberFirst') or a snake_case name ('number_first')."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip()
        for member in enum_cls:
            if normalized == member.value or normalized.upper() == member.name:
                return member
    valid_values = [member.value for member in enum_cls]
    raise ValueError(f"Invalid value {value!r} for {field_name}. Must be one of: {', '.join(valid_values)}")


@dataclass(frozen=True)
class CompareOptions:
    """Immutable configuration for a single comparison."""

    number_string_policy: NumberStringPolicy = NumberStringPolicy.NUMBER_FIRST
    chinese_number_policy: ChineseNumberPolicy = ChineseNumberPolicy.MIXED

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self,
            "number_string_policy",
            _coerce_policy(NumberStringPolicy, self.number_string_policy, "number_string_policy"),
        )
        object.__setattr__(
            self,
            "chinese_number_policy",
            _coerce_policy(ChineseNumberPolicy, self.chinese_number_policy, "chinese_number_policy"),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CompareOptions:
        """
        Build options from a plain mapping, e.g. the 'compare' config section.

        Both snake_case keys (number_string_policy) and camelCase keys
        (numberStringPolicy) are accepted. Missing or None values fall back
        to the defaults.

        Args:
            data: Mapping of option names to values

        Returns:
            CompareOptions instance

        Raises:
            ValueError: If a key is unknown or a value is not a valid policy
        """
        if not data:
            return cls()

        aliases = {
            "number_string_policy": "number_string_policy",
            "numberStringPolicy": "number_string_policy",
            "chinese_number_policy": "chinese_number_policy",
            "chineseNumberPolicy": "chinese_number_policy",
        }

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in aliases:
                raise ValueError(f"Unknown compare option '{key}'")
            if value is not None:
                kwargs[aliases[key]] = value

        return cls(**kwargs)

    def to_dict(self) -> dict[str, str]:
        """Plain representation suitable for YAML/JSON output."""
        return {
            "number_string_policy": self.number_string_policy.value,
            "chinese_number_policy": self.chinese_number_policy.value,
        }


DEFAULT_OPTIONS = CompareOptions()
