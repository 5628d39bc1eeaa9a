# Copyright 2026 TIER IV, inc.
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

"""Type predicates used by the checkers and their error messages."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Mapping

from ..models.values import is_null_value


_NUMBER_RE = re.compile(r"^-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")
_INTEGER_RE = re.compile(r"^-?[0-9]+$")


def normalize_type_name(type_name: Any) -> str:
    return str(type_name).strip().lower()


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_numeric(value: Any) -> bool:
    """True for int/float/Decimal values; booleans are not numbers."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_string_like(value: Any) -> bool:
    return isinstance(value, str)


def text_of(value: Any) -> str:
    """Textual form of a scalar as it is matched by patterns and digit counts."""
    if value is None or is_null_value(value):
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, str):
        return bool(_INTEGER_RE.match(value))
    return False


def _is_number(value: Any) -> bool:
    if is_numeric(value):
        return True
    if isinstance(value, str):
        return bool(_NUMBER_RE.match(value))
    return False


def _is_instance_of_named_class(type_name: str, value: Any) -> bool:
    return any(cls.__name__.lower() == type_name for cls in type(value).__mro__)


def matches_type(type_name: Any, value: Any) -> bool:
    """Check whether ``value`` matches the named type.

    Names are compared case-insensitively. A name outside the built-in set
    matches when the value is an instance of a class with that name.
    """
    name = normalize_type_name(type_name)

    if name == "string":
        return is_string_like(value)
    if name == "number":
        return _is_number(value)
    if name == "integer":
        return _is_integer(value)
    if name == "boolean":
        return isinstance(value, bool)
    if name == "object":
        return is_mapping(value)
    if name == "array":
        return is_sequence(value)
    if name == "null":
        return is_null_value(value)
    if name == "any":
        return True
    if name == "none":
        return False
    return _is_instance_of_named_class(name, value)


def guess_type(value: Any) -> str:
    """Best-effort type label used in "X value found" messages."""
    if is_mapping(value):
        return "object"
    if is_sequence(value):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if is_null_value(value):
        return "null"
    if not isinstance(value, str) and not is_numeric(value):
        return type(value).__name__
    if _is_integer(value):
        return "integer"
    if _is_number(value):
        return "number"
    return "string"
