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

"""Data types shared by the validation engine."""

from .result import ValidationError, ValidationResult
from .schema_node import (
    InlineType,
    InvalidType,
    NamedType,
    SchemaNode,
    TypeSpec,
    UnionType,
    parse_type_spec,
)
from .values import ABSENT, JSON_NULL, JsonNull, Slot, SlotState, is_null_value

__all__ = [
    "ABSENT",
    "InlineType",
    "InvalidType",
    "JSON_NULL",
    "JsonNull",
    "NamedType",
    "SchemaNode",
    "Slot",
    "SlotState",
    "TypeSpec",
    "UnionType",
    "ValidationError",
    "ValidationResult",
    "is_null_value",
    "parse_type_spec",
]
