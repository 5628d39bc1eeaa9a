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

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class NamedType:
    name: str


@dataclass(frozen=True)
class UnionType:
    members: Tuple["TypeSpec", ...]


@dataclass(frozen=True)
class InlineType:
    schema: Mapping[str, Any]


@dataclass(frozen=True)
class InvalidType:
    raw: Any


TypeSpec = Union[NamedType, UnionType, InlineType, InvalidType]


def parse_type_spec(raw: Any) -> Optional[TypeSpec]:
    """Turn a raw ``type``/``disallow`` keyword value into a TypeSpec.

    Returns None when the keyword is unset (None, False or an empty name).
    """
    if raw is None or raw is False or raw == "":
        return None
    if isinstance(raw, str):
        return NamedType(raw)
    if isinstance(raw, (list, tuple)):
        return UnionType(tuple(parse_type_spec(m) or InvalidType(m) for m in raw))
    if isinstance(raw, Mapping):
        return InlineType(raw)
    return InvalidType(raw)


def is_schema_mapping(raw: Any) -> bool:
    return isinstance(raw, Mapping)


def as_number(raw: Any) -> Optional[Union[int, float, Decimal]]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else None
    if isinstance(raw, str):
        text = raw.strip()
        for cast in (int, float):
            try:
                return cast(text)
            except ValueError:
                continue
    return None


def _as_count(raw: Any) -> Optional[int]:
    number = as_number(raw)
    if number is None:
        return None
    try:
        return int(number)
    except (OverflowError, ValueError):
        return None


@dataclass(frozen=True)
class SchemaNode:
    """One schema node, with a field per recognized keyword.

    Child schemas (``properties`` values, ``items``, ``extends``,
    ``additionalProperties``) are kept raw and parsed when the checker
    reaches them. Unknown keywords are ignored.
    """

    type: Optional[TypeSpec] = None
    properties: Any = None
    items: Any = None
    additional_properties: Optional[Mapping[str, Any]] = None
    optional: bool = False
    readonly: bool = False
    extends: Any = None
    requires: Optional[str] = None
    disallow: Optional[TypeSpec] = None
    pattern: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Any = None
    maximum: Any = None
    enum: Optional[Sequence[Any]] = None
    max_decimal: Optional[int] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "SchemaNode":
        additional = raw.get("additionalProperties")
        if additional is True:
            additional = {}
        elif additional is False:
            additional = None

        requires = raw.get("requires")
        pattern = raw.get("pattern")
        enum = raw.get("enum")
        minimum = raw.get("minimum")
        maximum = raw.get("maximum")

        return cls(
            type=parse_type_spec(raw.get("type")),
            properties=raw.get("properties"),
            items=raw.get("items"),
            additional_properties=additional,
            optional=bool(raw.get("optional", False)),
            readonly=bool(raw.get("readonly", False)),
            extends=raw.get("extends") or None,
            requires=str(requires) if requires not in (None, "") else None,
            disallow=parse_type_spec(raw.get("disallow")),
            pattern=str(pattern) if pattern not in (None, "") else None,
            min_length=_as_count(raw.get("minLength")),
            max_length=_as_count(raw.get("maxLength")),
            minimum=minimum,
            maximum=maximum,
            enum=tuple(enum) if isinstance(enum, (list, tuple)) else None,
            max_decimal=_as_count(raw.get("maxDecimal")),
            min_items=_as_count(raw.get("minItems")),
            max_items=_as_count(raw.get("maxItems")),
        )
