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

"""Recursive checking of one value against one schema node."""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional

from ..config import ItemsPolicy, ValidatorConfig
from ..models.result import ValidationError
from ..models.schema_node import (
    InlineType,
    InvalidType,
    NamedType,
    SchemaNode,
    TypeSpec,
    UnionType,
    as_number,
    is_schema_mapping,
)
from ..models.values import Slot
from .collector import ErrorCollector
from .object_checker import ObjectChecker
from .types import (
    guess_type,
    is_numeric,
    is_sequence,
    is_string_like,
    matches_type,
    text_of,
)


def extend_path(path: str, key: Any, in_array: bool = False) -> str:
    if in_array:
        return f"{path}[{key}]"
    if path:
        return f"{path}.{key}"
    return f"${key}"


def _is_unset_schema(schema: Any) -> bool:
    return schema is None or schema is False or schema == ""


def _invalid_definition(schema: Any) -> str:
    return f"Invalid schema/property definition {schema}"


def _enum_equal(value: Any, member: Any) -> bool:
    if isinstance(value, bool) or isinstance(member, bool):
        return isinstance(value, bool) and isinstance(member, bool) and value == member
    return value == member


class PropertyChecker:
    """Validates values against schema nodes, writing into an ErrorCollector.

    The checker itself is stateless apart from its configuration; every
    method receives the collector of the call it is serving.
    """

    def __init__(self, config: ValidatorConfig):
        self.config = config
        self.object_checker = ObjectChecker(self)

    def check_property(
        self,
        slot: Slot,
        schema: Any,
        path: str,
        key: Any,
        collector: ErrorCollector,
        changing: Optional[str] = None,
        in_array: bool = False,
    ) -> None:
        """Check the value held by ``slot`` as member ``key`` of the value at ``path``."""
        self.check_node(slot, schema, extend_path(path, key, in_array), collector, changing)

    def check_node(
        self,
        slot: Slot,
        schema: Any,
        path: str,
        collector: ErrorCollector,
        changing: Optional[str] = None,
    ) -> None:
        """Check the value held by ``slot`` against ``schema`` at an already built path."""
        if not is_schema_mapping(schema):
            if not _is_unset_schema(schema):
                collector.add(path, _invalid_definition(schema))
            return

        node = SchemaNode.from_mapping(schema)

        if changing and node.readonly:
            collector.add(path, "is a readonly field, it can not be changed")

        if node.extends is not None:
            self.check_node(slot, node.extends, path, collector, changing)

        if slot.is_absent:
            if not node.optional:
                collector.add(path, "is missing and it is not optional")
            return

        value = slot.value
        collector.extend(self.check_type(node.type, value, path, changing))

        if node.disallow is not None and not self.check_type(node.disallow, value, path, changing):
            collector.add(path, "disallowed value was matched")

        if slot.is_null:
            return

        if is_sequence(value):
            self._check_array(node, value, path, collector, changing)
        elif node.properties is not None:
            self.object_checker.check_object(
                value, node.properties, path, node.additional_properties, collector, changing
            )

        self._check_scalar(node, value, path, collector)

    def check_type(
        self,
        spec: Optional[TypeSpec],
        value: Any,
        path: str,
        changing: Optional[str] = None,
    ) -> List[ValidationError]:
        """Resolve a type spec against ``value`` and return the resulting errors."""
        if spec is None:
            return []

        if isinstance(spec, NamedType):
            if matches_type(spec.name, value):
                return []
            return [
                ValidationError(path, f"{guess_type(value)} value found, but a {spec.name} is required")
            ]

        if isinstance(spec, UnionType):
            # First clean member wins; otherwise the last member's errors stand.
            errors: List[ValidationError] = []
            for member in spec.members:
                errors = self.check_type(member, value, path, changing)
                if not errors:
                    return []
            return errors

        if isinstance(spec, InlineType):
            scoped = ErrorCollector()
            self.check_node(Slot.wrap(value), spec.schema, path, scoped, changing)
            return scoped.errors

        if isinstance(spec, InvalidType):
            return [ValidationError(path, _invalid_definition(spec.raw))]

        return [ValidationError(path, _invalid_definition(spec))]

    def _check_array(
        self,
        node: SchemaNode,
        value: Any,
        path: str,
        collector: ErrorCollector,
        changing: Optional[str],
    ) -> None:
        items = node.items
        if isinstance(items, (list, tuple)):
            for index, item_schema in enumerate(items):
                self.check_property(
                    Slot.from_sequence(value, index), item_schema, path, index, collector, changing, in_array=True
                )
        elif items is not None:
            for index in range(self._items_bound(items, value)):
                self.check_property(
                    Slot.from_sequence(value, index), items, path, index, collector, changing, in_array=True
                )

        if node.min_items is not None and len(value) < node.min_items:
            collector.add(path, f"There must be a minimum of {node.min_items} in the array")
        if node.max_items is not None and len(value) > node.max_items:
            collector.add(path, f"There must be a maximum of {node.max_items} in the array")

    def _items_bound(self, items: Any, value: Any) -> int:
        if self.config.items_policy is ItemsPolicy.SCHEMA_LENGTH:
            return len(items) if isinstance(items, Mapping) else 0
        return len(value)

    def _check_scalar(self, node: SchemaNode, value: Any, path: str, collector: ErrorCollector) -> None:
        if node.pattern is not None and is_string_like(value):
            try:
                matched = re.search(node.pattern, value)
            except re.error:
                collector.add(path, _invalid_definition(node.pattern) + " (not a valid regular expression)")
            else:
                if matched is None:
                    collector.add(path, f"does not match the regex pattern {node.pattern}")

        if node.max_length is not None and is_string_like(value) and len(value) > node.max_length:
            collector.add(path, f"may only be {node.max_length} characters long")

        if node.min_length is not None and is_string_like(value) and len(value) < node.min_length:
            collector.add(path, f"must be at least {node.min_length} characters long")

        if node.minimum is not None:
            if is_string_like(value):
                bound = text_of(node.minimum)
                if value < bound:
                    collector.add(path, f"must have a minimum value of '{bound}'")
            elif is_numeric(value):
                bound = as_number(node.minimum)
                if bound is not None and value < bound:
                    collector.add(path, f"must have a minimum value of {text_of(bound)}")

        if node.maximum is not None:
            if is_string_like(value):
                bound = text_of(node.maximum)
                if value > bound:
                    collector.add(path, f"must have a maximum value of '{bound}'")
            elif is_numeric(value):
                bound = as_number(node.maximum)
                if bound is not None and value > bound:
                    collector.add(path, f"must have a maximum value of {text_of(bound)}")

        if node.enum is not None and not any(_enum_equal(value, member) for member in node.enum):
            members = ",".join(text_of(member) for member in node.enum)
            collector.add(path, f"does not have a value in the enumeration {{{members}}}")

        if node.max_decimal is not None and (is_string_like(value) or is_numeric(value)):
            if re.search(r"\.[0-9]{%d,}" % (node.max_decimal + 1), text_of(value)):
                collector.add(path, f"may only have {node.max_decimal} digits of decimal places")
