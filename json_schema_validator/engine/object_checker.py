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

"""Object half of the recursive checker: declared and instance-own properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..models.schema_node import SchemaNode, is_schema_mapping
from ..models.values import Slot, SlotState
from .collector import ErrorCollector
from .types import is_mapping

if TYPE_CHECKING:
    from .property_checker import PropertyChecker


class ObjectChecker:
    """Checks a mapping against a ``properties`` declaration."""

    def __init__(self, property_checker: "PropertyChecker"):
        self.property_checker = property_checker

    @property
    def config(self):
        return self.property_checker.config

    def _is_private(self, key: Any) -> bool:
        prefix = self.config.private_prefix
        return bool(prefix) and str(key).startswith(prefix)

    def check_object(
        self,
        instance: Any,
        properties: Any,
        path: str,
        additional_properties: Optional[Mapping[str, Any]],
        collector: ErrorCollector,
        changing: Optional[str] = None,
    ) -> None:
        if not is_schema_mapping(properties):
            collector.add(path, f"Invalid schema/property definition {properties}")
            return

        if is_mapping(instance):
            members = instance
        else:
            collector.add(path, "an object is required")
            members = {}

        for key, property_schema in properties.items():
            if self._is_private(key):
                continue
            self.property_checker.check_property(
                Slot.from_mapping(members, key), property_schema, path, key, collector, changing
            )

        self_schema_key = self.config.self_schema_key
        for key in members:
            property_schema = properties.get(key)
            undeclared = property_schema is None
            slot = Slot.from_mapping(members, key)

            if undeclared and additional_properties is None and not self._is_private(key):
                collector.add(
                    path,
                    f"The property {key} is not defined in the schema "
                    "and the schema does not allow additional properties",
                )

            if is_schema_mapping(property_schema):
                requires = SchemaNode.from_mapping(property_schema).requires
                if requires is not None and Slot.from_mapping(members, requires).state is not SlotState.VALUE:
                    collector.add(
                        path,
                        f"the presence of the property {key} requires that {requires} also be present",
                    )

            if undeclared and additional_properties is not None:
                self.property_checker.check_property(slot, additional_properties, path, key, collector, changing)

            if not changing and slot.state is SlotState.VALUE and is_mapping(slot.value):
                embedded = slot.value.get(self_schema_key)
                if embedded is not None:
                    self.property_checker.check_property(slot, embedded, path, key, collector, changing)
