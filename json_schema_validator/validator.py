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

"""Entry points for validating instances against schemas.

An instance may be validated against an explicit schema, against the schema
it embeds under ``$schema`` (a self-describing instance), or both; errors of
both passes end up in one result, explicit schema first.

The property change mode checks a proposed new value for a single property:
``readonly`` fields are rejected and embedded schemas are not consulted,
since the value is assumed to be internally valid already.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from .config import ValidatorConfig, default_config
from .engine.collector import ErrorCollector
from .engine.property_checker import PropertyChecker
from .engine.types import is_mapping
from .loader import load_document
from .models.result import ValidationResult
from .models.values import Slot, SlotState

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Validates value trees against schema documents.

    Instances hold configuration only and can be shared between threads.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config if config is not None else default_config
        self._checker = PropertyChecker(self.config)

    def validate(self, instance: Any, schema: Any = None) -> ValidationResult:
        """Validate ``instance`` against ``schema`` and its own embedded schema."""
        return self._validate(instance, schema, changing=None)

    def check_property_change(self, value: Any, schema: Any, property_name: str) -> ValidationResult:
        """Check whether ``value`` may legally be stored in ``property_name``.

        Pass ``ABSENT`` as the value to check the removal of the property.
        """
        return self._validate(value, schema, changing=property_name or "property")

    def _validate(self, instance: Any, schema: Any, changing: Optional[str]) -> ValidationResult:
        collector = ErrorCollector()
        slot = Slot.wrap(instance)

        if changing:
            logger.debug(f"Checking change of property '{changing}'")
        else:
            logger.debug("Validating instance")

        if schema is not None:
            self._checker.check_property(slot, schema, "", changing or "", collector, changing)

        self_schema_key = self.config.self_schema_key
        if not changing and slot.state is SlotState.VALUE and is_mapping(slot.value):
            embedded = slot.value.get(self_schema_key)
            if embedded is not None:
                logger.debug(f"Validating instance against its embedded '{self_schema_key}'")
                self._checker.check_property(slot, embedded, "", "", collector, changing)

        result = collector.to_result()
        logger.debug(f"Validation finished with {len(result.errors)} error(s)")
        return result


class JsonSchema:
    """A schema document bound to a validator."""

    def __init__(self, schema: Any, config: Optional[ValidatorConfig] = None):
        self._schema = schema
        self._validator = SchemaValidator(config)

    @classmethod
    def from_file(cls, file_path: Union[str, Path], config: Optional[ValidatorConfig] = None) -> "JsonSchema":
        return cls(load_document(file_path), config)

    @property
    def schema(self) -> Any:
        return self._schema

    def validate(self, instance: Any) -> ValidationResult:
        return self._validator.validate(instance, self._schema)

    def check_property_change(self, value: Any, property_name: str) -> ValidationResult:
        return self._validator.check_property_change(value, self._schema, property_name)
