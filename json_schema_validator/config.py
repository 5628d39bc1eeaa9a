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

"""Configuration management for the validator."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import jsonschema
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import SchemaLoadError, ValidatorConfigError
from .loader import load_document
from .utils.logging_utils import PACKAGE_LOGGER_NAME, configure_split_stream_logging


class ItemsPolicy(str, Enum):
    """Loop bound used when ``items`` is a single schema.

    INSTANCE_LENGTH walks every element of the instance array.
    SCHEMA_LENGTH keeps the legacy bound: the number of keywords in the
    ``items`` schema itself.
    """

    INSTANCE_LENGTH = "instance_length"
    SCHEMA_LENGTH = "schema_length"


CONFIG_JSON_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "items_policy": {"type": "string", "enum": [p.value for p in ItemsPolicy]},
        "private_prefix": {"type": "string"},
        "self_schema_key": {"type": "string", "minLength": 1},
        "log_level": {
            "type": "string",
            "pattern": "(?i)^(debug|info|warning|error|critical)$",
        },
    },
    "additionalProperties": False,
}


@dataclass
class ValidatorConfig:
    """Configuration class for the schema validator."""
    items_policy: ItemsPolicy = ItemsPolicy.INSTANCE_LENGTH
    private_prefix: str = "__"
    self_schema_key: str = "$schema"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ValidatorConfig':
        """Create configuration from a mapping, checked against CONFIG_JSON_SCHEMA."""
        try:
            jsonschema.validate(instance=data, schema=CONFIG_JSON_SCHEMA)
        except JsonSchemaValidationError as e:
            path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
            raise ValidatorConfigError(f"Invalid validator configuration at {path}: {e.message}") from e

        defaults = cls()
        return cls(
            items_policy=ItemsPolicy(data.get("items_policy", defaults.items_policy.value)),
            private_prefix=data.get("private_prefix", defaults.private_prefix),
            self_schema_key=data.get("self_schema_key", defaults.self_schema_key),
            log_level=data.get("log_level", defaults.log_level).upper(),
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'ValidatorConfig':
        """Create configuration from a JSON or YAML file."""
        try:
            data = load_document(file_path)
        except SchemaLoadError as e:
            raise ValidatorConfigError(f"Failed to load validator configuration: {e}") from e
        if data is None:
            data = {}
        return cls.from_dict(data)

    def set_logging(self) -> logging.Logger:
        """Setup the package logger based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            logger_name=PACKAGE_LOGGER_NAME,
            level=level,
            stderr_level=logging.WARNING,
            formatter=formatter,
        )


# Global configuration instance
default_config = ValidatorConfig()
