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

"""Validator for JSON-like value trees using the early JSON Schema proposal keywords."""

__version__ = "0.1.0"

from .config import ItemsPolicy, ValidatorConfig, default_config
from .engine.types import guess_type, matches_type
from .exceptions import SchemaLoadError, SchemaValidatorError, ValidatorConfigError
from .loader import load_document, load_document_from_string
from .models.result import ValidationError, ValidationResult
from .models.values import ABSENT, JSON_NULL, JsonNull, is_null_value
from .validator import JsonSchema, SchemaValidator

__all__ = [
    "ABSENT",
    "ItemsPolicy",
    "JSON_NULL",
    "JsonNull",
    "JsonSchema",
    "SchemaLoadError",
    "SchemaValidator",
    "SchemaValidatorError",
    "ValidationError",
    "ValidationResult",
    "ValidatorConfig",
    "ValidatorConfigError",
    "default_config",
    "guess_type",
    "is_null_value",
    "load_document",
    "load_document_from_string",
    "matches_type",
]
