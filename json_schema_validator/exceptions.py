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

"""Custom exceptions for the JSON Schema validator.

Schema/instance mismatches are never raised; they are reported in the
returned ValidationResult. These exceptions cover the collaborators only.
"""


class SchemaValidatorError(Exception):
    """Base exception for validator related errors."""
    pass


class SchemaLoadError(SchemaValidatorError):
    """Exception raised when a schema or instance document cannot be loaded."""
    pass


class ValidatorConfigError(SchemaValidatorError):
    """Exception raised for invalid validator configuration."""
    pass
