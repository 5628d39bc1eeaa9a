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

"""Validation results returned by the validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class ValidationError:
    """A single violation found during validation.

    Attributes:
        property: Path of the offending value, e.g. ``$.items[0]``
        message: Description of the violation
    """

    property: str
    message: str

    def to_display_string(self) -> str:
        return f"{self.property}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        return {"property": self.property, "message": self.message}

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call.

    ``valid`` is true exactly when ``errors`` is empty. Errors keep the order
    in which the checker discovered them.
    """

    valid: bool
    errors: Tuple[ValidationError, ...] = field(default_factory=tuple)

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> "ValidationResult":
        errors = tuple(errors)
        return cls(valid=not errors, errors=errors)

    def is_valid(self) -> bool:
        return self.valid

    def error_messages(self) -> List[str]:
        return [error.to_display_string() for error in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }
