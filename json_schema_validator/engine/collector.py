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

"""Error accumulation for a single validation call."""

from __future__ import annotations

from typing import Iterable, List

from ..models.result import ValidationError, ValidationResult


class ErrorCollector:
    """Ordered sink for the errors found during one validation pass.

    A collector belongs to exactly one top-level call and is passed down
    the recursion explicitly; nothing here is shared between calls.
    """

    def __init__(self):
        self._errors: List[ValidationError] = []

    def add(self, path: str, message: str) -> None:
        self._errors.append(ValidationError(property=path, message=message))

    def extend(self, errors: Iterable[ValidationError]) -> None:
        self._errors.extend(errors)

    @property
    def errors(self) -> List[ValidationError]:
        return list(self._errors)

    def to_result(self) -> ValidationResult:
        return ValidationResult.from_errors(self._errors)
