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

"""Instance value helpers: the JSON null marker and tri-state lookup slots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence


class JsonNull:
    """Marker for a value that is present and explicitly null."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "JsonNull()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, JsonNull)

    def __hash__(self) -> int:
        return hash(JsonNull)

    def to_json(self) -> None:
        return None


JSON_NULL = JsonNull()


def is_null_value(value: Any) -> bool:
    return isinstance(value, JsonNull)


class SlotState(Enum):
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


@dataclass(frozen=True)
class Slot:
    """Result of looking a value up in its parent container.

    ``ABSENT`` means the key was never supplied, ``NULL`` means it was
    supplied as JSON null, ``VALUE`` carries anything else.
    """

    state: SlotState
    value: Any = None

    @classmethod
    def absent(cls) -> "Slot":
        return cls(SlotState.ABSENT)

    @classmethod
    def null(cls) -> "Slot":
        return cls(SlotState.NULL, JSON_NULL)

    @classmethod
    def wrap(cls, value: Any) -> "Slot":
        """Wrap a raw value; ``None`` and ``JsonNull`` become the null slot."""
        if isinstance(value, Slot):
            return value
        if value is None or is_null_value(value):
            return cls.null()
        return cls(SlotState.VALUE, value)

    @classmethod
    def from_mapping(cls, container: Any, key: str) -> "Slot":
        if not isinstance(container, Mapping) or key not in container:
            return cls.absent()
        return cls.wrap(container[key])

    @classmethod
    def from_sequence(cls, container: Sequence[Any], index: int) -> "Slot":
        # Positions past the end read as null, never as absent.
        if index < len(container):
            return cls.wrap(container[index])
        return cls.null()

    @property
    def is_absent(self) -> bool:
        return self.state is SlotState.ABSENT

    @property
    def is_null(self) -> bool:
        return self.state is SlotState.NULL


ABSENT = Slot.absent()
