"""Tests for the null marker and tri-state lookup slots."""

from json_schema_validator import ABSENT, JSON_NULL, JsonNull, is_null_value
from json_schema_validator.models.values import Slot, SlotState


class TestJsonNull:

    def test_marker_is_recognized(self):
        assert is_null_value(JSON_NULL)
        assert is_null_value(JsonNull())

    def test_other_values_are_not_null(self):
        assert not is_null_value(None)
        assert not is_null_value("")
        assert not is_null_value(0)

    def test_renders_empty_and_serializes_to_none(self):
        assert str(JSON_NULL) == ""
        assert not JSON_NULL
        assert JSON_NULL.to_json() is None
        assert JsonNull() == JSON_NULL


class TestSlot:

    def test_mapping_lookup_distinguishes_three_states(self):
        container = {"present": 1, "empty": None}
        assert Slot.from_mapping(container, "present") == Slot(SlotState.VALUE, 1)
        assert Slot.from_mapping(container, "empty").is_null
        assert Slot.from_mapping(container, "missing").is_absent

    def test_lookup_in_non_mapping_is_absent(self):
        assert Slot.from_mapping("text", "a").is_absent

    def test_sequence_positions_are_never_absent(self):
        assert Slot.from_sequence([1, None], 0).value == 1
        assert Slot.from_sequence([1, None], 1).is_null
        assert Slot.from_sequence([1, None], 5).is_null

    def test_wrap(self):
        assert Slot.wrap(None).value is JSON_NULL
        assert Slot.wrap(JSON_NULL).is_null
        assert Slot.wrap(ABSENT) is ABSENT
        assert Slot.wrap(0).state is SlotState.VALUE
