"""Tests for object checks: declared properties, extras, requires and embedded schemas."""

from json_schema_validator import SchemaValidator, ValidatorConfig


def _errors(instance, schema, config=None):
    result = SchemaValidator(config).validate(instance, schema)
    return [(e.property, e.message) for e in result.errors]


PERSON = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer", "optional": True},
    },
}


# ---------------------------------------------------------------------------
# declared properties
# ---------------------------------------------------------------------------

class TestDeclaredProperties:

    def test_valid_object(self):
        assert _errors({"name": "Ada", "age": 36}, PERSON) == []

    def test_missing_required_property(self):
        assert _errors({"age": 36}, PERSON) == [("$.name", "is missing and it is not optional")]

    def test_optional_absence_is_not_an_error(self):
        assert _errors({"name": "Ada"}, PERSON) == []

    def test_explicit_null_is_not_missing(self):
        assert _errors({"name": None}, PERSON) == [
            ("$.name", "null value found, but a string is required"),
        ]

    def test_optional_null_still_type_checked(self):
        assert _errors({"name": "Ada", "age": None}, PERSON) == [
            ("$.age", "null value found, but a integer is required"),
        ]

    def test_non_object_instance(self):
        assert _errors("Ada", {"properties": PERSON["properties"]}) == [
            ("$", "an object is required"),
            ("$.name", "is missing and it is not optional"),
        ]

    def test_nested_paths(self):
        schema = {"properties": {"owner": PERSON}}
        assert _errors({"owner": {"name": 1}}, schema) == [
            ("$.owner.name", "integer value found, but a string is required"),
        ]

    def test_private_declared_properties_are_skipped(self):
        schema = {"properties": {"__internal": {"type": "string"}, "id": {"type": "integer"}}}
        assert _errors({"id": 1}, schema) == []

    def test_private_prefix_is_configurable(self):
        schema = {"properties": {"_internal": {"type": "string"}}}
        config = ValidatorConfig(private_prefix="_")
        assert _errors({}, schema, config) == []
        assert _errors({}, schema) == [("$._internal", "is missing and it is not optional")]

    def test_declared_errors_precede_instance_key_errors(self):
        assert _errors({"extra": 1}, PERSON) == [
            ("$.name", "is missing and it is not optional"),
            ("$", "The property extra is not defined in the schema "
                  "and the schema does not allow additional properties"),
        ]


# ---------------------------------------------------------------------------
# additionalProperties
# ---------------------------------------------------------------------------

class TestAdditionalProperties:

    def test_undeclared_key_rejected_when_unset(self):
        errors = _errors({"name": "Ada", "nick": "A"}, PERSON)
        assert errors == [
            ("$", "The property nick is not defined in the schema "
                  "and the schema does not allow additional properties"),
        ]

    def test_undeclared_key_checked_against_extra_schema(self):
        schema = dict(PERSON, additionalProperties={"type": "string"})
        assert _errors({"name": "Ada", "nick": "A"}, schema) == []
        assert _errors({"name": "Ada", "nick": 3}, schema) == [
            ("$.nick", "integer value found, but a string is required"),
        ]

    def test_true_allows_anything_and_false_disallows(self):
        assert _errors({"name": "Ada", "x": [1]}, dict(PERSON, additionalProperties=True)) == []
        assert len(_errors({"name": "Ada", "x": [1]}, dict(PERSON, additionalProperties=False))) == 1

    def test_private_instance_keys_are_not_reported(self):
        assert _errors({"name": "Ada", "__meta": 1}, PERSON) == []


# ---------------------------------------------------------------------------
# requires
# ---------------------------------------------------------------------------

class TestRequires:

    SCHEMA = {
        "properties": {
            "a": {"optional": True},
            "b": {"requires": "a", "optional": True},
        }
    }

    def test_missing_dependency(self):
        assert _errors({"b": 1}, self.SCHEMA) == [
            ("$", "the presence of the property b requires that a also be present"),
        ]

    def test_dependency_present(self):
        assert _errors({"a": 0, "b": 1}, self.SCHEMA) == []

    def test_null_dependency_counts_as_absent(self):
        assert _errors({"a": None, "b": 1}, self.SCHEMA) == [
            ("$", "the presence of the property b requires that a also be present"),
        ]

    def test_no_check_when_dependent_absent(self):
        assert _errors({}, self.SCHEMA) == []


# ---------------------------------------------------------------------------
# self-describing members
# ---------------------------------------------------------------------------

class TestEmbeddedSchemas:

    def test_member_validated_against_its_embedded_schema(self):
        schema = {"properties": {"child": {"type": "object"}}}
        instance = {
            "child": {
                "$schema": {
                    "properties": {
                        "$schema": {"type": "object"},
                        "size": {"type": "integer"},
                    }
                },
                "size": "big",
            }
        }
        assert _errors(instance, schema) == [
            ("$.child.size", "string value found, but a integer is required"),
        ]

    def test_embedded_schema_key_is_reported_when_undeclared(self):
        schema = {"properties": {"size": {"type": "integer"}}}
        instance = {
            "$schema": {"properties": {"size": {"type": "integer"}}, "additionalProperties": True},
            "size": 1,
        }
        assert _errors(instance, schema) == [
            ("$", "The property $schema is not defined in the schema "
                  "and the schema does not allow additional properties"),
        ]

    def test_embedded_schema_key_checked_against_additional_properties(self):
        schema = {"properties": {"size": {"type": "integer"}}, "additionalProperties": {"type": "string"}}
        instance = {"$schema": {"additionalProperties": True}, "size": 1}
        assert _errors(instance, schema) == [
            ("$.$schema", "object value found, but a string is required"),
        ]
