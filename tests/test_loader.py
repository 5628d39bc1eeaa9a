"""Tests for document loading."""

import pytest

from json_schema_validator import SchemaLoadError, load_document, load_document_from_string


class TestLoadDocument:

    def test_json_file(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text('{"type": "object", "properties": {"a": {"type": "null"}}}', encoding="utf-8")
        assert load_document(path) == {"type": "object", "properties": {"a": {"type": "null"}}}

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "schema.yaml"
        path.write_text("type: array\nitems:\n  - type: string\n  - type: integer\n", encoding="utf-8")
        assert load_document(path) == {"type": "array", "items": [{"type": "string"}, {"type": "integer"}]}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError):
            load_document(tmp_path / "nope.json")

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(SchemaLoadError):
            load_document(tmp_path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaLoadError):
            load_document(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("a: [1, 2\n", encoding="utf-8")
        with pytest.raises(SchemaLoadError):
            load_document(path)


class TestLoadDocumentFromString:

    def test_json_text(self):
        assert load_document_from_string('{"a": [1, null]}') == {"a": [1, None]}

    def test_invalid_text(self):
        with pytest.raises(SchemaLoadError):
            load_document_from_string("a: : b: [")
