"""Unit tests for document loading."""

import json

import pytest

from apim_import.document import FORMAT_JSON, FORMAT_YAML, load_document
from apim_import.document.loader import detect_format
from apim_import.exceptions import ParseError


class TestDetectFormat:
    """Test JSON/YAML autodetection."""

    def test_json_hint(self):
        assert detect_format("- a\n- b\n", "tests.json") == FORMAT_JSON

    def test_leading_brace(self):
        assert detect_format('  \n {"a": 1}', "") == FORMAT_JSON

    def test_leading_brace_wins_over_yaml_hint(self):
        assert detect_format('{"a": 1}', "tests.yaml") == FORMAT_JSON

    def test_yaml_otherwise(self):
        assert detect_format("a: 1\n", "tests.yaml") == FORMAT_YAML
        assert detect_format("[1, 2]", "") == FORMAT_YAML

    def test_hint_must_end_with_json(self):
        assert detect_format("a: 1\n", "tests.json.tmpl") == FORMAT_YAML


class TestLoadDocument:
    """Test parsing of document text."""

    def test_json_document(self):
        document = load_document('{"name": "api", "tags": ["a", "b"], "n": 1.5}')

        assert document.format == FORMAT_JSON
        assert document.data == {"name": "api", "tags": ["a", "b"], "n": 1.5}

    def test_json_hint_with_invalid_json_fails(self):
        """A .json hint forces strict JSON even when the text is valid YAML."""
        with pytest.raises(ParseError, match="Invalid JSON"):
            load_document("name: api\n", "tests.json")

    def test_json_error_reports_position(self):
        with pytest.raises(ParseError) as exc_info:
            load_document('{\n  "a": 1,\n}')

        message = str(exc_info.value)
        assert "line 3" in message
        assert "column 1" in message

    def test_yaml_document(self):
        raw = """
calls:
  - name: Get users
    method: GET
    url: https://api.example.com/users
    enabled: true
    retries: 3
"""
        document = load_document(raw, "tpl/")

        assert document.format == FORMAT_YAML
        assert document.data == {
            "calls": [
                {
                    "name": "Get users",
                    "method": "GET",
                    "url": "https://api.example.com/users",
                    "enabled": True,
                    "retries": 3,
                }
            ]
        }

    def test_yaml_timestamps_stay_strings(self):
        document = load_document("created: 2024-01-15T10:00:00Z\nday: 2024-01-15\n")

        assert document.data == {
            "created": "2024-01-15T10:00:00Z",
            "day": "2024-01-15",
        }
        json.dumps(document.data)

    def test_invalid_yaml(self):
        with pytest.raises(ParseError, match="Invalid YAML"):
            load_document("calls:\n  - name: a\n bad_indent: [\n")

    def test_yaml_flow_mapping_is_read_as_json(self):
        """Leading '{' selects JSON, so YAML flow mappings are rejected."""
        with pytest.raises(ParseError, match="Invalid JSON"):
            load_document("{name: api}\n", "tests.yaml")

    def test_empty_yaml_document(self):
        document = load_document("", "tests.yaml")
        assert document.format == FORMAT_YAML
        assert document.data is None

    def test_parsed_json_survives_reserialisation(self):
        raw = '{"b": [1, 2, {"c": null}], "a": {"x": true, "y": "z"}, "n": -0.25}'
        document = load_document(raw)

        assert json.loads(json.dumps(document.data)) == json.loads(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "blob: !!binary aGVsbG8=\n",
            "ratio: .nan\n",
            "limit: -.inf\n",
            "tags: !!set {a, b}\n",
        ],
    )
    def test_yaml_without_json_form(self, raw):
        with pytest.raises(ParseError, match="cannot be represented as JSON"):
            load_document(raw, "tests.yaml")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_json_non_finite_numbers_rejected(self, constant):
        with pytest.raises(ParseError, match=f"{constant} is not allowed"):
            load_document('{"a": %s}' % constant)
