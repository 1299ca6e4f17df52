"""Unit tests for action input helpers."""

import os
from unittest.mock import patch

import pytest

from apim_import.exceptions import ConfigurationError
from apim_import.helpers.inputs import get_input, input_key, parse_boolean


class TestGetInput:
    """Test reading INPUT_* variables."""

    def test_input_key_normalises_name(self):
        """Spaces become underscores and the name is upper-cased."""
        assert input_key("template values") == "INPUT_TEMPLATE_VALUES"
        assert input_key("ytt_version") == "INPUT_YTT_VERSION"

    def test_present_value_returned_unmodified(self):
        env = {"INPUT_FILE": " tests.yaml "}
        assert get_input("file", environ=env) == " tests.yaml "

    def test_absent_optional_returns_empty_string(self):
        assert get_input("file", environ={}) == ""

    def test_reads_os_environ_by_default(self):
        with patch.dict(os.environ, {"INPUT_TEMPLATE": "tpl/"}):
            assert get_input("template") == "tpl/"

    def test_name_with_spaces(self):
        env = {"INPUT_SCHEMA_URL": "https://example.com/schema.json"}
        assert get_input("schema url", environ=env) == "https://example.com/schema.json"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_required_missing_or_blank_raises(self, value):
        env = {} if value is None else {"INPUT_TOKEN": value}
        with pytest.raises(ConfigurationError) as exc_info:
            get_input("token", required=True, environ=env)
        assert str(exc_info.value) == "Missing required input: token"

    def test_required_present(self):
        assert get_input("token", required=True, environ={"INPUT_TOKEN": "abc"}) == "abc"


class TestParseBoolean:
    """Test boolean coercion of inputs."""

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "True", "yes", "YES", "on", "On"])
    def test_truthy_values(self, value):
        assert parse_boolean(value, False) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "y", "enabled", " true"])
    def test_other_values_are_false(self, value):
        assert parse_boolean(value, True) is False

    def test_empty_returns_default(self):
        assert parse_boolean("", True) is True
        assert parse_boolean("", False) is False
