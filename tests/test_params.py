"""Tests for parameter resolution: defaults, required fields, passthrough."""

import pytest

from aareguru_mcp.catalog import get_tool
from aareguru_mcp.params import is_missing, resolve
from aareguru_mcp.types import ToolInvocation, ValidationError


def _resolve(name: str, **arguments):
    return resolve(get_tool(name), ToolInvocation(name=name, arguments=arguments))


class TestDefaults:
    """Default injection for app and version."""

    def test_defaults_injected(self):
        params = _resolve("get_cities")
        assert params == {"app": "mcp-aareguru-server", "version": "1.0.0"}

    def test_explicit_values_override(self):
        params = _resolve("get_cities", app="dashboard", version="9.9")
        assert params == {"app": "dashboard", "version": "9.9"}

    def test_empty_values_get_default(self):
        """Empty strings count as not supplied."""
        params = _resolve("get_cities", app="", version=None)
        assert params["app"] == "mcp-aareguru-server"
        assert params["version"] == "1.0.0"

    def test_caller_order_kept_defaults_appended(self):
        params = _resolve("get_current_conditions", city="thun")
        assert list(params) == ["city", "app", "version"]

    def test_city_default_not_injected(self):
        """The city default is advertised for display only."""
        params = _resolve("get_current_conditions")
        assert "city" not in params

    def test_resolution_is_idempotent(self):
        first = _resolve("get_today_summary", city="thun")
        second = resolve(get_tool("get_today_summary"), ToolInvocation("get_today_summary", first))
        assert first == second

    def test_invocation_not_mutated(self):
        arguments = {"city": "thun"}
        resolve(get_tool("get_current_conditions"), ToolInvocation("get_current_conditions", arguments))
        assert arguments == {"city": "thun"}


class TestRequired:
    """Required-field validation."""

    def test_all_present(self):
        params = _resolve("get_historical_data", city="bern", start="yesterday", end="now")
        assert params["start"] == "yesterday"
        assert params["end"] == "now"

    @pytest.mark.parametrize("missing", ["city", "start", "end"])
    def test_missing_field(self, missing: str):
        arguments = {"city": "bern", "start": "-1 day", "end": "now"}
        del arguments[missing]
        with pytest.raises(ValidationError) as exc_info:
            _resolve("get_historical_data", **arguments)
        assert exc_info.value.message == f"missing required parameter: {missing}"

    def test_empty_field(self):
        with pytest.raises(ValidationError, match="missing required parameter: end"):
            _resolve("get_historical_data", city="bern", start="1700000000", end="")

    @pytest.mark.parametrize("start", [
        "2024-07-01T00:00:00Z",
        "1719792000",
        "yesterday",
        "-1 day",
        "not even a date",
    ])
    def test_date_formats_not_interpreted(self, start: str):
        """Any non-empty value is accepted; the API parses dates."""
        params = _resolve("get_historical_data", city="bern", start=start, end="now")
        assert params["start"] == start


class TestPassthrough:
    """Fields outside the schema are forwarded."""

    def test_unknown_fields_kept(self):
        params = _resolve("get_widget_data", lang="de")
        assert params["lang"] == "de"

    def test_values_passthrough(self):
        params = _resolve("get_current_conditions", values="aare.temperature,aare.flow")
        assert params["values"] == "aare.temperature,aare.flow"


class TestIsMissing:
    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        ("bern", False),
        (" ", False),
        (0, False),
    ])
    def test_values(self, value, expected: bool):
        assert is_missing(value) is expected
