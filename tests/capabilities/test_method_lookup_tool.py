"""Tests for MethodLookupTool."""

import pytest

from inertia_rails_mcp.capabilities.data.methods import METHODS
from inertia_rails_mcp.capabilities.tools.method_lookup import MethodLookupTool
from inertia_rails_mcp.protocol.errors import InvalidArgumentsError


class TestMethodLookupTool:
    def test_table_has_nine_helpers(self) -> None:
        assert len(METHODS) == 9

    def test_exact_match(self) -> None:
        text = MethodLookupTool().call({"method_name": "render"})
        assert text.startswith("📚 render")
        assert "Signature: render inertia: component_name, props: {}, view_data: {}" in text
        assert "Module: InertiaRails::Controller" in text
        assert "```ruby" in text
        assert "---" not in text

    def test_partial_match_returns_several(self) -> None:
        found = MethodLookupTool().find("inertia")
        names = [name for name, _ in found]
        assert names == [
            "inertia_share",
            "use_inertia_instance_props",
            "inertia_config",
            "inertia_location",
        ]

    def test_partial_match_is_case_insensitive(self) -> None:
        names = [name for name, _ in MethodLookupTool().find("DEFER")]
        assert names == ["defer"]

    def test_multiple_entries_are_separated(self) -> None:
        text = MethodLookupTool().call({"method_name": "inertia_"})
        assert text.count("\n---") == 4

    def test_include_source(self) -> None:
        text = MethodLookupTool().call({"method_name": "lazy", "include_source": True})
        assert "Source: lib/inertia_rails/controller.rb" in text

    def test_not_found(self) -> None:
        text = MethodLookupTool().call({"method_name": "redirect_to"})
        assert text == "Method 'redirect_to' not found in Inertia-rails"

    def test_method_name_required(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="method_name"):
            MethodLookupTool().call({})

    def test_schema(self) -> None:
        schema = MethodLookupTool().input_schema()
        assert schema["required"] == ["method_name"]
        assert schema["properties"]["include_source"]["type"] == "boolean"
        assert schema["properties"]["include_source"]["default"] is False
