"""Tests for Dispatcher method routing and envelopes."""

from collections.abc import Mapping
from typing import Any
from unittest.mock import MagicMock

import pytest

from inertia_rails_mcp import __version__
from inertia_rails_mcp.capabilities.defaults import build_default_registry
from inertia_rails_mcp.capabilities.registry import CapabilityRegistry
from inertia_rails_mcp.protocol.errors import InvalidArgumentsError
from inertia_rails_mcp.protocol.models import JsonRpcRequest
from inertia_rails_mcp.server.dispatcher import PROTOCOL_VERSION, Dispatcher, Method
from inertia_rails_mcp.server.settings import ServerSettings


class _StrictTool:
    def description(self) -> str:
        return "strict"

    def input_schema(self) -> dict[str, Any]:
        return {"type": "object"}

    def call(self, arguments: Mapping[str, Any]) -> str:
        raise InvalidArgumentsError("strict", "nope")


@pytest.fixture
def dispatcher() -> Dispatcher:
    return Dispatcher(build_default_registry(ServerSettings()))


def _req(method: str, params: dict[str, Any] | None = None, id: int | str | None = 1) -> JsonRpcRequest:
    return JsonRpcRequest(id=id, method=method, params=params or {})


class TestMethodEnum:
    def test_six_methods(self) -> None:
        assert {m.value for m in Method} == {
            "initialize",
            "tools/list",
            "tools/call",
            "resources/list",
            "resources/read",
            "completion/complete",
        }


class TestInitialize:
    def test_result_shape(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(_req("initialize"))
        assert response.error is None
        assert response.id == 1
        assert response.result == {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}, "resources": {}, "completion": {}},
            "serverInfo": {
                "name": "inertia-rails-mcp",
                "version": __version__,
                "protocol_version": "2024-11-05",
            },
        }

    def test_ignores_params(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(_req("initialize", {"capabilities": {"x": 1}}))
        assert response.result is not None


class TestUnknownMethod:
    @pytest.mark.parametrize("method", ["ping", "tools/delete", "", "Initialize"])
    def test_method_not_found(self, dispatcher: Dispatcher, method: str) -> None:
        response = dispatcher.dispatch(_req(method, id=9))
        assert response.result is None
        assert response.error is not None
        assert response.error.code == -32601
        assert response.error.message == f"Method not found: {method}"
        assert response.id == 9


class TestToolsList:
    def test_lists_every_tool(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.dispatch(_req("tools/list")).result
        assert result is not None
        tools = result["tools"]
        assert len(tools) == 4
        for entry in tools:
            assert entry["name"].startswith("inertia_rails_")
            assert set(entry) == {"name", "description", "inputSchema"}

    def test_idempotent(self, dispatcher: Dispatcher) -> None:
        first = dispatcher.dispatch(_req("tools/list")).result
        second = dispatcher.dispatch(_req("tools/list")).result
        assert first == second


class TestToolsCall:
    def test_wraps_text(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(
            _req("tools/call", {"name": "inertia_rails_example", "arguments": {"topic": "ssr"}})
        )
        assert response.result is not None
        [block] = response.result["content"]
        assert block["type"] == "text"
        assert block["text"].startswith("📝 Example: Ssr")

    def test_missing_arguments_default_to_empty(self) -> None:
        tool = MagicMock()
        tool.call.return_value = "ok"
        registry = CapabilityRegistry({"probe": tool}, {})
        Dispatcher(registry).dispatch(_req("tools/call", {"name": "inertia_rails_probe"}))
        tool.call.assert_called_once_with({})

    def test_unknown_tool(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(_req("tools/call", {"name": "inertia_rails_nope"}))
        assert response.error is not None
        assert response.error.code == -32602
        assert response.error.message == "Tool not found: inertia_rails_nope"

    def test_unprefixed_name_is_not_found(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(
            _req("tools/call", {"name": "example", "arguments": {"topic": "ssr"}})
        )
        assert response.error is not None
        assert response.error.code == -32602

    def test_missing_name(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(_req("tools/call"))
        assert response.error is not None
        assert response.error.code == -32602
        assert "name" in response.error.message

    def test_non_object_arguments(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(
            _req("tools/call", {"name": "inertia_rails_example", "arguments": ["ssr"]})
        )
        assert response.error is not None
        assert response.error.code == -32602

    @pytest.mark.parametrize("arguments", [[], 0, "", False])
    def test_falsy_non_object_arguments(self, dispatcher: Dispatcher, arguments: Any) -> None:
        response = dispatcher.dispatch(
            _req("tools/call", {"name": "inertia_rails_example", "arguments": arguments})
        )
        assert response.error is not None
        assert response.error.code == -32602
        assert response.error.message == "Invalid params: 'arguments' must be an object"

    def test_null_arguments_default_to_empty(self) -> None:
        tool = MagicMock()
        tool.call.return_value = "ok"
        registry = CapabilityRegistry({"echo": tool}, {})
        Dispatcher(registry).dispatch(
            _req("tools/call", {"name": "inertia_rails_echo", "arguments": None})
        )
        tool.call.assert_called_once_with({})

    def test_argument_validation_error(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(
            _req("tools/call", {"name": "inertia_rails_method_lookup", "arguments": {}})
        )
        assert response.error is not None
        assert response.error.code == -32602
        assert "method_name" in response.error.message

    def test_tool_raised_server_error(self) -> None:
        registry = CapabilityRegistry({"strict": _StrictTool()}, {})
        response = Dispatcher(registry).dispatch(_req("tools/call", {"name": "inertia_rails_strict"}))
        assert response.error is not None
        assert response.error.code == -32602

    def test_unexpected_tool_failure_propagates(self) -> None:
        tool = MagicMock()
        tool.call.side_effect = RuntimeError("disk on fire")
        registry = CapabilityRegistry({"boom": tool}, {})
        with pytest.raises(RuntimeError, match="disk on fire"):
            Dispatcher(registry).dispatch(_req("tools/call", {"name": "inertia_rails_boom"}))


class TestResources:
    def test_list(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.dispatch(_req("resources/list")).result
        assert result is not None
        assert result["resources"] == [
            {
                "uri": "inertia-rails://api_reference",
                "name": "Inertia Rails API Reference",
                "description": "Complete API reference for Inertia-rails methods, modules, and configuration options",
                "mimeType": "text/markdown",
            },
            {
                "uri": "inertia-rails://configuration",
                "name": "Inertia Rails Configuration Guide",
                "description": "Comprehensive guide to configuring Inertia-rails in your application",
                "mimeType": "text/markdown",
            },
        ]

    def test_list_idempotent(self, dispatcher: Dispatcher) -> None:
        assert (
            dispatcher.dispatch(_req("resources/list")).result
            == dispatcher.dispatch(_req("resources/list")).result
        )

    def test_read_known(self, dispatcher: Dispatcher) -> None:
        uri = "inertia-rails://configuration"
        result = dispatcher.dispatch(_req("resources/read", {"uri": uri})).result
        assert result is not None
        [entry] = result["contents"]
        resource = dispatcher.registry.lookup_resource("configuration")
        assert resource is not None
        assert entry == {"uri": uri, "mimeType": "text/markdown", "text": resource.content()}

    @pytest.mark.parametrize(
        "uri",
        ["inertia-rails://nope", "other://api_reference", "api_reference"],
    )
    def test_read_unknown(self, dispatcher: Dispatcher, uri: str) -> None:
        response = dispatcher.dispatch(_req("resources/read", {"uri": uri}))
        assert response.error is not None
        assert response.error.code == -32602
        assert response.error.message == f"Resource not found: {uri}"

    def test_read_missing_uri(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch(_req("resources/read"))
        assert response.error is not None
        assert response.error.code == -32602


class TestCompletion:
    def test_method_argument(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.dispatch(
            _req("completion/complete", {"ref": {}, "argument": {"name": "method", "value": "in"}})
        ).result
        assert result is not None
        completion = result["completion"]
        assert completion["total"] == 5
        assert completion["hasMore"] is False
        assert completion["values"][0] == {
            "value": "render inertia:",
            "description": "Render an Inertia response",
        }

    def test_other_argument(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.dispatch(
            _req("completion/complete", {"argument": {"name": "topic"}})
        ).result
        assert result == {"completion": {"values": [], "total": 0, "hasMore": False}}

    def test_no_params(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.dispatch(_req("completion/complete")).result
        assert result == {"completion": {"values": [], "total": 0, "hasMore": False}}
