"""Dispatcher: routes a request to one of the protocol methods.

Each :class:`Method` has a handler returning the ``result`` mapping. Routing
and validation failures raise :class:`MCPServerError` subclasses, which the
dispatcher turns into error envelopes. Anything else propagates to the
server loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

from inertia_rails_mcp import __version__
from inertia_rails_mcp.capabilities.data.methods import METHOD_COMPLETIONS
from inertia_rails_mcp.protocol.errors import (
    InvalidParamsError,
    MCPServerError,
    MethodNotFoundError,
    ResourceNotFoundError,
    ToolNotFoundError,
)
from inertia_rails_mcp.protocol.models import JsonRpcRequest, JsonRpcResponse
from inertia_rails_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_RESOURCE_URI,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from inertia_rails_mcp.capabilities.registry import CapabilityRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "inertia-rails-mcp"

# ``completion/complete`` only suggests values for this argument name.
COMPLETION_ARGUMENT = "method"


class Method(str, Enum):
    """Protocol methods the server implements."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"
    COMPLETION_COMPLETE = "completion/complete"


Handler = Callable[[JsonRpcRequest], dict[str, Any]]


class Dispatcher:
    """Stateless per-request router over a :class:`CapabilityRegistry`.

    Usage::

        dispatcher = Dispatcher(build_default_registry(settings))
        response = dispatcher.dispatch(request)
    """

    def __init__(self, registry: CapabilityRegistry) -> None:
        self._registry = registry
        self._handlers: dict[Method, Handler] = {
            Method.INITIALIZE: self._initialize,
            Method.TOOLS_LIST: self._tools_list,
            Method.TOOLS_CALL: self._tools_call,
            Method.RESOURCES_LIST: self._resources_list,
            Method.RESOURCES_READ: self._resources_read,
            Method.COMPLETION_COMPLETE: self._completion,
        }

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    def server_info(self) -> dict[str, str]:
        return {
            "name": SERVER_NAME,
            "version": __version__,
            "protocol_version": PROTOCOL_VERSION,
        }

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Return exactly one response for *request*."""
        with _tracer.start_as_current_span("mcp.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))
            logger.debug("Dispatching %s (id=%r)", request.method, request.id)

            try:
                handler = self._handlers[_resolve_method(request.method)]
                result = handler(request)
            except MCPServerError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                logger.info("Request %r failed: %s", request.id, exc)
                return JsonRpcResponse.failure(request.id, exc.code, str(exc))
            return JsonRpcResponse.success(request.id, result)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _initialize(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}, "resources": {}, "completion": {}},
            "serverInfo": self.server_info(),
        }

    def _tools_list(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {
            "tools": [d.model_dump(by_alias=True) for d in self._registry.list_tools()],
        }

    def _tools_call(self, request: JsonRpcRequest) -> dict[str, Any]:
        name = _require_str(request.params, "name")
        arguments = request.params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidParamsError("'arguments' must be an object")

        _current_span_attribute(ATTR_TOOL_NAME, name)
        tool = self._registry.resolve_tool(name)
        if tool is None:
            raise ToolNotFoundError(name)

        text = tool.call(arguments)
        return {"content": [{"type": "text", "text": text}]}

    def _resources_list(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {
            "resources": [
                d.model_dump(by_alias=True) for d in self._registry.list_resources()
            ],
        }

    def _resources_read(self, request: JsonRpcRequest) -> dict[str, Any]:
        uri = _require_str(request.params, "uri")

        _current_span_attribute(ATTR_RESOURCE_URI, uri)
        resource = self._registry.resolve_resource(uri)
        if resource is None:
            raise ResourceNotFoundError(uri)

        return {
            "contents": [
                {"uri": uri, "mimeType": resource.mime_type(), "text": resource.content()},
            ],
        }

    def _completion(self, request: JsonRpcRequest) -> dict[str, Any]:
        argument = request.params.get("argument") or {}
        values: list[dict[str, str]] = []
        if isinstance(argument, Mapping) and argument.get("name") == COMPLETION_ARGUMENT:
            values = [
                {"value": value, "description": description}
                for value, description in METHOD_COMPLETIONS
            ]
        return {"completion": {"values": values, "total": len(values), "hasMore": False}}


def _resolve_method(method: str) -> Method:
    try:
        return Method(method)
    except ValueError:
        raise MethodNotFoundError(method) from None


def _require_str(params: Mapping[str, Any], key: str) -> str:
    value = params.get(key)
    if not isinstance(value, str):
        raise InvalidParamsError(f"'{key}' must be a string")
    return value


def _current_span_attribute(key: str, value: str) -> None:
    trace.get_current_span().set_attribute(key, value)
