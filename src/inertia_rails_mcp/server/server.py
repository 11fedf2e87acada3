"""MCPServer: the blocking read -> dispatch -> write loop over stdio."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, BinaryIO

from inertia_rails_mcp.capabilities.defaults import build_default_registry
from inertia_rails_mcp.protocol.errors import INTERNAL_ERROR, FramingError, MethodNotFoundError
from inertia_rails_mcp.protocol.framing import FrameReader, FrameWriter
from inertia_rails_mcp.protocol.models import JsonRpcRequest, JsonRpcResponse
from inertia_rails_mcp.server.dispatcher import Dispatcher
from inertia_rails_mcp.server.settings import ServerSettings

if TYPE_CHECKING:
    from inertia_rails_mcp.capabilities.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class MCPServer:
    """Serve MCP requests one at a time until the input stream closes.

    The registry is built once, from *settings* unless one is passed in, and
    lives as long as the server.
    """

    def __init__(
        self,
        registry: CapabilityRegistry | None = None,
        *,
        settings: ServerSettings | None = None,
    ) -> None:
        self._settings = settings or ServerSettings()
        self._registry = registry if registry is not None else build_default_registry(self._settings)
        self._dispatcher = Dispatcher(self._registry)

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def serve(self, input_stream: BinaryIO, output_stream: BinaryIO) -> None:
        """Process frames from *input_stream* until it is exhausted."""
        reader = FrameReader(input_stream)
        writer = FrameWriter(output_stream)
        logger.info("Serving %d tools", len(self._registry.list_tools()))

        while True:
            try:
                raw = reader.read()
            except FramingError as exc:
                logger.warning("Skipping frame: %s", exc)
                continue
            if raw is None:
                logger.info("Input stream closed, shutting down")
                return

            response = self.handle(raw)
            try:
                writer.write(response.to_wire())
            except (TypeError, ValueError):
                logger.exception("Could not encode response to %r", response.id)
                writer.write(
                    JsonRpcResponse.failure(
                        response.id, INTERNAL_ERROR, "Internal error: response could not be encoded"
                    ).to_wire()
                )

    def handle(self, raw: dict[str, Any]) -> JsonRpcResponse:
        """Turn one decoded frame into a response.

        A missing or non-string ``method`` is answered as an unknown method.
        Failures that escape the dispatcher become ``-32603`` envelopes
        carrying the request id when the frame had one.
        """
        method = raw.get("method")
        if not isinstance(method, str):
            error = MethodNotFoundError("" if method is None else str(method))
            return JsonRpcResponse.failure(_raw_id(raw), error.code, str(error))

        try:
            request = JsonRpcRequest.model_validate(raw)
            return self._dispatcher.dispatch(request)
        except Exception as exc:
            logger.exception("Internal error while handling %r", raw.get("method"))
            return JsonRpcResponse.failure(
                _raw_id(raw), INTERNAL_ERROR, f"Internal error: {exc}"
            )


def serve_stdio(server: MCPServer) -> None:
    """Run *server* on the process's stdin/stdout."""
    server.serve(sys.stdin.buffer, sys.stdout.buffer)


def _raw_id(raw: dict[str, Any]) -> int | str | None:
    request_id = raw.get("id")
    if isinstance(request_id, (int, str)) and not isinstance(request_id, bool):
        return request_id
    return None
