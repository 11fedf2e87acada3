"""Protocol layer: framing, envelopes and error codes."""

from inertia_rails_mcp.protocol.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    FramingError,
    InvalidArgumentsError,
    InvalidParamsError,
    MCPServerError,
    MethodNotFoundError,
    ResourceNotFoundError,
    SettingsError,
    ToolNotFoundError,
)
from inertia_rails_mcp.protocol.framing import FrameReader, FrameWriter, encode_frame
from inertia_rails_mcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ResourceDescriptor,
    ToolDescriptor,
)

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "FrameReader",
    "FrameWriter",
    "FramingError",
    "InvalidArgumentsError",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPServerError",
    "MethodNotFoundError",
    "ResourceDescriptor",
    "ResourceNotFoundError",
    "SettingsError",
    "ToolDescriptor",
    "ToolNotFoundError",
    "encode_frame",
]
