"""Error types for the protocol layer.

Every error that can be surfaced to a client carries the JSON-RPC ``code``
it maps to. :class:`FramingError` is the exception: it never reaches the
client and only tells the server loop to skip a frame.
"""

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MCPServerError(Exception):
    """Base error for failures that become a JSON-RPC error envelope."""

    code: int = INTERNAL_ERROR


class MethodNotFoundError(MCPServerError):
    """The request named a method the server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(MCPServerError):
    """The request params are missing or have the wrong shape."""

    code = INVALID_PARAMS

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid params: {detail}")


class InvalidArgumentsError(InvalidParamsError):
    """A tool rejected its arguments."""

    def __init__(self, tool: str, detail: str) -> None:
        self.tool = tool
        super().__init__(f"{tool}: {detail}")


class ToolNotFoundError(MCPServerError):
    """Requested tool does not exist in the registry."""

    code = INVALID_PARAMS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ResourceNotFoundError(MCPServerError):
    """Requested resource URI does not resolve to a registered resource."""

    code = INVALID_PARAMS

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Resource not found: {uri}")


class FramingError(Exception):
    """A frame could not be decoded (bad header or body)."""


class SettingsError(Exception):
    """Raised when a settings file fails parsing or validation."""
