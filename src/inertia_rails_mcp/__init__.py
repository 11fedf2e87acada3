"""Inertia-Rails MCP server: developer reference tools over stdio JSON-RPC."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "1.0.0"

if TYPE_CHECKING:
    from inertia_rails_mcp.server.server import MCPServer as MCPServer
    from inertia_rails_mcp.server.settings import ServerSettings as ServerSettings

_SERVER_EXPORTS = {
    "MCPServer": "inertia_rails_mcp.server.server",
    "ServerSettings": "inertia_rails_mcp.server.settings",
}


def __getattr__(name: str) -> object:
    module_path = _SERVER_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'inertia_rails_mcp' has no attribute {name!r}")
