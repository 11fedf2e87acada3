"""Server layer: dispatcher, stdio loop and settings."""

from inertia_rails_mcp.server.dispatcher import PROTOCOL_VERSION, Dispatcher, Method
from inertia_rails_mcp.server.server import MCPServer, serve_stdio
from inertia_rails_mcp.server.settings import ServerSettings, SettingsLoader, TelemetrySettings

__all__ = [
    "PROTOCOL_VERSION",
    "Dispatcher",
    "MCPServer",
    "Method",
    "ServerSettings",
    "SettingsLoader",
    "TelemetrySettings",
    "serve_stdio",
]
