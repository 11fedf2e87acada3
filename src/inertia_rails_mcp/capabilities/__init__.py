"""Capability layer: Tool/Resource contracts, registry and implementations."""

from inertia_rails_mcp.capabilities.base import Resource, Tool, ToolArguments
from inertia_rails_mcp.capabilities.defaults import build_default_registry
from inertia_rails_mcp.capabilities.registry import CapabilityRegistry

__all__ = [
    "CapabilityRegistry",
    "Resource",
    "Tool",
    "ToolArguments",
    "build_default_registry",
]
