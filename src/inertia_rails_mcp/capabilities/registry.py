"""CapabilityRegistry: a fixed key -> capability map with external naming.

Tools are listed under ``<prefix><key>`` and resources under
``<scheme>://<key>``. Resolution strips the prefix or scheme and looks the
key up; a name that lacks the expected prefix or scheme never matches.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from inertia_rails_mcp.protocol.models import ResourceDescriptor, ToolDescriptor

if TYPE_CHECKING:
    from inertia_rails_mcp.capabilities.base import Resource, Tool

DEFAULT_TOOL_PREFIX = "inertia_rails_"
DEFAULT_RESOURCE_SCHEME = "inertia-rails"


class CapabilityRegistry:
    """Immutable registry of tools and resources.

    Enumeration follows registration order, so ``list_tools()`` and
    ``list_resources()`` are stable for the lifetime of the registry.
    """

    def __init__(
        self,
        tools: Mapping[str, Tool],
        resources: Mapping[str, Resource],
        *,
        tool_prefix: str = DEFAULT_TOOL_PREFIX,
        resource_scheme: str = DEFAULT_RESOURCE_SCHEME,
    ) -> None:
        self._tools: Mapping[str, Tool] = MappingProxyType(dict(tools))
        self._resources: Mapping[str, Resource] = MappingProxyType(dict(resources))
        self._tool_prefix = tool_prefix
        self._resource_scheme = resource_scheme

    @property
    def tool_prefix(self) -> str:
        return self._tool_prefix

    @property
    def resource_scheme(self) -> str:
        return self._resource_scheme

    def lookup_tool(self, key: str) -> Tool | None:
        return self._tools.get(key)

    def lookup_resource(self, key: str) -> Resource | None:
        return self._resources.get(key)

    def resolve_tool(self, name: str) -> Tool | None:
        """Resolve an externally visible tool name to its tool."""
        if not name.startswith(self._tool_prefix):
            return None
        return self.lookup_tool(name[len(self._tool_prefix) :])

    def resolve_resource(self, uri: str) -> Resource | None:
        """Resolve a ``<scheme>://<key>`` URI to its resource."""
        scheme, sep, key = uri.partition("://")
        if not sep or scheme != self._resource_scheme:
            return None
        return self.lookup_resource(key)

    def tool_name(self, key: str) -> str:
        return f"{self._tool_prefix}{key}"

    def resource_uri(self, key: str) -> str:
        return f"{self._resource_scheme}://{key}"

    def list_tools(self) -> list[ToolDescriptor]:
        """Return descriptors for every tool, in registration order."""
        return [
            ToolDescriptor(
                name=self.tool_name(key),
                description=tool.description(),
                input_schema=tool.input_schema(),
            )
            for key, tool in self._tools.items()
        ]

    def list_resources(self) -> list[ResourceDescriptor]:
        """Return descriptors for every resource, in registration order."""
        return [
            ResourceDescriptor(
                uri=self.resource_uri(key),
                name=resource.name(),
                description=resource.description(),
                mime_type=resource.mime_type(),
            )
            for key, resource in self._resources.items()
        ]
