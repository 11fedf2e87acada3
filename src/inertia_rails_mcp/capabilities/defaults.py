"""The fixed capability set served by the server.

Builds a pre-loaded :class:`CapabilityRegistry` from server settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inertia_rails_mcp.capabilities.registry import CapabilityRegistry
from inertia_rails_mcp.capabilities.resources import ApiReference, ConfigurationReference
from inertia_rails_mcp.capabilities.tools import (
    ChangelogTool,
    DocumentationTool,
    ExampleTool,
    MethodLookupTool,
)

if TYPE_CHECKING:
    from inertia_rails_mcp.capabilities.base import Resource, Tool
    from inertia_rails_mcp.server.settings import ServerSettings


def build_default_registry(settings: ServerSettings) -> CapabilityRegistry:
    """Return a registry with every built-in tool and resource."""
    tools: dict[str, Tool] = {
        "documentation": DocumentationTool(settings.docs_path),
        "method_lookup": MethodLookupTool(),
        "changelog": ChangelogTool(settings.changelog_path),
        "example": ExampleTool(),
    }
    resources: dict[str, Resource] = {
        "api_reference": ApiReference(),
        "configuration": ConfigurationReference(),
    }
    return CapabilityRegistry(tools, resources)
