"""Tool implementations."""

from inertia_rails_mcp.capabilities.tools.changelog import ChangelogTool
from inertia_rails_mcp.capabilities.tools.documentation import DocumentationTool
from inertia_rails_mcp.capabilities.tools.examples import ExampleTool
from inertia_rails_mcp.capabilities.tools.method_lookup import MethodLookupTool

__all__ = ["ChangelogTool", "DocumentationTool", "ExampleTool", "MethodLookupTool"]
