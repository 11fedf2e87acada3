"""Resource implementations."""

from inertia_rails_mcp.capabilities.resources.api_reference import ApiReference
from inertia_rails_mcp.capabilities.resources.configuration import ConfigurationReference

__all__ = ["ApiReference", "ConfigurationReference"]
