"""``inertia-rails-mcp resources``: list and read resources."""

from __future__ import annotations

import sys

import click

from inertia_rails_mcp.cli_commands._output import console, print_resources_table


@click.group()
def resources() -> None:
    """List and read resources."""


@resources.command("list")
def list_resources() -> None:
    """List registered resources and their URIs."""
    from inertia_rails_mcp.capabilities.defaults import build_default_registry
    from inertia_rails_mcp.server.settings import ServerSettings

    print_resources_table(build_default_registry(ServerSettings()).list_resources())


@resources.command("read")
@click.argument("uri")
def read(uri: str) -> None:
    """Print the content of resource URI (e.g. inertia-rails://api_reference)."""
    from inertia_rails_mcp.capabilities.defaults import build_default_registry
    from inertia_rails_mcp.server.settings import ServerSettings

    resource = build_default_registry(ServerSettings()).resolve_resource(uri)
    if resource is None:
        console.print(f"[red]Resource not found:[/red] {uri}")
        sys.exit(1)

    console.print(resource.content(), markup=False, highlight=False, soft_wrap=True)
