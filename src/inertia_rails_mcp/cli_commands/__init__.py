"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from inertia_rails_mcp.cli_commands.resources import resources
    from inertia_rails_mcp.cli_commands.serve import serve
    from inertia_rails_mcp.cli_commands.tools import tools

    cli.add_command(serve)
    cli.add_command(tools)
    cli.add_command(resources)
