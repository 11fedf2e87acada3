"""inertia-rails-mcp CLI entrypoint."""

from __future__ import annotations

import click

from inertia_rails_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="inertia-rails-mcp")
def main() -> None:
    """Inertia-Rails MCP server."""


# Register subcommands
from inertia_rails_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
