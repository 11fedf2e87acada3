"""``inertia-rails-mcp tools``: list and invoke tools without a client."""

from __future__ import annotations

import json
import sys
from pathlib import Path  # noqa: TC003

import click

from inertia_rails_mcp.cli_commands._output import console, print_tools_table
from inertia_rails_mcp.cli_commands._settings import build_settings, settings_options


@click.group()
def tools() -> None:
    """List and invoke tools."""


@tools.command("list")
@settings_options
def list_tools(
    config_path: Path | None,
    docs_path: Path | None,
    changelog_path: Path | None,
) -> None:
    """List registered tools under their namespaced names."""
    from inertia_rails_mcp.capabilities.defaults import build_default_registry

    registry = build_default_registry(build_settings(config_path, docs_path, changelog_path))
    print_tools_table(registry.list_tools())


@tools.command("call")
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
@settings_options
def call(
    name: str,
    raw_args: str,
    config_path: Path | None,
    docs_path: Path | None,
    changelog_path: Path | None,
) -> None:
    """Invoke tool NAME (e.g. inertia_rails_example) and print its text."""
    from inertia_rails_mcp.capabilities.defaults import build_default_registry
    from inertia_rails_mcp.protocol.errors import MCPServerError, ToolNotFoundError

    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid --args:[/red] {exc}")
        sys.exit(1)
    if not isinstance(arguments, dict):
        console.print("[red]Invalid --args:[/red] expected a JSON object")
        sys.exit(1)

    registry = build_default_registry(build_settings(config_path, docs_path, changelog_path))
    try:
        tool = registry.resolve_tool(name)
        if tool is None:
            raise ToolNotFoundError(name)
        text = tool.call(arguments)
    except MCPServerError as exc:
        console.print(f"[red]Error {exc.code}:[/red] {exc}")
        sys.exit(1)

    console.print(text, markup=False, highlight=False, soft_wrap=True)
