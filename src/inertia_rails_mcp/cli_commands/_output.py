"""Shared CLI output formatters."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from inertia_rails_mcp.protocol.models import ResourceDescriptor, ToolDescriptor  # noqa: TC001

console = Console()
# ``serve`` owns stdout for the protocol stream; diagnostics go here.
err_console = Console(stderr=True)


def print_tools_table(tools: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(tool.name, _truncate(tool.description), ", ".join(required) or "-")

    console.print(table)


def print_resources_table(resources: list[ResourceDescriptor]) -> None:
    """Pretty-print resource descriptors as a table."""
    table = Table(title="Registered Resources")
    table.add_column("URI", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("MIME type")

    for resource in resources:
        table.add_row(resource.uri, resource.name, resource.mime_type)

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
