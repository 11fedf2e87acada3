"""MethodLookupTool: signatures and usage for Inertia-Rails helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from inertia_rails_mcp.capabilities.base import ToolArguments, parse_arguments
from inertia_rails_mcp.capabilities.data.methods import CONTROLLER_SOURCE, METHODS, MethodEntry


class MethodLookupArgs(ToolArguments):
    method_name: str = Field(
        description='Name of the method to look up (e.g., "render", "inertia_share")',
    )
    include_source: bool = Field(default=False, description="Include source code location")


class MethodLookupTool:
    def __init__(self, methods: Mapping[str, MethodEntry] = METHODS) -> None:
        self._methods = methods

    def description(self) -> str:
        return "Look up Inertia-rails methods, their signatures, and usage examples"

    def input_schema(self) -> dict[str, Any]:
        return MethodLookupArgs.json_schema()

    def call(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments("method_lookup", MethodLookupArgs, arguments)
        found = self.find(args.method_name)
        if not found:
            return f"Method '{args.method_name}' not found in Inertia-rails"
        return _format_entries(found, include_source=args.include_source)

    def find(self, method_name: str) -> list[tuple[str, MethodEntry]]:
        """Exact match first, otherwise every helper whose name contains the query."""
        if method_name in self._methods:
            return [(method_name, self._methods[method_name])]
        needle = method_name.lower()
        return [(name, entry) for name, entry in self._methods.items() if needle in name]


def _format_entries(entries: list[tuple[str, MethodEntry]], *, include_source: bool) -> str:
    output: list[str] = []
    for name, entry in entries:
        output.append(f"📚 {name}")
        output.append(f"\nSignature: {entry.signature}")
        if entry.module:
            output.append(f"Module: {entry.module}")
        output.append(f"\n{entry.description}")

        if entry.example:
            output.append("\nExample:")
            output.append("```ruby")
            output.append(entry.example.strip())
            output.append("```")

        if include_source and entry.module:
            output.append(f"\nSource: {CONTROLLER_SOURCE}")

        if len(entries) > 1:
            output.append("\n---")
    return "\n".join(output).strip()
