"""ExampleTool: canned code examples for common use cases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from inertia_rails_mcp.capabilities.base import ToolArguments, parse_arguments
from inertia_rails_mcp.capabilities.data.examples import EXAMPLES, ExampleEntry


class ExampleArgs(ToolArguments):
    # The enum is advertised but not enforced; unknown topics get a plain-text answer.
    topic: str = Field(
        description="Topic for which to show examples",
        json_schema_extra={"enum": list(EXAMPLES)},
    )


class ExampleTool:
    def __init__(self, examples: Mapping[str, ExampleEntry] = EXAMPLES) -> None:
        self._examples = examples

    def description(self) -> str:
        return "Get code examples for common Inertia-rails use cases"

    def input_schema(self) -> dict[str, Any]:
        return ExampleArgs.json_schema()

    def call(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments("example", ExampleArgs, arguments)
        entry = self._examples.get(args.topic)
        if entry is None:
            return f"No example found for topic '{args.topic}'"
        return format_example(args.topic, entry)


def format_example(topic: str, entry: ExampleEntry) -> str:
    title = topic.replace("_", " ").capitalize()
    return "\n".join(
        [
            f"📝 Example: {title}",
            f"\n{entry.description}",
            f"\n```{entry.language}",
            entry.code.strip(),
            "```",
        ]
    )
