"""DocumentationTool: case-insensitive search over the markdown docs tree."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import Field

from inertia_rails_mcp.capabilities.base import ToolArguments, parse_arguments

MAX_SECTIONS_PER_FILE = 3
CONTEXT_LINES = 2

_HEADING_RE = re.compile(r"^#+\s+(.+)$")


class DocumentationArgs(ToolArguments):
    query: str = Field(
        description='Search query for documentation (e.g., "render", "props", "shared data")',
    )
    category: Literal["guide", "cookbook", "api", "all"] = Field(
        default="all",
        description="Documentation category to search in",
    )


@dataclass(frozen=True)
class Section:
    header: str
    content: str
    line: int


@dataclass(frozen=True)
class FileMatch:
    file: str
    sections: list[Section]


class DocumentationTool:
    """Search and retrieve documentation pages under *docs_path*."""

    def __init__(self, docs_path: Path) -> None:
        self._docs_path = docs_path

    def description(self) -> str:
        return "Search and retrieve Inertia-rails documentation"

    def input_schema(self) -> dict[str, Any]:
        return DocumentationArgs.json_schema()

    def call(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments("documentation", DocumentationArgs, arguments)
        matches = self.search(args.query, args.category)
        if not matches:
            return f"No documentation found for '{args.query}'"
        return _format_matches(matches, args.query)

    def search(self, query: str, category: str = "all") -> list[FileMatch]:
        """Return files under the category directory whose text contains *query*."""
        root = self._docs_path if category == "all" else self._docs_path / category
        if not root.is_dir():
            return []

        needle = query.lower()
        matches: list[FileMatch] = []
        for path in sorted(root.rglob("*.md")):
            text = path.read_text(encoding="utf-8", errors="replace")
            if needle not in text.lower():
                continue
            sections = _relevant_sections(text.splitlines(), needle)
            if sections:
                matches.append(
                    FileMatch(file=path.relative_to(self._docs_path).as_posix(), sections=sections)
                )
        return matches


def _relevant_sections(lines: list[str], needle: str) -> list[Section]:
    sections: list[Section] = []
    for index, line in enumerate(lines):
        if needle not in line.lower():
            continue
        start = max(index - CONTEXT_LINES, 0)
        end = min(index + CONTEXT_LINES, len(lines) - 1)
        sections.append(
            Section(
                header=_nearest_heading(lines, index),
                content="\n".join(lines[start : end + 1]).strip(),
                line=index + 1,
            )
        )
        if len(sections) == MAX_SECTIONS_PER_FILE:
            break
    return sections


def _nearest_heading(lines: list[str], index: int) -> str:
    for candidate in reversed(lines[: index + 1]):
        match = _HEADING_RE.match(candidate)
        if match:
            return match.group(1).strip()
    return "Introduction"


def _format_matches(matches: list[FileMatch], query: str) -> str:
    output = [f"Documentation for '{query}':\n"]
    for match in matches:
        output.append(f"\n📄 {match.file}")
        for section in match.sections:
            output.append(f"\n  § {section.header} (line {section.line})")
            output.append("\n".join(f"    {line}" for line in section.content.splitlines()))
    return "\n".join(output)
