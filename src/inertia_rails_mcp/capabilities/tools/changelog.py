"""ChangelogTool: version sections and keyword search over CHANGELOG.md.

A version header is a ``#`` or ``##`` line holding an ``X.Y.Z`` version,
optionally bracketed and ``v``-prefixed (``## [v3.0.0] - 2024-01-01``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import Field

from inertia_rails_mcp.capabilities.base import ToolArguments, parse_arguments

LATEST = "latest"
MAX_LATEST_LINES = 50

_VERSION_HEADER_RE = re.compile(r"^##?\s*\[?v?(\d+\.\d+\.\d+)\]?.*$", re.MULTILINE)
_NEXT_HEADER_RE = re.compile(r"^##?\s*\[?v?\d+\.\d+\.\d+", re.MULTILINE)


class ChangelogArgs(ToolArguments):
    version: str | None = Field(
        default=None,
        description='Specific version to look up (e.g., "3.0.0") or "latest"',
    )
    search: str | None = Field(
        default=None,
        description="Search for specific features or changes",
    )


class ChangelogTool:
    """Look up releases in the changelog file at *changelog_path*."""

    def __init__(self, changelog_path: Path) -> None:
        self._changelog_path = changelog_path

    def description(self) -> str:
        return "Look up changes, new features, and breaking changes in Inertia-rails versions"

    def input_schema(self) -> dict[str, Any]:
        return ChangelogArgs.json_schema()

    def call(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments("changelog", ChangelogArgs, arguments)
        if not self._changelog_path.is_file():
            return "CHANGELOG.md not found"

        content = self._changelog_path.read_text(encoding="utf-8")
        if args.version:
            return version_section(content, args.version)
        if args.search:
            return search_changelog(content, args.search)
        return latest_changes(content)


def version_section(content: str, version: str) -> str:
    if version == LATEST:
        return latest_changes(content)

    pattern = re.compile(
        rf"^##?\s*\[?v?{re.escape(version)}\]?.*$", re.MULTILINE | re.IGNORECASE
    )
    match = pattern.search(content)
    if match is None:
        return f"Version {version} not found in changelog"

    section = _section_from(content[match.start() :], limit_lines=None)
    return f"📋 Version {version}:\n\n{section.strip()}"


def latest_changes(content: str) -> str:
    match = _VERSION_HEADER_RE.search(content)
    if match is None:
        return "No version information found"

    section = _section_from(content[match.start() :], limit_lines=MAX_LATEST_LINES)
    return f"📋 Latest changes:\n\n{section.strip()}"


def search_changelog(content: str, term: str) -> str:
    needle = term.lower()
    grouped: dict[str, list[str]] = {}
    current_version: str | None = None

    for line in content.splitlines():
        header = _VERSION_HEADER_RE.match(line)
        if header:
            current_version = header.group(1)
        if current_version is not None and needle in line.lower():
            grouped.setdefault(current_version, []).append(line.strip())

    if not grouped:
        return f"No results found for '{term}'"

    output = [f"🔍 Search results for '{term}':\n"]
    for version, lines in grouped.items():
        output.append(f"\n📌 Version {version}:")
        output.extend(f"  • {line}" for line in lines)
    return "\n".join(output)


def _section_from(remaining: str, *, limit_lines: int | None) -> str:
    """Cut *remaining* at the next version header.

    When it is the last section, keep at most *limit_lines* lines.
    """
    next_header = _NEXT_HEADER_RE.search(remaining, 1)
    if next_header is not None:
        return remaining[: next_header.start()]
    if limit_lines is None:
        return remaining
    return "".join(remaining.splitlines(keepends=True)[:limit_lines])
