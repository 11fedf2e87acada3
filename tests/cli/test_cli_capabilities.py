"""Tests for ``inertia-rails-mcp tools`` and ``inertia-rails-mcp resources``."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from inertia_rails_mcp.cli import main


class TestToolsCommands:
    def test_list(self) -> None:
        result = CliRunner().invoke(main, ["tools", "list"])
        assert result.exit_code == 0, result.output
        assert "inertia_rails_example" in result.output
        assert "inertia_rails_changelog" in result.output

    def test_call(self) -> None:
        result = CliRunner().invoke(
            main,
            ["tools", "call", "inertia_rails_example", "--args", '{"topic": "ssr"}'],
        )
        assert result.exit_code == 0, result.output
        assert "config.ssr_enabled" in result.output

    def test_call_uses_changelog_option(self, tmp_path: Path) -> None:
        changelog = tmp_path / "CHANGELOG.md"
        changelog.write_text("## 4.0.0\n- brand new\n", encoding="utf-8")
        result = CliRunner().invoke(
            main,
            ["tools", "call", "inertia_rails_changelog", "--changelog", str(changelog)],
        )
        assert result.exit_code == 0, result.output
        assert "brand new" in result.output

    def test_call_unknown_tool(self) -> None:
        result = CliRunner().invoke(main, ["tools", "call", "example"])
        assert result.exit_code == 1
        assert "Tool not found" in result.output

    def test_call_invalid_arguments(self) -> None:
        result = CliRunner().invoke(main, ["tools", "call", "inertia_rails_example"])
        assert result.exit_code == 1
        assert "-32602" in result.output

    def test_call_bad_json(self) -> None:
        result = CliRunner().invoke(
            main, ["tools", "call", "inertia_rails_example", "--args", "{nope"]
        )
        assert result.exit_code == 1
        assert "Invalid --args" in result.output

    def test_call_non_object_json(self) -> None:
        result = CliRunner().invoke(
            main, ["tools", "call", "inertia_rails_example", "--args", "[1]"]
        )
        assert result.exit_code == 1
        assert "expected a JSON object" in result.output


class TestResourcesCommands:
    def test_list(self) -> None:
        result = CliRunner().invoke(main, ["resources", "list"])
        assert result.exit_code == 0, result.output
        assert "inertia-rails://api_reference" in result.output

    def test_read(self) -> None:
        result = CliRunner().invoke(main, ["resources", "read", "inertia-rails://api_reference"])
        assert result.exit_code == 0, result.output
        assert "# Inertia Rails API Reference" in result.output

    def test_read_unknown(self) -> None:
        result = CliRunner().invoke(main, ["resources", "read", "inertia-rails://nope"])
        assert result.exit_code == 1
        assert "Resource not found" in result.output
