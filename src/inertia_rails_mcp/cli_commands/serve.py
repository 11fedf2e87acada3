"""``inertia-rails-mcp serve``: run the MCP server on stdin/stdout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path  # noqa: TC003

import click
from pydantic import ValidationError

from inertia_rails_mcp.cli_commands._output import err_console
from inertia_rails_mcp.cli_commands._settings import build_settings, settings_options
from inertia_rails_mcp.protocol.errors import SettingsError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@settings_options
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (logs go to stderr).",
)
@click.option("--telemetry", is_flag=True, help="Enable OpenTelemetry tracing.")
def serve(
    config_path: Path | None,
    docs_path: Path | None,
    changelog_path: Path | None,
    log_level: str | None,
    telemetry: bool,
) -> None:
    """Serve MCP requests over stdio until stdin closes."""
    from inertia_rails_mcp.server.server import MCPServer, serve_stdio

    try:
        settings = build_settings(
            config_path,
            docs_path,
            changelog_path,
            log_level=log_level.upper() if log_level else None,
        )
    except (SettingsError, ValidationError) as exc:
        err_console.print(f"[red]Settings error:[/red] {exc}")
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, stream=sys.stderr, format=LOG_FORMAT)

    if telemetry:
        settings.telemetry.enabled = True
    if settings.telemetry.enabled:
        _enable_telemetry(settings.telemetry.export_to_console, settings.telemetry.otlp_endpoint)

    serve_stdio(MCPServer(settings=settings))


def _enable_telemetry(export_to_console: bool, otlp_endpoint: str | None) -> None:
    from inertia_rails_mcp.utils.telemetry import configure_telemetry

    try:
        configure_telemetry(export_to_console=export_to_console, otlp_endpoint=otlp_endpoint)
    except ImportError as exc:
        logging.getLogger(__name__).warning("Telemetry disabled: %s", exc)
