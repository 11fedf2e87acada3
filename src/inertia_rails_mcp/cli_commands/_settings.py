"""Shared settings options for commands that build a registry."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from inertia_rails_mcp.server.settings import ServerSettings, SettingsLoader

F = TypeVar("F", bound=Callable[..., Any])


def settings_options(func: F) -> F:
    """Attach ``--config``, ``--docs-path`` and ``--changelog`` to a command."""
    func = click.option(
        "--changelog",
        "changelog_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Changelog file searched by the changelog tool.",
    )(func)
    func = click.option(
        "--docs-path",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory of markdown docs searched by the documentation tool.",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Settings YAML file.",
    )(func)
    return func


def build_settings(
    config_path: Path | None,
    docs_path: Path | None = None,
    changelog_path: Path | None = None,
    **overrides: Any,
) -> ServerSettings:
    """Load settings from *config_path* (if any) and apply CLI overrides.

    Raises:
        SettingsError: If the settings file is invalid.
    """
    settings = SettingsLoader(config_path).load() if config_path else ServerSettings()

    update: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
    if docs_path is not None:
        update["docs_path"] = docs_path
    if changelog_path is not None:
        update["changelog_path"] = changelog_path
    if not update:
        return settings
    return ServerSettings.model_validate({**settings.model_dump(), **update})
