"""Server settings and the YAML loader that produces them."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from inertia_rails_mcp.protocol.errors import SettingsError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    export_to_console: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Settings for one server process.

    ``docs_path`` and ``changelog_path`` point at the text corpus searched by
    the documentation and changelog tools.
    """

    docs_path: Path = Path("docs")
    changelog_path: Path = Path("CHANGELOG.md")
    log_level: LogLevel = "WARNING"
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    def resolved_against(self, base_dir: Path) -> ServerSettings:
        """Return a copy whose relative paths are anchored at *base_dir*."""
        return self.model_copy(
            update={
                "docs_path": _anchor(self.docs_path, base_dir),
                "changelog_path": _anchor(self.changelog_path, base_dir),
            }
        )


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ServerSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. Relative paths
        resolve against the settings file's directory.

        Raises:
            SettingsError: On read errors, YAML parse errors or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("Settings YAML must be a mapping")

        try:
            settings = ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc
        return settings.resolved_against(self._path.parent)


def _anchor(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path
