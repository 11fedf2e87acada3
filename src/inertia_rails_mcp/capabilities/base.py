"""Tool and Resource protocols, the contracts every capability satisfies.

The :class:`~inertia_rails_mcp.capabilities.registry.CapabilityRegistry`
holds instances behind these protocols so the dispatcher can list, call and
read capabilities without knowing their concrete types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError

from inertia_rails_mcp.protocol.errors import InvalidArgumentsError


@runtime_checkable
class Tool(Protocol):
    """Invoked with arguments, produces text."""

    def description(self) -> str: ...
    def input_schema(self) -> dict[str, Any]: ...
    def call(self, arguments: Mapping[str, Any]) -> str: ...


@runtime_checkable
class Resource(Protocol):
    """Addressed by URI, exposes text content."""

    def name(self) -> str: ...
    def description(self) -> str: ...
    def mime_type(self) -> str: ...
    def content(self) -> str: ...


class ToolArguments(BaseModel):
    """Base for per-tool argument models.

    Unknown keys are ignored so clients may send extra hints.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """Return the model's JSON schema without pydantic's title noise."""
        schema = cls.model_json_schema()
        schema.pop("title", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        return schema


ArgsT = TypeVar("ArgsT", bound=ToolArguments)


def parse_arguments(tool: str, model: type[ArgsT], arguments: Mapping[str, Any]) -> ArgsT:
    """Validate *arguments* against *model*.

    Raises:
        InvalidArgumentsError: If validation fails.
    """
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidArgumentsError(tool, details) from exc
