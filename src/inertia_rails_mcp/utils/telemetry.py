"""OpenTelemetry tracing for request dispatch.

Spans are no-ops until :func:`configure_telemetry` installs an SDK provider
(the ``otel`` extra). Exporters write to stderr or OTLP, never to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

ATTR_METHOD = "mcp.method"
ATTR_REQUEST_ID = "mcp.request.id"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_RESOURCE_URI = "mcp.resource.uri"
ATTR_ERROR_CODE = "mcp.error.code"

_INSTRUMENTATION_NAME = "inertia_rails_mcp"
_INSTALL_HINT = "Install it with: pip install inertia-rails-mcp[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "inertia-rails-mcp",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a tracer provider exporting dispatch spans.

    Raises :class:`ImportError` when the SDK or the OTLP exporter is missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for tracing. {_INSTALL_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if export_to_console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    trace.set_tracer_provider(provider)


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
            OTLPSpanExporter,
        )
    except ImportError as exc:
        msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_INSTALL_HINT}"
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
