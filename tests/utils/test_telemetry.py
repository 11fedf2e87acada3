"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry import trace

from inertia_rails_mcp.capabilities.defaults import build_default_registry
from inertia_rails_mcp.protocol.models import JsonRpcRequest
from inertia_rails_mcp.server.dispatcher import Dispatcher
from inertia_rails_mcp.server.settings import ServerSettings
from inertia_rails_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    _INSTRUMENTATION_NAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute("key", "value")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )


class TestDispatchSpans:
    def _dispatch_with_mock_tracer(self, request: JsonRpcRequest) -> MagicMock:
        span = MagicMock()
        tracer = MagicMock()
        tracer.start_as_current_span.return_value.__enter__.return_value = span
        with patch("inertia_rails_mcp.server.dispatcher._tracer", tracer):
            Dispatcher(build_default_registry(ServerSettings())).dispatch(request)
        tracer.start_as_current_span.assert_called_once_with("mcp.dispatch")
        return span

    def test_records_method_and_id(self) -> None:
        span = self._dispatch_with_mock_tracer(JsonRpcRequest(id=3, method="tools/list"))
        span.set_attribute.assert_any_call(ATTR_METHOD, "tools/list")
        span.set_attribute.assert_any_call(ATTR_REQUEST_ID, "3")

    def test_records_error_code(self) -> None:
        span = self._dispatch_with_mock_tracer(JsonRpcRequest(id=4, method="nope"))
        span.set_attribute.assert_any_call(ATTR_ERROR_CODE, -32601)


class TestAttributeConstants:
    def test_constants_are_namespaced(self) -> None:
        assert ATTR_METHOD.startswith("mcp.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "inertia_rails_mcp"
