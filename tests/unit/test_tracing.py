"""Unit tests for OpenTelemetry tracing helpers in floe_k8s_version.tracing."""

from __future__ import annotations

import pytest
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from floe_k8s_version.tracing import (
    ATTR_OVERRIDE,
    SPAN_NAME,
    TRACER_NAME,
    get_tracer,
    version_check_span,
)


@pytest.fixture
def tracer_with_exporter() -> tuple[trace.Tracer, InMemorySpanExporter]:
    """Create a tracer backed by an in-memory exporter for span inspection."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider(resource=Resource.create({}))
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider.get_tracer(TRACER_NAME), exporter


class TestVersionCheckSpan:
    """Unit tests for version_check_span."""

    def test_creates_named_span(
        self,
        tracer_with_exporter: tuple[trace.Tracer, InMemorySpanExporter],
    ) -> None:
        """Test the span is named k8s_version.check with OK status."""
        tracer, exporter = tracer_with_exporter

        with version_check_span(tracer, override=False):
            pass

        spans = exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].name == SPAN_NAME
        assert spans[0].status.status_code == StatusCode.OK

    def test_sets_override_and_extra_attributes(
        self,
        tracer_with_exporter: tuple[trace.Tracer, InMemorySpanExporter],
    ) -> None:
        """Test override flag and extra attributes are recorded."""
        tracer, exporter = tracer_with_exporter

        with version_check_span(tracer, override=True, extra_attributes={"k8s.context": "kind"}):
            pass

        attributes = exporter.get_finished_spans()[0].attributes
        assert attributes[ATTR_OVERRIDE] is True
        assert attributes["k8s.context"] == "kind"

    def test_error_status_and_reraise(
        self,
        tracer_with_exporter: tuple[trace.Tracer, InMemorySpanExporter],
    ) -> None:
        """Test exceptions set ERROR status and propagate."""
        tracer, exporter = tracer_with_exporter

        with pytest.raises(ValueError, match="bad version"):
            with version_check_span(tracer, override=False):
                raise ValueError("bad version")

        span = exporter.get_finished_spans()[0]
        assert span.status.status_code == StatusCode.ERROR
        assert span.status.description == "ValueError"
        assert span.attributes["exception.type"] == "ValueError"
        assert span.attributes["exception.message"] == "bad version"


class TestGetTracer:
    """Unit tests for get_tracer."""

    def test_returns_tracer(self) -> None:
        """Test a usable tracer is returned without a configured provider."""
        tracer = get_tracer()
        with tracer.start_as_current_span("noop"):
            pass
