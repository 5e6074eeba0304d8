"""Unit tests for ActivityEnricher against a real OpenTelemetry SDK tracer."""

from __future__ import annotations

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace.span import TraceState

from gelf_logging.assembly import ActivityEnricher, ActivityTrackingOptions


@pytest.fixture
def tracer():
    return TracerProvider().get_tracer("gelf-logging-tests")


class TestActivityEnricher:
    def test_no_active_span_yields_nothing(self) -> None:
        tracking = ActivityTrackingOptions.TRACE_ID | ActivityTrackingOptions.SPAN_ID
        assert ActivityEnricher().enrich(tracking) == {}

    def test_none_tracking_yields_nothing(self, tracer) -> None:
        with tracer.start_as_current_span("op"):
            assert ActivityEnricher().enrich(ActivityTrackingOptions.NONE) == {}

    def test_trace_and_span_ids(self, tracer) -> None:
        tracking = ActivityTrackingOptions.TRACE_ID | ActivityTrackingOptions.SPAN_ID
        with tracer.start_as_current_span("op") as span:
            ctx = span.get_span_context()
            fields = ActivityEnricher().enrich(tracking)
        assert fields == {
            "trace_id": format(ctx.trace_id, "032x"),
            "span_id": format(ctx.span_id, "016x"),
        }

    def test_flags_gate_fields_individually(self, tracer) -> None:
        with tracer.start_as_current_span("op"):
            fields = ActivityEnricher().enrich(ActivityTrackingOptions.SPAN_ID)
        assert set(fields) == {"span_id"}
        assert len(fields["span_id"]) == 16

    def test_nested_span_reports_innermost(self, tracer) -> None:
        with tracer.start_as_current_span("outer") as outer:
            with tracer.start_as_current_span("inner") as inner:
                fields = ActivityEnricher().enrich(
                    ActivityTrackingOptions.TRACE_ID | ActivityTrackingOptions.SPAN_ID
                )
        assert fields["span_id"] == format(inner.get_span_context().span_id, "016x")
        assert fields["trace_id"] == format(outer.get_span_context().trace_id, "032x")

    def test_trace_flags(self, tracer) -> None:
        with tracer.start_as_current_span("op") as span:
            fields = ActivityEnricher().enrich(ActivityTrackingOptions.TRACE_FLAGS)
        expected = format(int(span.get_span_context().trace_flags), "02x")
        assert fields == {"trace_flags": expected}
        assert int(fields["trace_flags"], 16) & 0x01

    def test_trace_state_only_when_present(self, tracer) -> None:
        from opentelemetry import trace

        with tracer.start_as_current_span("op"):
            assert ActivityEnricher().enrich(ActivityTrackingOptions.TRACE_STATE) == {}

        parent = trace.SpanContext(
            trace_id=0xABCD1234ABCD1234ABCD1234ABCD1234,
            span_id=0x1234ABCD1234ABCD,
            is_remote=True,
            trace_flags=trace.TraceFlags(trace.TraceFlags.SAMPLED),
            trace_state=TraceState([("vendor", "value")]),
        )
        with trace.use_span(trace.NonRecordingSpan(parent)):
            fields = ActivityEnricher().enrich(
                ActivityTrackingOptions.TRACE_ID | ActivityTrackingOptions.TRACE_STATE
            )
        assert fields == {
            "trace_id": "abcd1234abcd1234abcd1234abcd1234",
            "trace_state": "vendor=value",
        }
