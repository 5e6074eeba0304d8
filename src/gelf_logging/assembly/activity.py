"""Assembly – trace/span correlation fields from the ambient OpenTelemetry span."""
from __future__ import annotations

from enum import Flag, auto

from opentelemetry import trace


class ActivityTrackingOptions(Flag):
    """Which parts of the current span context are attached to messages."""

    NONE = 0
    TRACE_ID = auto()
    SPAN_ID = auto()
    TRACE_FLAGS = auto()
    TRACE_STATE = auto()


class ActivityEnricher:
    """Reads the current span and yields correlation fields.

    No active (valid) span yields an empty mapping regardless of *tracking*.
    """

    def enrich(self, tracking: ActivityTrackingOptions) -> dict[str, str]:
        if not tracking:
            return {}
        ctx = trace.get_current_span().get_span_context()
        if not ctx.is_valid:
            return {}
        fields: dict[str, str] = {}
        if ActivityTrackingOptions.TRACE_ID in tracking:
            fields["trace_id"] = format(ctx.trace_id, "032x")
        if ActivityTrackingOptions.SPAN_ID in tracking:
            fields["span_id"] = format(ctx.span_id, "016x")
        if ActivityTrackingOptions.TRACE_FLAGS in tracking:
            fields["trace_flags"] = format(int(ctx.trace_flags), "02x")
        if ActivityTrackingOptions.TRACE_STATE in tracking and ctx.trace_state:
            fields["trace_state"] = ctx.trace_state.to_header()
        return fields


__all__ = ["ActivityEnricher", "ActivityTrackingOptions"]
