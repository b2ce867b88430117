"""OpenTelemetry trace context provider.

Reads the span that is current in the OpenTelemetry context. The scope chain
is not consulted: OpenTelemetry propagates its own context.
"""

from __future__ import annotations

from collections.abc import Sequence

from opentelemetry import trace

from cloudlog.application.ports.trace_context_provider import TraceContextProvider
from cloudlog.domain.models.scope import Scope
from cloudlog.domain.models.trace_context import TraceContext


class OpenTelemetryTraceContextProvider(TraceContextProvider):
    """Trace context from the current OpenTelemetry span."""

    def current_trace_context(self, scopes: Sequence[Scope]) -> TraceContext | None:
        """Return the current span's context, or None when it is invalid."""
        span_context = trace.get_current_span().get_span_context()
        if not span_context.is_valid:
            return None
        return TraceContext(
            trace_id=span_context.trace_id,
            span_id=span_context.span_id,
            sampled=span_context.trace_flags.sampled,
        )
