"""Resolved distributed-trace context.

The core never propagates trace context itself; a provider resolves it for
the current scope chain and hands it over as a TraceContext. Ids may arrive
as hex strings (headers, scope fields) or as integers (OpenTelemetry).
"""

from __future__ import annotations

from dataclasses import dataclass

TRACE_ID_HEX_WIDTH = 32
SPAN_ID_HEX_WIDTH = 16
EMPTY_SPAN_ID = "0" * SPAN_ID_HEX_WIDTH


@dataclass(frozen=True)
class TraceContext:
    """Trace identifiers for the current execution context.

    Attributes:
        trace_id: Trace id as hex string or integer.
        span_id: Span id as hex string or integer; None if the trace has no
            span subdivision.
        sampled: Whether the trace was sampled.
    """

    trace_id: str | int
    span_id: str | int | None = None
    sampled: bool = False

    @property
    def trace_id_hex(self) -> str:
        """Trace id as lowercase hex (integers zero-padded to 32 digits)."""
        if isinstance(self.trace_id, int):
            return format(self.trace_id, f"0{TRACE_ID_HEX_WIDTH}x")
        return self.trace_id.strip().lower()

    @property
    def span_id_hex(self) -> str:
        """Span id as 16-digit lowercase hex; all zeros when absent."""
        if self.span_id is None:
            return EMPTY_SPAN_ID
        if isinstance(self.span_id, int):
            return format(self.span_id, f"0{SPAN_ID_HEX_WIDTH}x")
        span_id = self.span_id.strip().lower()
        return span_id.zfill(SPAN_ID_HEX_WIDTH) if span_id else EMPTY_SPAN_ID

    @property
    def is_valid(self) -> bool:
        """True when the trace id is present and not all zeros."""
        trace_id = self.trace_id_hex
        return bool(trace_id) and trace_id.strip("0") != ""
