"""Trace correlation fields.

When Cloud Trace correlation is enabled and a valid trace context is
available, three fields link the entry to its trace:

    logging.googleapis.com/trace          projects/<project>/traces/<trace id>
    logging.googleapis.com/spanId         16-digit lowercase hex
    logging.googleapis.com/trace_sampled  bool

Otherwise nothing is emitted; there are no zero or empty placeholders,
except the all-zero span id used when a trace has no span subdivision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cloudlog.domain.models.trace_context import TraceContext
from cloudlog.domain.primitives.document_keys import DocumentKey

if TYPE_CHECKING:
    from cloudlog.config.formatter_config import CloudTraceConfig


def trace_resource_name(project_id: str, trace_id: str) -> str:
    """Build the Cloud Trace resource name for a trace id."""
    return f"projects/{project_id}/traces/{trace_id}"


def enrich_trace(
    trace: TraceContext | None,
    cloud_trace: CloudTraceConfig | None,
) -> dict[str, Any]:
    """Compute the trace correlation fields for one event.

    Args:
        trace: Resolved trace context, or None if there is no active trace.
        cloud_trace: Correlation settings; None disables correlation.

    Returns:
        Ordered correlation fields, empty when correlation does not apply.
    """
    if cloud_trace is None or trace is None or not trace.is_valid:
        return {}
    return {
        DocumentKey.TRACE.value: trace_resource_name(
            cloud_trace.project_id, trace.trace_id_hex
        ),
        DocumentKey.SPAN_ID.value: trace.span_id_hex,
        DocumentKey.TRACE_SAMPLED.value: trace.sampled,
    }
