"""Trace context provider reading ids recorded as scope fields.

For platforms that hand the trace id to the service in a request header
(``X-Cloud-Trace-Context``, ``traceparent``), the request handler records the
ids on its scope:

    with log_scope("request", trace_id=trace_id, span_id=span_id):
        ...

The innermost scope carrying a field wins, field by field.
"""

from __future__ import annotations

from collections.abc import Sequence

from cloudlog.application.ports.trace_context_provider import TraceContextProvider
from cloudlog.domain.models.scope import Scope
from cloudlog.domain.models.trace_context import TraceContext

TRACE_ID_FIELD = "trace_id"
SPAN_ID_FIELD = "span_id"
TRACE_SAMPLED_FIELD = "trace_sampled"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class ScopeFieldTraceContextProvider(TraceContextProvider):
    """Trace context from ``trace_id`` / ``span_id`` / ``trace_sampled`` scope fields.

    Attributes:
        trace_id_field: Field holding the trace id.
        span_id_field: Field holding the span id.
        sampled_field: Field holding the sampled flag.
    """

    def __init__(
        self,
        trace_id_field: str = TRACE_ID_FIELD,
        span_id_field: str = SPAN_ID_FIELD,
        sampled_field: str = TRACE_SAMPLED_FIELD,
    ) -> None:
        self.trace_id_field = trace_id_field
        self.span_id_field = span_id_field
        self.sampled_field = sampled_field

    def current_trace_context(self, scopes: Sequence[Scope]) -> TraceContext | None:
        trace_id = _innermost(scopes, self.trace_id_field)
        if not isinstance(trace_id, (str, int)) or isinstance(trace_id, bool):
            return None
        span_id = _innermost(scopes, self.span_id_field)
        if not isinstance(span_id, (str, int)) or isinstance(span_id, bool):
            span_id = None
        return TraceContext(
            trace_id=trace_id,
            span_id=span_id,
            sampled=_as_flag(_innermost(scopes, self.sampled_field)),
        )


def _innermost(scopes: Sequence[Scope], key: str) -> object:
    for scope in reversed(scopes):
        if key in scope.fields:
            return scope.fields[key]
    return None


def _as_flag(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return False
