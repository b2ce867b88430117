"""Adapters implementing the application ports."""

from cloudlog.infrastructure.adapters.sinks import StreamSink
from cloudlog.infrastructure.adapters.tracing import (
    OpenTelemetryTraceContextProvider,
    ScopeFieldTraceContextProvider,
)

__all__: list[str] = [
    "OpenTelemetryTraceContextProvider",
    "ScopeFieldTraceContextProvider",
    "StreamSink",
]
