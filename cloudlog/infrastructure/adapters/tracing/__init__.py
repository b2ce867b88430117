"""TraceContextProvider adapters."""

from cloudlog.infrastructure.adapters.tracing.opentelemetry_provider import (
    OpenTelemetryTraceContextProvider,
)
from cloudlog.infrastructure.adapters.tracing.scope_field_provider import (
    ScopeFieldTraceContextProvider,
)

__all__: list[str] = [
    "OpenTelemetryTraceContextProvider",
    "ScopeFieldTraceContextProvider",
]
