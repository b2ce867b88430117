"""
Infrastructure layer - External adapters for cloudlog.

This layer contains:
- Sinks (stream output, in-memory stub)
- Trace context providers (OpenTelemetry, scope fields)
- structlog and stdlib logging integration

IMPORT RULES:
- CAN import from: domain, application, config
- Implements ports defined in application layer
"""

from cloudlog.infrastructure.adapters.sinks.stream_sink import StreamSink

__all__: list[str] = ["StreamSink"]
