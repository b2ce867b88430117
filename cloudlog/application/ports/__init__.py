"""Ports (interfaces) for cloudlog's collaborators."""

from cloudlog.application.ports.log_sink import LogSink
from cloudlog.application.ports.trace_context_provider import TraceContextProvider

__all__: list[str] = ["LogSink", "TraceContextProvider"]
