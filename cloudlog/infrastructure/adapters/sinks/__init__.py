"""LogSink adapters."""

from cloudlog.infrastructure.adapters.sinks.stream_sink import StreamSink

__all__: list[str] = ["StreamSink"]
