"""Stub implementations for testing."""

from cloudlog.infrastructure.stubs.memory_sink_stub import InMemorySinkStub

__all__: list[str] = ["InMemorySinkStub"]
