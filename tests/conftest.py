"""
Pytest configuration and shared fixtures for cloudlog tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/<layer>/
- Integration tests go in tests/integration/
- structlog configuration is reset after every test
"""

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
import structlog

from cloudlog.application.services.document_assembler import DocumentAssembler
from cloudlog.config.formatter_config import TEST_FORMATTER_CONFIG
from cloudlog.infrastructure.stubs.memory_sink_stub import InMemorySinkStub

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed, timezone-aware event timestamp."""
    return FIXED_TIME


@pytest.fixture
def sink() -> InMemorySinkStub:
    """Fresh in-memory sink."""
    return InMemorySinkStub()


@pytest.fixture
def assembler(sink: InMemorySinkStub) -> DocumentAssembler:
    """Assembler with the test config writing to the in-memory sink."""
    return DocumentAssembler(TEST_FORMATTER_CONFIG, sink=sink)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
