"""In-memory sink stub for testing.

This module provides a configurable stub implementation of LogSink for use
in unit and integration tests: it keeps every written line and can be told
to fail writes.
"""

from __future__ import annotations

import json
import threading
from typing import Any

from cloudlog.application.ports.log_sink import LogSink
from cloudlog.domain.errors.delivery import SinkWriteError


class InMemorySinkStub(LogSink):
    """Stub implementation of LogSink for testing.

    Provides full control over sink behavior for testing scenarios
    including:
    - Normal operation (lines captured in order)
    - Write failures (every write, or only the next N)

    Attributes:
        _lines: Captured lines, newline included.
        _fail_writes: Fail every write while set.
        _failures_remaining: Number of upcoming writes to fail.
        _write_attempts: Total number of write() calls.
    """

    def __init__(self) -> None:
        """Initialize an empty sink stub."""
        self._lines: list[bytes] = []
        self._fail_writes = False
        self._failures_remaining = 0
        self._write_attempts = 0
        self._lock = threading.Lock()

    def write(self, line: bytes) -> None:
        """Capture a line, or fail if configured to.

        Raises:
            SinkWriteError: When a failure is configured.
        """
        with self._lock:
            self._write_attempts += 1
            if self._fail_writes or self._failures_remaining > 0:
                if self._failures_remaining > 0:
                    self._failures_remaining -= 1
                raise SinkWriteError("Simulated sink failure", byte_count=len(line))
            self._lines.append(line)

    # Test helper methods

    def set_fail_writes(self, fail: bool) -> None:
        """Fail (or stop failing) every write."""
        self._fail_writes = fail

    def fail_next_writes(self, count: int = 1) -> None:
        """Fail only the next ``count`` writes."""
        self._failures_remaining = count

    @property
    def lines(self) -> list[bytes]:
        """Captured lines in write order."""
        with self._lock:
            return list(self._lines)

    @property
    def write_attempts(self) -> int:
        return self._write_attempts

    def documents(self) -> list[dict[str, Any]]:
        """Captured lines parsed as JSON documents."""
        return [json.loads(line) for line in self.lines]

    def last_document(self) -> dict[str, Any]:
        """The most recently captured document.

        Raises:
            AssertionError: If nothing was written.
        """
        documents = self.documents()
        if not documents:
            raise AssertionError("no document was written to the sink")
        return documents[-1]

    def clear(self) -> None:
        """Reset captured lines and failure configuration."""
        with self._lock:
            self._lines.clear()
            self._fail_writes = False
            self._failures_remaining = 0
            self._write_attempts = 0
