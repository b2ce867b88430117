"""Stream sink: writes document lines to a text or binary stream.

Writes are serialized with one lock per underlying stream, shared by every
StreamSink wrapping that stream, so concurrent events never interleave
partial lines. Locks are held weakly and go away with their stream; a stream
that cannot be weakly referenced is guarded by the sink's own lock. Each
line is written and flushed while the lock is held.
"""

from __future__ import annotations

import io
import sys
import threading
import weakref
from typing import IO, Any

from cloudlog.application.ports.log_sink import LogSink
from cloudlog.domain.errors.delivery import SinkWriteError

_WRITE_LOCKS: weakref.WeakKeyDictionary[Any, threading.Lock] = (
    weakref.WeakKeyDictionary()
)
_WRITE_LOCKS_GUARD = threading.Lock()


def _lock_for(stream: Any) -> threading.Lock | None:
    """Shared lock of a stream; None if the stream is not weakly referenceable."""
    with _WRITE_LOCKS_GUARD:
        try:
            lock = _WRITE_LOCKS.get(stream)
            if lock is None:
                lock = threading.Lock()
                _WRITE_LOCKS[stream] = lock
        except TypeError:
            return None
        return lock


class StreamSink(LogSink):
    """Sink over a file-like stream.

    With no stream given, ``sys.stdout`` is looked up at write time, so
    redirection (and pytest's capsys) is honoured.

    Attributes:
        stream: The stream lines are written to.
    """

    def __init__(self, stream: IO[str] | IO[bytes] | None = None) -> None:
        """Initialize the sink.

        Args:
            stream: Text or binary stream; defaults to the current stdout.
        """
        self._stream = stream
        self._own_lock = threading.Lock()

    @property
    def stream(self) -> IO[str] | IO[bytes]:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: bytes) -> None:
        """Write one line and flush.

        Raises:
            SinkWriteError: If the stream raises or is closed.
        """
        stream = self.stream
        lock = _lock_for(stream)
        if lock is None:
            lock = self._own_lock
        with lock:
            try:
                if isinstance(stream, io.RawIOBase):
                    _write_all_raw(stream, line)
                elif isinstance(stream, io.BufferedIOBase):
                    stream.write(line)
                else:
                    stream.write(line.decode("utf-8"))  # type: ignore[arg-type]
                stream.flush()
            except (OSError, ValueError) as exc:
                raise SinkWriteError(
                    f"Failed to write log line to {_describe(stream)}: {exc}",
                    byte_count=len(line),
                ) from exc


def _write_all_raw(stream: io.RawIOBase, line: bytes) -> None:
    view = memoryview(line)
    while view:
        written = stream.write(view)
        if written is None:
            raise BlockingIOError("non-blocking stream not ready for writing")
        view = view[written:]


def _describe(stream: Any) -> str:
    name = getattr(stream, "name", None)
    return str(name) if name is not None else type(stream).__name__
