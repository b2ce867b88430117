"""Port definition for the output sink.

The sink accepts one complete, newline-terminated JSON line per call and
may fail. It is the only shared mutable resource in the pipeline, so
implementations must make each write atomic with respect to concurrent
writers: a reader never sees two documents interleaved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LogSink(ABC):
    """Destination for rendered documents."""

    @abstractmethod
    def write(self, line: bytes) -> None:
        """Write one document line in full.

        Args:
            line: UTF-8 encoded JSON document ending in ``\\n``.

        Raises:
            SinkWriteError: If the line could not be written.
        """
        ...
