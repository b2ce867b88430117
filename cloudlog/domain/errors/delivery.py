"""Errors raised when a single event cannot be delivered.

A failed event never poisons the pipeline: each error describes exactly one
document, and the next event is formatted and written independently.
"""

from __future__ import annotations

from cloudlog.domain.exceptions import CloudLogError


class DocumentWriteError(CloudLogError):
    """Raised when one event's document could not be written in full.

    Attributes:
        target: Producer identifier of the event that was lost.
    """

    def __init__(self, message: str, target: str = "") -> None:
        """Initialize the write error.

        Args:
            message: What went wrong.
            target: Producer identifier of the affected event.
        """
        self.target = target
        super().__init__(message)


class DocumentEncodingError(DocumentWriteError):
    """Raised when the assembled document cannot be encoded as JSON."""


class SinkWriteError(DocumentWriteError):
    """Raised when the output sink rejects or fails the final write.

    Attributes:
        byte_count: Size of the line that was being written.
    """

    def __init__(self, message: str, target: str = "", byte_count: int = 0) -> None:
        self.byte_count = byte_count
        super().__init__(message, target=target)
