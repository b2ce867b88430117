"""Base exception classes for the cloudlog domain layer."""


class CloudLogError(Exception):
    """Base exception for all cloudlog errors.

    Every package-specific exception inherits from this class so callers
    can catch one type around a logging call.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
