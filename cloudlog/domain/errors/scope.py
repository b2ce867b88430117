"""Scope stack errors."""

from cloudlog.domain.exceptions import CloudLogError


class NoActiveScopeError(CloudLogError):
    """Raised when fields are recorded while no scope is active."""

    def __init__(self, field_names: list[str]) -> None:
        """Initialize the error.

        Args:
            field_names: Names of the fields that could not be recorded.
        """
        self.field_names = field_names
        super().__init__(
            f"Cannot record fields {', '.join(field_names)}: no active log scope"
        )
