"""Configuration errors."""

from cloudlog.domain.exceptions import CloudLogError


class ConfigurationError(CloudLogError, ValueError):
    """Raised when formatter configuration values are invalid.

    Also a ValueError so dataclass validation keeps its usual contract.

    Attributes:
        setting: Name of the offending setting.
    """

    def __init__(self, setting: str, reason: str) -> None:
        """Initialize the configuration error.

        Args:
            setting: Name of the offending setting.
            reason: Why the value was rejected.
        """
        self.setting = setting
        super().__init__(f"Invalid {setting}: {reason}")
