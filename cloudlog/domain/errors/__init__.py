"""Domain errors for cloudlog.

All exceptions inherit from CloudLogError.
"""

from cloudlog.domain.errors.configuration import ConfigurationError
from cloudlog.domain.errors.delivery import (
    DocumentEncodingError,
    DocumentWriteError,
    SinkWriteError,
)
from cloudlog.domain.errors.scope import NoActiveScopeError

__all__: list[str] = [
    "ConfigurationError",
    "DocumentEncodingError",
    "DocumentWriteError",
    "NoActiveScopeError",
    "SinkWriteError",
]
