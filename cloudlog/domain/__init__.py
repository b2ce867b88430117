"""Domain layer for cloudlog.

Holds the event model and the pure transformation services that turn an
event into a Cloud Logging document. Nothing in this package performs I/O.
"""

from cloudlog.domain.exceptions import CloudLogError

__all__: list[str] = ["CloudLogError"]
