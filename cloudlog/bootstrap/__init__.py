"""Bootstrap wiring for cloudlog."""

from cloudlog.bootstrap.logging import configure_cloud_logging

__all__: list[str] = ["configure_cloud_logging"]
