"""
cloudlog - Cloud Logging structured documents for Python services

Turns leveled log events, emitted inside nested scopes, into one JSON
document per event in the Google Cloud Logging structured-log schema:
severity mapping, camelCased keys, dotted-path nesting, ``httpRequest``,
labels, insert ids, trace correlation and source locations.

Entry points:
- cloudlog.bootstrap.logging.configure_cloud_logging: wire structlog to stdout
- cloudlog.application.services.DocumentAssembler: the formatting core
- cloudlog.infrastructure.observability.log_scope: enter a named scope
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
