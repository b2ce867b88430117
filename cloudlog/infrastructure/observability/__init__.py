"""Observability integration: structlog pipeline, stdlib bridge, log scopes.

Usage:
    from cloudlog.infrastructure.observability import (
        configure_structlog,
        log_scope,
        record_scope_fields,
    )

    # At startup
    configure_structlog(FormatterConfig.from_environment())

    # In request handling
    with log_scope("request", request_id=request_id):
        structlog.get_logger(__name__).info("request_started")
"""

from cloudlog.infrastructure.observability.logging import (
    CloudLoggingRenderer,
    SinkLogger,
    SinkLoggerFactory,
    build_processors,
    configure_structlog,
    event_from_event_dict,
    get_logger_for_target,
)
from cloudlog.infrastructure.observability.scopes import (
    current_scopes,
    log_scope,
    record_scope_fields,
    scoped,
)
from cloudlog.infrastructure.observability.stdlib_handler import (
    CloudLoggingHandler,
    event_from_record,
)

__all__: list[str] = [
    "CloudLoggingHandler",
    "CloudLoggingRenderer",
    "SinkLogger",
    "SinkLoggerFactory",
    "build_processors",
    "configure_structlog",
    "current_scopes",
    "event_from_event_dict",
    "event_from_record",
    "get_logger_for_target",
    "log_scope",
    "record_scope_fields",
    "scoped",
]
