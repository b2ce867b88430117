"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import logging
import os

import structlog

from cloudlog.application.services.document_assembler import DocumentAssembler
from cloudlog.config.formatter_config import FormatterConfig
from cloudlog.infrastructure.adapters.sinks.stream_sink import StreamSink
from cloudlog.infrastructure.adapters.tracing.opentelemetry_provider import (
    OpenTelemetryTraceContextProvider,
)
from cloudlog.infrastructure.observability.logging import configure_structlog
from cloudlog.infrastructure.observability.stdlib_handler import CloudLoggingHandler

# Environment variable for environment detection
ENVIRONMENT_VAR = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "production"


def configure_cloud_logging(
    environment: str | None = None,
    *,
    capture_stdlib: bool = False,
) -> DocumentAssembler:
    """Configure structured logging for Cloud Logging.

    Reads FormatterConfig from the environment, writes to stdout and
    correlates with the current OpenTelemetry span. Should be called first
    in the startup sequence, before any logging occurs.

    Args:
        environment: 'production' or 'development'; read from ENVIRONMENT
            when None.
        capture_stdlib: Also route standard library logging records through
            the assembler by installing a CloudLoggingHandler on the root
            logger. A handler left by an earlier call is replaced.

    Returns:
        The DocumentAssembler backing the pipeline.
    """
    if environment is None:
        environment = os.getenv(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    config = FormatterConfig.from_environment()
    trace_provider = OpenTelemetryTraceContextProvider()
    assembler = configure_structlog(
        config,
        sink=StreamSink(),
        trace_provider=trace_provider,
        environment=environment,
    )

    if capture_stdlib:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if isinstance(handler, CloudLoggingHandler):
                root.removeHandler(handler)
        root.addHandler(CloudLoggingHandler(assembler, trace_provider))
        root.setLevel(int(config.level))

    log = structlog.get_logger(__name__).bind(component="startup_logging")
    log.debug(
        "structured_logging_configured",
        environment=environment,
        trace_correlation=config.trace_correlation_enabled,
    )
    return assembler


__all__ = ["configure_cloud_logging"]
