"""Standard library logging bridge.

Routes ``logging`` records from third-party libraries through the same
document assembler as structlog events:

    handler = CloudLoggingHandler(assembler, OpenTelemetryTraceContextProvider())
    logging.getLogger().addHandler(handler)
    logging.getLogger("urllib3").warning("retrying", extra={"attempt": 2})
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from cloudlog.application.ports.trace_context_provider import TraceContextProvider
from cloudlog.application.services.document_assembler import DocumentAssembler
from cloudlog.domain.models.event import Event, SourceLocation
from cloudlog.domain.models.severity import Level
from cloudlog.infrastructure.observability.scopes import current_scopes

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_PACKAGE_LOGGER = "cloudlog"

_EXCEPTION_FIELD = "exception"
_STACK_FIELD = "stack"


def event_from_record(
    record: logging.LogRecord, formatter: logging.Formatter | None = None
) -> Event:
    """Convert a LogRecord into an Event.

    Args:
        record: The record to convert.
        formatter: Used to format exception and stack info.

    Returns:
        The Event to format.
    """
    formatter = formatter or logging.Formatter()
    fields: dict[str, Any] = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }
    if record.exc_info and record.exc_info[0] is not None:
        fields[_EXCEPTION_FIELD] = formatter.formatException(record.exc_info)
    elif record.exc_text:
        fields[_EXCEPTION_FIELD] = record.exc_text
    if record.stack_info:
        fields[_STACK_FIELD] = formatter.formatStack(record.stack_info)

    return Event(
        level=Level.from_number(record.levelno),
        target=record.name,
        message=record.getMessage(),
        fields=fields,
        timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
        source_location=SourceLocation(
            file=record.pathname, line=record.lineno, function=record.funcName
        ),
    )


def is_external_record(record: logging.LogRecord) -> bool:
    """Reject the package's own diagnostics so they never reach the sink."""
    name = record.name
    return not (name == _PACKAGE_LOGGER or name.startswith(_PACKAGE_LOGGER + "."))


class CloudLoggingHandler(logging.Handler):
    """logging.Handler emitting Cloud Logging documents.

    Write failures go to ``handleError``, as for any stdlib handler. Records
    from the ``cloudlog`` loggers are filtered out.
    """

    def __init__(
        self,
        assembler: DocumentAssembler,
        trace_provider: TraceContextProvider | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler.

        Args:
            assembler: Assembler with a sink configured.
            trace_provider: Trace context source; None disables lookup.
            level: Handler threshold.
        """
        super().__init__(level)
        self.addFilter(is_external_record)
        self.assembler = assembler
        self.trace_provider = trace_provider

    def emit(self, record: logging.LogRecord) -> None:
        try:
            event = event_from_record(record, self.formatter)
            scopes = current_scopes()
            trace = None
            if self.trace_provider is not None:
                trace = self.trace_provider.current_trace_context(scopes)
            self.assembler.emit(event, scopes, trace)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
