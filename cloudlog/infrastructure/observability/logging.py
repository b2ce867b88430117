"""Structured logging configuration with structlog.

This module wires structlog to the Cloud Logging document assembler. Every
``log.info("event", key=value)`` call becomes one JSON line on the sink:

    {
        "time": "2024-01-01T00:00:00.000000Z",
        "severity": "INFO",
        "logging.googleapis.com/sourceLocation": {...},
        "span": {"name": "handle_request", ...},
        "key": "value",
        "message": "event"
    }

Usage:
    # At application startup
    from cloudlog.infrastructure.observability import configure_structlog

    configure_structlog(FormatterConfig.from_environment())      # JSON lines
    configure_structlog(environment="development")               # Console output

    # Then use structlog normally
    import structlog
    log = structlog.get_logger(__name__)
    log.info("order_synced", labels={"tenant": "acme"}, order_id=7)

Failures of the package itself (a document that could not be encoded or
written) are reported through the standard library ``logging`` module, never
back through the sink that failed.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

import structlog
from structlog.typing import Processor

from cloudlog.application.ports.log_sink import LogSink
from cloudlog.application.ports.trace_context_provider import TraceContextProvider
from cloudlog.application.services.document_assembler import (
    DocumentAssembler,
    write_line,
)
from cloudlog.config.formatter_config import FormatterConfig
from cloudlog.domain.errors.delivery import DocumentEncodingError, DocumentWriteError
from cloudlog.domain.models.event import Event, SourceLocation
from cloudlog.domain.models.severity import Level
from cloudlog.infrastructure.adapters.sinks.stream_sink import StreamSink
from cloudlog.infrastructure.observability.scopes import current_scopes

_internal_log = logging.getLogger(__name__)

# Keys structlog processors add that map onto Event attributes
_MESSAGE_KEY = "event"
_LEVEL_KEY = "level"
_LOGGER_NAME_KEY = "logger"
_PATHNAME_KEY = "pathname"
_LINENO_KEY = "lineno"
_FUNC_NAME_KEY = "func_name"

PRODUCTION = "production"
DEVELOPMENT = "development"


def event_from_event_dict(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> Event:
    """Convert a structlog event dict into an Event.

    ``event`` becomes the message, ``level`` (or the method name) the level,
    the logger name the target, and the callsite keys the source location.
    Every other key is kept as a field, in order.

    Args:
        logger: The wrapped logger (its ``name`` is the default target).
        method_name: The logging method that was called.
        event_dict: The processed event dictionary.

    Returns:
        The Event to format.
    """
    fields = dict(event_dict)
    message = fields.pop(_MESSAGE_KEY, None)
    level = Level.from_name(fields.pop(_LEVEL_KEY, None) or method_name)
    target = fields.pop(_LOGGER_NAME_KEY, None) or getattr(logger, "name", "") or ""

    pathname = fields.pop(_PATHNAME_KEY, None)
    lineno = fields.pop(_LINENO_KEY, None)
    func_name = fields.pop(_FUNC_NAME_KEY, None)
    source_location = None
    if pathname:
        source_location = SourceLocation(
            file=str(pathname),
            line=lineno if isinstance(lineno, int) else None,
            function=str(func_name) if func_name else None,
        )

    return Event(
        level=level,
        target=str(target),
        message=None if message is None else str(message),
        fields=fields,
        source_location=source_location,
    )


class CloudLoggingRenderer:
    """Final structlog processor rendering Cloud Logging JSON.

    Snapshots the active scope chain and resolves the trace context at the
    moment the event is processed.
    """

    def __init__(
        self,
        assembler: DocumentAssembler,
        trace_provider: TraceContextProvider | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            assembler: Assembler holding the formatter configuration.
            trace_provider: Source of trace context; None disables lookup.
        """
        self._assembler = assembler
        self._trace_provider = trace_provider

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = event_from_event_dict(logger, method_name, event_dict)
        scopes = current_scopes()
        trace = None
        if self._trace_provider is not None:
            trace = self._trace_provider.current_trace_context(scopes)
        try:
            return self._assembler.render(event, scopes, trace)
        except DocumentEncodingError as exc:
            if self._assembler.config.raise_on_write_error:
                raise
            _internal_log.warning(
                "Dropped log event from %r: %s", event.target or "<root>", exc
            )
            raise structlog.DropEvent from exc


class SinkLogger:
    """structlog logger writing rendered lines to a LogSink.

    Mirrors the method set of ``structlog.PrintLogger`` so any level method
    bound by structlog resolves to ``msg``.

    Attributes:
        name: Logger name, used as the event target.
        sink: Destination of rendered lines.
    """

    def __init__(
        self, sink: LogSink, name: str = "", raise_on_write_error: bool = False
    ) -> None:
        self.name = name
        self.sink = sink
        self._raise_on_write_error = raise_on_write_error

    def __repr__(self) -> str:
        return f"<SinkLogger(name={self.name!r}, sink={self.sink!r})>"

    def msg(self, message: str | bytes) -> None:
        """Write one rendered event as a line.

        Raises:
            DocumentWriteError: Only when raise_on_write_error is set.
        """
        try:
            if isinstance(message, str):
                try:
                    line = (message + "\n").encode("utf-8")
                except UnicodeEncodeError as exc:
                    raise DocumentEncodingError(
                        f"Cannot encode log document as UTF-8: {exc}",
                        target=self.name,
                    ) from exc
            else:
                line = message + b"\n"
            write_line(self.sink, line, target=self.name)
        except DocumentWriteError as exc:
            if self._raise_on_write_error:
                raise
            _internal_log.warning(
                "Dropped log event from %r: %s", self.name or "<root>", exc
            )

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = exception = msg


class SinkLoggerFactory:
    """Produce SinkLogger instances bound to one sink.

    ``structlog.get_logger(name)`` passes ``name`` through to the factory,
    which becomes the logger's name.
    """

    def __init__(self, sink: LogSink, raise_on_write_error: bool = False) -> None:
        self._sink = sink
        self._raise_on_write_error = raise_on_write_error

    def __call__(self, *args: Any) -> SinkLogger:
        name = args[0] if args and isinstance(args[0], str) else ""
        return SinkLogger(
            self._sink, name=name, raise_on_write_error=self._raise_on_write_error
        )


def build_processors(
    config: FormatterConfig,
    assembler: DocumentAssembler,
    trace_provider: TraceContextProvider | None = None,
    environment: str = PRODUCTION,
) -> list[Processor]:
    """Build the processor chain for the given environment.

    Args:
        config: Formatter configuration.
        assembler: Assembler used by the production renderer.
        trace_provider: Trace context source for the production renderer.
        environment: 'production' for JSON lines, anything else for console.

    Returns:
        The ordered processor list.
    """
    # Shared processors for all environments
    processors: list[Processor] = [
        # Merge context from contextvars (async support)
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if config.include_source_location:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.PATHNAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                }
            )
        )

    if environment == PRODUCTION:
        processors.append(CloudLoggingRenderer(assembler, trace_provider))
    else:
        # Pretty console output for development
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_structlog(
    config: FormatterConfig | None = None,
    *,
    sink: LogSink | None = None,
    trace_provider: TraceContextProvider | None = None,
    environment: str = PRODUCTION,
    cache_logger_on_first_use: bool = True,
) -> DocumentAssembler:
    """Configure structlog to emit Cloud Logging documents.

    Should be called once at application startup.

    Args:
        config: Formatter configuration; read from the environment if None.
        sink: Output sink; defaults to a StreamSink over stdout.
        trace_provider: Trace context source; None disables correlation
            lookup even when a project is configured.
        environment: 'production' for JSON lines, 'development' for console.
        cache_logger_on_first_use: Passed through to structlog.

    Returns:
        The DocumentAssembler backing the pipeline.
    """
    if config is None:
        config = FormatterConfig.from_environment()
    if sink is None:
        sink = StreamSink()
    assembler = DocumentAssembler(config, sink=sink)

    structlog.configure(
        processors=build_processors(config, assembler, trace_provider, environment),
        wrapper_class=structlog.make_filtering_bound_logger(int(config.level)),
        context_class=dict,
        logger_factory=SinkLoggerFactory(
            sink, raise_on_write_error=config.raise_on_write_error
        ),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )
    return assembler


def get_logger_for_target(target: str, **context: Any) -> Any:
    """Get a logger whose events carry ``target`` and pre-bound context.

    Args:
        target: Producer identifier (usually the module or class name).
        **context: Fields bound to every event of the logger.

    Returns:
        A bound structlog logger.
    """
    log = structlog.get_logger(target)
    return log.bind(**context) if context else log
