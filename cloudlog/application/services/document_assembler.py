"""Document assembler: one Event in, one Cloud Logging JSON line out.

Each event passes through the same fixed sequence of stages, with no
branching and no retries:

    1. classify  - route reserved fields, resolve severity
    2. nest      - nest and camelCase the generic fields
    3. span      - project the active scope chain
    4. enrich    - trace correlation and source location
    5. serialize - encode and write one line to the sink

Key order of the resulting document:

    time, severity, [target], httpRequest, logging.googleapis.com/labels,
    logging.googleapis.com/insertId, logging.googleapis.com/trace,
    logging.googleapis.com/spanId, logging.googleapis.com/trace_sampled,
    logging.googleapis.com/sourceLocation, span, <generic fields>, message

A generic field whose top-level key is a reserved document key is dropped,
whether or not the document holds that key: reserved sections win. A
generic ``message`` field stands in for a missing event message.

The assembler holds nothing but its immutable configuration and the sink
handle, so one instance can serve every thread and task concurrently.

Usage:
    assembler = DocumentAssembler(FormatterConfig(), sink=StreamSink())
    assembler.emit(Event(level=Level.INFO, message="ready"))
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from cloudlog.application.ports.log_sink import LogSink
from cloudlog.config.formatter_config import DEFAULT_FORMATTER_CONFIG, FormatterConfig
from cloudlog.domain.errors.configuration import ConfigurationError
from cloudlog.domain.errors.delivery import DocumentEncodingError, SinkWriteError
from cloudlog.domain.models.event import Event
from cloudlog.domain.models.scope import Scope
from cloudlog.domain.models.trace_context import TraceContext
from cloudlog.domain.primitives.document_keys import DocumentKey
from cloudlog.domain.services.field_router import RoutedFields, route_fields
from cloudlog.domain.services.path_nester import nest_fields
from cloudlog.domain.services.scope_projector import project_scopes
from cloudlog.domain.services.severity_mapper import map_severity
from cloudlog.domain.services.trace_enricher import enrich_trace
from cloudlog.domain.services.value_rendering import json_default

_RESERVED_KEYS = frozenset(key.value for key in DocumentKey)


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as RFC 3339 UTC with microseconds and a ``Z``."""
    utc = timestamp.astimezone(timezone.utc)
    return utc.isoformat(timespec="microseconds").replace("+00:00", "Z")


class DocumentAssembler:
    """Builds, encodes and writes Cloud Logging documents.

    Attributes:
        config: Immutable formatter configuration.
        sink: Destination of emitted lines; optional when only
            assemble/render are used.
    """

    def __init__(
        self,
        config: FormatterConfig = DEFAULT_FORMATTER_CONFIG,
        sink: LogSink | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Formatter configuration.
            sink: Output sink used by emit().
        """
        self._config = config
        self._sink = sink

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def sink(self) -> LogSink | None:
        return self._sink

    def assemble(
        self,
        event: Event,
        scopes: Sequence[Scope] = (),
        trace: TraceContext | None = None,
    ) -> dict[str, Any]:
        """Build the output document for one event.

        Args:
            event: The event to format.
            scopes: Active scope chain, oldest first (a snapshot).
            trace: Resolved trace context, if any.

        Returns:
            The ordered document as a dict.
        """
        routed = route_fields(event.fields)
        if routed.has_severity_override:
            severity = map_severity(event.level, routed.severity_override)
        else:
            severity = map_severity(event.level)

        generic = nest_fields(routed.generic)
        span = project_scopes(scopes)

        document: dict[str, Any] = {
            DocumentKey.TIME.value: format_timestamp(event.timestamp),
            DocumentKey.SEVERITY.value: severity.value,
        }
        if self._config.include_target:
            document[DocumentKey.TARGET.value] = event.target
        self._add_special_fields(document, routed)
        document.update(enrich_trace(trace, self._config.cloud_trace))
        if self._config.include_source_location and event.source_location is not None:
            document[DocumentKey.SOURCE_LOCATION.value] = (
                event.source_location.to_document()
            )
        if span is not None:
            document[DocumentKey.SPAN.value] = span

        message: Any = event.message
        if message is None:
            message = generic.pop(DocumentKey.MESSAGE.value, None)
        for key, value in generic.items():
            if key not in _RESERVED_KEYS:
                document[key] = value
        if message is not None:
            document[DocumentKey.MESSAGE.value] = message
        return document

    def render(
        self,
        event: Event,
        scopes: Sequence[Scope] = (),
        trace: TraceContext | None = None,
    ) -> str:
        """Assemble and encode one event as compact JSON (no newline).

        Raises:
            DocumentEncodingError: If the document cannot be encoded.
        """
        document = self.assemble(event, scopes, trace)
        try:
            return json.dumps(
                document,
                ensure_ascii=False,
                separators=(",", ":"),
                allow_nan=False,
                default=json_default,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise DocumentEncodingError(
                f"Cannot encode log document: {exc}", target=event.target
            ) from exc

    def emit(
        self,
        event: Event,
        scopes: Sequence[Scope] = (),
        trace: TraceContext | None = None,
    ) -> None:
        """Render one event and write it to the sink as a single line.

        A failure affects this event only; nothing is retried.

        Raises:
            ConfigurationError: If the assembler has no sink.
            DocumentEncodingError: If the document cannot be encoded.
            SinkWriteError: If the sink fails the write.
        """
        if self._sink is None:
            raise ConfigurationError("sink", "emit() requires a configured sink")
        rendered = self.render(event, scopes, trace)
        try:
            line = (rendered + "\n").encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DocumentEncodingError(
                f"Cannot encode log document as UTF-8: {exc}", target=event.target
            ) from exc
        write_line(self._sink, line, target=event.target)

    def _add_special_fields(self, document: dict[str, Any], routed: RoutedFields) -> None:
        if routed.http_request:
            document[DocumentKey.HTTP_REQUEST.value] = routed.http_request
        if routed.labels:
            document[DocumentKey.LABELS.value] = routed.labels
        if routed.insert_id is not None:
            document[DocumentKey.INSERT_ID.value] = routed.insert_id


def write_line(sink: LogSink, line: bytes, target: str = "") -> None:
    """Write a rendered line, normalizing sink failures to SinkWriteError."""
    try:
        sink.write(line)
    except SinkWriteError:
        raise
    except (OSError, ValueError) as exc:
        raise SinkWriteError(
            f"Sink rejected log document: {exc}", target=target, byte_count=len(line)
        ) from exc
