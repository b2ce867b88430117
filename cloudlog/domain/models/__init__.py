"""Domain models for cloudlog.

Immutable value types handed to the transformation services.
"""

from cloudlog.domain.models.event import (
    Event,
    FieldValue,
    SourceLocation,
    StructuredValue,
    coerce_field_value,
    coerce_fields,
)
from cloudlog.domain.models.http_request import HttpRequest
from cloudlog.domain.models.scope import Scope
from cloudlog.domain.models.severity import Level, LogSeverity
from cloudlog.domain.models.trace_context import TraceContext

__all__: list[str] = [
    "Event",
    "FieldValue",
    "HttpRequest",
    "Level",
    "LogSeverity",
    "Scope",
    "SourceLocation",
    "StructuredValue",
    "TraceContext",
    "coerce_field_value",
    "coerce_fields",
]
