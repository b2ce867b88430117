"""Document key names for the Cloud Logging structured-log schema.

Cloud Logging agents lift a handful of keys out of a JSON payload and into
the LogEntry itself. Those keys are matched byte-for-byte, so they live here
as constants rather than as string literals scattered across services.

Reference:
    https://cloud.google.com/logging/docs/structured-logging

Usage:
    from cloudlog.domain.primitives.document_keys import DocumentKey

    document[DocumentKey.SEVERITY] = "INFO"
"""

from enum import StrEnum


class DocumentKey(StrEnum):
    """Top-level keys of an output document, in schema order."""

    TIME = "time"
    SEVERITY = "severity"
    TARGET = "target"
    HTTP_REQUEST = "httpRequest"
    LABELS = "logging.googleapis.com/labels"
    INSERT_ID = "logging.googleapis.com/insertId"
    TRACE = "logging.googleapis.com/trace"
    SPAN_ID = "logging.googleapis.com/spanId"
    TRACE_SAMPLED = "logging.googleapis.com/trace_sampled"
    SOURCE_LOCATION = "logging.googleapis.com/sourceLocation"
    SPAN = "span"
    MESSAGE = "message"


# =============================================================================
# Reserved producer field names (first segment of a dotted key)
# =============================================================================

HTTP_REQUEST_FIELD = "http_request"
"""Fields under this prefix are nested into ``httpRequest``."""

LABELS_FIELD = "labels"
"""Fields under this prefix become string-valued Cloud Logging labels."""

INSERT_ID_FIELD = "insert_id"
"""Exact key; becomes the LogEntry insert id."""

SEVERITY_FIELD = "severity"
"""Exact key; overrides the level-derived severity."""
