"""Wire-format primitives for the cloudlog domain layer.

The document key names defined here are part of the Cloud Logging
structured-log contract and must never be altered.
"""

from cloudlog.domain.primitives.document_keys import (
    HTTP_REQUEST_FIELD,
    INSERT_ID_FIELD,
    LABELS_FIELD,
    SEVERITY_FIELD,
    DocumentKey,
)

__all__: list[str] = [
    "DocumentKey",
    "HTTP_REQUEST_FIELD",
    "INSERT_ID_FIELD",
    "LABELS_FIELD",
    "SEVERITY_FIELD",
]
