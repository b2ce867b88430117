"""Special field routing.

Recognizes the reserved field families by the camelCased first segment of a
dotted key (so ``http_request.status`` and ``httpRequest.status`` are the
same family) and pulls them out of the generic field bag:

    http_request.*  -> nested under ``httpRequest``
    labels.*        -> string values under ``logging.googleapis.com/labels``
    insert_id       -> string under ``logging.googleapis.com/insertId``
    severity        -> handed to the severity mapper

A bare ``http_request`` or ``labels`` key whose value is a mapping (for
example an HttpRequest, via its structured-value capability) merges at the
root of its family. With a non-mapping value it stays in the generic bag,
where the assembler drops it for colliding with a reserved document key. Dotted
variants of the exact-key families (``insert_id.x``, ``severity.x``) are
ordinary generic fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cloudlog.domain.models.event import FieldValue
from cloudlog.domain.primitives.document_keys import (
    HTTP_REQUEST_FIELD,
    INSERT_ID_FIELD,
    LABELS_FIELD,
    SEVERITY_FIELD,
)
from cloudlog.domain.services.key_normalizer import normalize_key
from cloudlog.domain.services.path_nester import place, split_key
from cloudlog.domain.services.value_rendering import stringify_value

_HTTP_REQUEST_FAMILY = normalize_key(HTTP_REQUEST_FIELD)
_LABELS_FAMILY = normalize_key(LABELS_FIELD)


@dataclass
class RoutedFields:
    """An event's fields, classified.

    Attributes:
        http_request: Nested, camelCased ``httpRequest`` object.
        labels: Flat label mapping with string values.
        insert_id: Stringified insert id, if one was given.
        severity_override: Raw ``severity`` field value.
        has_severity_override: Whether the event carried a ``severity`` field.
        generic: Remaining ``(key, value)`` pairs in insertion order.
    """

    http_request: dict[str, Any] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    insert_id: str | None = None
    severity_override: FieldValue = None
    has_severity_override: bool = False
    generic: list[tuple[str, FieldValue]] = field(default_factory=list)


def route_fields(fields: Mapping[str, FieldValue]) -> RoutedFields:
    """Split an event's fields into the reserved families and the generic bag.

    Args:
        fields: The event's ordered field mapping.

    Returns:
        RoutedFields with each family filled in.
    """
    routed = RoutedFields()
    for key, value in fields.items():
        head, _, rest = key.partition(".")
        family = normalize_key(head)

        if key == SEVERITY_FIELD:
            routed.severity_override = value
            routed.has_severity_override = True
        elif key == INSERT_ID_FIELD:
            if value is not None:
                routed.insert_id = stringify_value(value)
        elif family == _HTTP_REQUEST_FAMILY and (rest or isinstance(value, Mapping)):
            place(routed.http_request, split_key(rest) if rest else [], value)
        elif family == _LABELS_FAMILY and (rest or isinstance(value, Mapping)):
            _add_labels(routed.labels, rest, value)
        else:
            routed.generic.append((key, value))
    return routed


def label_key(path: str) -> str:
    """Normalize a label path, keeping it flat (``a_b.c_d`` -> ``aB.cD``)."""
    segments = [normalize_key(segment) for segment in path.split(".") if segment]
    return ".".join(segments) or path


def _add_labels(labels: dict[str, str], rest: str, value: FieldValue) -> None:
    if rest:
        labels[label_key(rest)] = stringify_value(value)
    elif isinstance(value, Mapping):
        for key, item in value.items():
            labels[label_key(str(key))] = stringify_value(item)
