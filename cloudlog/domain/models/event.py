"""Event domain model.

This module defines the immutable record handed to the document assembler:
- FieldValue: the closed set of values a field may hold
- StructuredValue: capability for objects that describe themselves as a mapping
- SourceLocation: callsite of the event
- Event: one leveled diagnostic record with its fields

Field values are coerced into the FieldValue variant when the Event is
built, so the nesting and stringification rules downstream only ever see
str, int, float, bool, None, BaseException, nested mappings and tuples.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Protocol, Union, runtime_checkable

from cloudlog.domain.models.severity import Level

FieldValue = Union[
    str,
    int,
    float,
    bool,
    None,
    BaseException,
    Mapping[str, "FieldValue"],
    tuple["FieldValue", ...],
]


@runtime_checkable
class StructuredValue(Protocol):
    """A value that renders itself as a nested mapping.

    Implemented by HttpRequest; any producer type can opt in by adding an
    ``as_mapping`` method.
    """

    def as_mapping(self) -> Mapping[str, Any]:
        """Return the value's fields as a mapping."""
        ...


def coerce_field_value(value: Any) -> FieldValue:
    """Coerce an arbitrary producer value into the FieldValue variant.

    Args:
        value: Value passed by the producer.

    Returns:
        An equivalent FieldValue. Unknown objects become ``str(value)``.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, Enum):
        return coerce_field_value(value.value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        # JSON has no NaN or Infinity
        return value if math.isfinite(value) else str(value)
    if isinstance(value, BaseException):
        return value
    if isinstance(value, StructuredValue):
        return coerce_field_value(value.as_mapping())
    if isinstance(value, Mapping):
        return {str(key): coerce_field_value(item) for key, item in value.items()}
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(coerce_field_value(item) for item in value)
    return str(value)


def coerce_fields(fields: Mapping[str, Any]) -> Mapping[str, FieldValue]:
    """Coerce a field mapping, keeping insertion order, as a read-only view."""
    return MappingProxyType(
        {str(key): coerce_field_value(value) for key, value in fields.items()}
    )


@dataclass(frozen=True)
class SourceLocation:
    """Callsite of an event.

    Attributes:
        file: Path of the source file.
        line: Line number, if known.
        function: Function name, if known.
    """

    file: str
    line: int | None = None
    function: str | None = None

    def to_document(self) -> dict[str, str]:
        """Render as a LogEntrySourceLocation object.

        The schema types ``line`` as a string (int64 in JSON), so it is
        written as one.
        """
        document = {"file": self.file}
        if self.line is not None:
            document["line"] = str(self.line)
        if self.function:
            document["function"] = self.function
        return document


@dataclass(frozen=True)
class Event:
    """One structured diagnostic record.

    Attributes:
        level: Producer level, or None when the producer used a level
            outside the known set.
        target: Producer identifier (usually the logger name).
        message: Optional human-readable message.
        fields: Ordered, read-only field mapping.
        timestamp: When the event was created (UTC timezone-aware).
        source_location: Callsite, when captured.
    """

    level: Level | None
    target: str = ""
    message: str | None = None
    fields: Mapping[str, FieldValue] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source_location: SourceLocation | None = None

    def __post_init__(self) -> None:
        """Coerce fields and validate the timestamp.

        Raises:
            ValueError: If the timestamp is naive.
        """
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (UTC)")
        if self.message is not None and not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        object.__setattr__(self, "fields", coerce_fields(self.fields))
