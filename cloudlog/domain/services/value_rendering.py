"""String and JSON rendering of field values.

Labels and insert ids must be strings in the Cloud Logging schema, so every
FieldValue needs a string form. These functions are total over the
FieldValue variant.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def describe_error(error: BaseException) -> str:
    """Render an error as ``Type: message`` (just ``Type`` without a message)."""
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def json_default(value: Any) -> Any:
    """``json.dumps`` fallback for values outside plain JSON types."""
    if isinstance(value, BaseException):
        return describe_error(value)
    if isinstance(value, Mapping):
        return dict(value)
    return str(value)


def stringify_value(value: Any) -> str:
    """Render a field value as a string.

    Booleans become ``true``/``false`` and None becomes ``null`` (their
    JSON spellings); numbers use ``str``; mappings and sequences are
    compact JSON; errors use describe_error.

    Examples:
        >>> stringify_value(3)
        '3'
        >>> stringify_value(True)
        'true'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, BaseException):
        return describe_error(value)
    if isinstance(value, (Mapping, tuple, list)):
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=json_default
        )
    return str(value)
