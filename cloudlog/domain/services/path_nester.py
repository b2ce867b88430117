"""Dotted-path nesting of flat field mappings.

Turns ordered ``(dotted_key, value)`` pairs into a nested mapping with
camelCased keys:

    [("http_request.request_method", "GET"), ("http_request.status", 200)]
    -> {"httpRequest": {"requestMethod": "GET", "status": 200}}

Merge rules:
- Keys sharing a prefix merge into one sub-object (deep mapping union).
- Conflicting non-object values at the same path: the later item wins.
- An object replacing a scalar, or a scalar replacing an object, also
  follows last-write-wins.
- Nested mapping values have their keys normalized recursively but are
  never split on dots.

A literal dotted key and a path assembled from a nested mapping land on the
same location and resolve by insertion order like any other collision.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cloudlog.domain.services.key_normalizer import normalize_key


def split_key(key: str) -> list[str]:
    """Split a dotted key into normalized segments.

    Empty segments (``a..b``, leading or trailing dots) are skipped. A key
    with no non-empty segment is kept whole.
    """
    segments = [normalize_key(segment) for segment in key.split(".") if segment]
    return segments or [key]


def nest_fields(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a nested, camelCased mapping from ordered dotted keys.

    Args:
        items: ``(dotted_key, value)`` pairs in insertion order.

    Returns:
        A new nested dict; the input values are not mutated.
    """
    root: dict[str, Any] = {}
    for key, value in items:
        place(root, split_key(key), value)
    return root


def place(root: dict[str, Any], segments: list[str], value: Any) -> None:
    """Set ``value`` at the segment path under ``root``, merging objects.

    An empty path merges a mapping value into ``root`` itself; a non-mapping
    value has nowhere to go on an empty path and is ignored.
    """
    node = root
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child

    normalized = normalize_value(value)
    if not segments:
        if isinstance(normalized, dict):
            deep_merge(root, normalized)
        return

    leaf = segments[-1]
    existing = node.get(leaf)
    if isinstance(existing, dict) and isinstance(normalized, dict):
        deep_merge(existing, normalized)
    else:
        node[leaf] = normalized


def normalize_value(value: Any) -> Any:
    """Copy a field value, camelCasing the keys of any nested mappings."""
    if isinstance(value, Mapping):
        return {
            normalize_key(str(key)): normalize_value(item)
            for key, item in value.items()
        }
    if isinstance(value, tuple):
        return [normalize_value(item) for item in value]
    return value


def deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place; ``source`` wins conflicts."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            deep_merge(existing, value)
        else:
            target[key] = value
    return target
