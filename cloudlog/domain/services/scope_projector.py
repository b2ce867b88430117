"""Projection of the active scope chain into the ``span`` object.

The span is named after the innermost scope. Its fields are every scope's
fields, nested and camelCased, applied oldest to innermost so the most
deeply nested scope wins a conflict. With no active scope there is no span.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain
from typing import Any

from cloudlog.domain.models.scope import Scope
from cloudlog.domain.services.path_nester import nest_fields

SPAN_NAME_KEY = "name"


def project_scopes(scopes: Sequence[Scope]) -> dict[str, Any] | None:
    """Render the active scope chain as a span object.

    Args:
        scopes: Active scopes, oldest ancestor first.

    Returns:
        ``{"name": <innermost name>, **fields}``, or None for an empty chain.
    """
    if not scopes:
        return None

    merged = nest_fields(chain.from_iterable(scope.items() for scope in scopes))
    span: dict[str, Any] = {SPAN_NAME_KEY: scopes[-1].name}
    for key, value in merged.items():
        if key != SPAN_NAME_KEY:
            span[key] = value
    return span
