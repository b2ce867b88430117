"""Scope domain model.

A Scope is a named execution context with its own fields. Scopes nest; the
chain active when an event fires is passed to the assembler as a tuple,
oldest ancestor first. Scopes are immutable: recording a field produces a
new Scope that replaces the old one in the chain.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from cloudlog.domain.models.event import FieldValue, coerce_fields


@dataclass(frozen=True)
class Scope:
    """A named, nestable execution context.

    Attributes:
        name: Scope name (rendered as ``span.name`` when innermost).
        fields: Ordered, read-only field mapping.
    """

    name: str
    fields: Mapping[str, FieldValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("scope name must be non-empty")
        object.__setattr__(self, "fields", coerce_fields(self.fields))

    def with_fields(self, **fields: Any) -> Scope:
        """Return a copy with extra fields; new values replace existing ones."""
        return Scope(name=self.name, fields={**self.fields, **fields})

    def items(self) -> Iterator[tuple[str, FieldValue]]:
        """Iterate the scope's fields in insertion order."""
        return iter(self.fields.items())
