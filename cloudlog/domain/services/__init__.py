"""Pure transformation services: each turns part of an event into part of
the output document."""

from cloudlog.domain.services.field_router import RoutedFields, route_fields
from cloudlog.domain.services.key_normalizer import normalize_key
from cloudlog.domain.services.path_nester import nest_fields
from cloudlog.domain.services.scope_projector import project_scopes
from cloudlog.domain.services.severity_mapper import map_severity, severity_for_level
from cloudlog.domain.services.trace_enricher import enrich_trace
from cloudlog.domain.services.value_rendering import stringify_value

__all__: list[str] = [
    "RoutedFields",
    "enrich_trace",
    "map_severity",
    "nest_fields",
    "normalize_key",
    "project_scopes",
    "route_fields",
    "severity_for_level",
    "stringify_value",
]
