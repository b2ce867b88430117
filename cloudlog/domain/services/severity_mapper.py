"""Severity mapping from producer levels and explicit overrides.

An explicit ``severity`` field wins when it parses to a known LogSeverity;
otherwise the level maps through a fixed table. Malformed overrides are not
errors: they fall back to the level-derived severity.
"""

from __future__ import annotations

from typing import Any, Final

from cloudlog.domain.models.severity import Level, LogSeverity

LEVEL_SEVERITIES: Final[dict[Level, LogSeverity]] = {
    Level.TRACE: LogSeverity.DEBUG,
    Level.DEBUG: LogSeverity.DEBUG,
    Level.INFO: LogSeverity.INFO,
    Level.WARN: LogSeverity.WARNING,
    Level.ERROR: LogSeverity.ERROR,
    Level.CRITICAL: LogSeverity.CRITICAL,
}

_NO_OVERRIDE = object()


def severity_for_level(level: Level | None) -> LogSeverity:
    """Map a producer level to its severity; unknown levels map to DEFAULT."""
    if level is None:
        return LogSeverity.DEFAULT
    return LEVEL_SEVERITIES.get(level, LogSeverity.DEFAULT)


def map_severity(level: Level | None, override: Any = _NO_OVERRIDE) -> LogSeverity:
    """Resolve the document severity for an event.

    Args:
        level: The event's level (None if outside the known set).
        override: Value of the event's ``severity`` field, if it had one.

    Returns:
        The parsed override when valid, else the level-derived severity.
    """
    if override is not _NO_OVERRIDE:
        parsed = LogSeverity.parse(override)
        if parsed is not None:
            return parsed
    return severity_for_level(level)
