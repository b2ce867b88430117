"""Producer levels and Cloud Logging severities.

Two vocabularies meet here:
- Level: the ordered set of levels a producer logs at (TRACE..CRITICAL).
  Numeric values line up with the standard library ``logging`` levels so a
  ``LogRecord.levelno`` converts without a lookup table.
- LogSeverity: the richer provider vocabulary (NOTICE, ALERT, EMERGENCY...)
  written to the ``severity`` key of every document.

Reference:
    https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry#LogSeverity
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any


class Level(IntEnum):
    """Ordered producer levels."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str | None) -> Level | None:
        """Resolve a level from a logging method or level name.

        Accepts the names structlog and the standard library use
        (``warning``, ``exception``, ``fatal``...), case-insensitively.

        Args:
            name: Method or level name.

        Returns:
            The matching Level, or None for unknown names.
        """
        if not name:
            return None
        return _LEVEL_NAMES.get(name.strip().lower())

    @classmethod
    def from_number(cls, number: int) -> Level | None:
        """Resolve a level from its exact numeric value.

        Custom in-between numbers (e.g. a stdlib level 25) are outside the
        known set and resolve to None.
        """
        try:
            return cls(number)
        except ValueError:
            return None


_LEVEL_NAMES: dict[str, Level] = {
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "err": Level.ERROR,
    "critical": Level.CRITICAL,
    "fatal": Level.CRITICAL,
}


class LogSeverity(StrEnum):
    """Cloud Logging severity tokens.

    Each member carries the numeric code Cloud Logging assigns to it; the
    codes sort in severity order.
    """

    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"

    @property
    def code(self) -> int:
        """Numeric Cloud Logging code (DEFAULT=0 ... EMERGENCY=800)."""
        return _SEVERITY_CODES[self]

    @classmethod
    def parse(cls, value: Any) -> LogSeverity | None:
        """Parse an explicit severity value.

        Accepts a LogSeverity, a case-insensitive token name (``"notice"``,
        plus the ``"WARN"`` alias), or an exact numeric code. Booleans are
        never treated as codes.

        Args:
            value: Candidate severity.

        Returns:
            The parsed severity, or None if the value is not recognised.
        """
        if isinstance(value, LogSeverity):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return _SEVERITY_BY_CODE.get(value)
        if isinstance(value, str):
            token = value.strip().upper()
            if token == "WARN":
                return cls.WARNING
            try:
                return cls(token)
            except ValueError:
                return None
        return None


_SEVERITY_CODES: dict[LogSeverity, int] = {
    LogSeverity.DEFAULT: 0,
    LogSeverity.DEBUG: 100,
    LogSeverity.INFO: 200,
    LogSeverity.NOTICE: 300,
    LogSeverity.WARNING: 400,
    LogSeverity.ERROR: 500,
    LogSeverity.CRITICAL: 600,
    LogSeverity.ALERT: 700,
    LogSeverity.EMERGENCY: 800,
}

_SEVERITY_BY_CODE: dict[int, LogSeverity] = {
    code: severity for severity, code in _SEVERITY_CODES.items()
}
